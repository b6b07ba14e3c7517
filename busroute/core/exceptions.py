# busroute/core/exceptions.py


class RouteOptimizerError(Exception):
    """Base exception for the bus route optimizer."""

    def __init__(self, message: str = None):
        self.message = message
        super().__init__(self.message)


class RequestValidationError(RouteOptimizerError):
    """Raised when an optimization request is structurally incomplete."""

    def __init__(self, message: str = None, errors: list = None):
        self.errors = errors or []
        super().__init__(message or "Request validation failed")


class MissingFieldError(RequestValidationError):
    """Raised when a required top-level request field is absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}", errors=[field])


class ModelUnavailableError(RouteOptimizerError):
    """Raised when the generative model could not be reached."""

    def __init__(self, message: str = None, reason: str = None):
        self.reason = reason
        super().__init__(message or f"Generative model unavailable: {reason}")


class ModelResponseError(RouteOptimizerError):
    """Raised when the generative model returned an unusable route plan."""

    def __init__(self, failure=None, detail: str = None):
        self.failure = failure
        self.detail = detail
        label = getattr(failure, "value", failure)
        super().__init__(f"Unusable model response ({label}): {detail}")


class OptimizationError(RouteOptimizerError):
    """Raised for unexpected errors in the optimization process."""

    def __init__(self, message: str):
        super().__init__(message)


class ConfigurationError(RouteOptimizerError):
    """Raised when there's a configuration error."""

    def __init__(self, message: str = None, setting: str = None):
        self.setting = setting
        super().__init__(message or f"Configuration error for setting: {setting}")

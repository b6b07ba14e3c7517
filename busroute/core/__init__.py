# busroute/core/__init__.py
from .models import (
    GeoPoint,
    Stop,
    TrafficConditions,
    RouteConstraints,
    OptimizationRequest,
    OptimizationResult,
)
from busroute.core.config import RoutingConfig
from busroute.core.settings import Settings
from .exceptions import (
    RouteOptimizerError,
    RequestValidationError,
    MissingFieldError,
    ModelUnavailableError,
    ModelResponseError,
    OptimizationError,
)

__all__ = [
    "GeoPoint",
    "Stop",
    "TrafficConditions",
    "RouteConstraints",
    "OptimizationRequest",
    "OptimizationResult",
    "RoutingConfig",
    "Settings",
    "RouteOptimizerError",
    "RequestValidationError",
    "MissingFieldError",
    "ModelUnavailableError",
    "ModelResponseError",
    "OptimizationError",
]

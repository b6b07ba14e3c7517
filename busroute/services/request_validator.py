# busroute/services/request_validator.py
from typing import Any, Mapping

from busroute.core.exceptions import MissingFieldError, RequestValidationError

REQUIRED_FIELDS = (
    "busId",
    "currentLocation",
    "stops",
    "trafficConditions",
    "constraints",
)


def validate_request_payload(payload: Any) -> Mapping[str, Any]:
    """Check that every required top-level field is present.

    Only presence is checked. Shape and type problems surface later, when the
    payload is decoded into an ``OptimizationRequest``. An empty ``stops``
    list counts as present.

    Raises:
        RequestValidationError: if the payload is not a JSON object
        MissingFieldError: naming the first absent field
    """
    if not isinstance(payload, Mapping):
        raise RequestValidationError("Request body must be a JSON object")

    for field in REQUIRED_FIELDS:
        value = payload.get(field)
        if value is None or value == "":
            raise MissingFieldError(field)

    return payload

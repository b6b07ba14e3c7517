from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from busroute.core.models import OptimizationRequest, OptimizationResult


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    model_configured: bool = Field(..., alias="modelConfigured")
    timestamp: datetime

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())


__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "OptimizationRequest",
    "OptimizationResult",
]

from datetime import datetime, timezone
import json

import structlog
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from busroute.api.dependencies import get_metrics, get_optimization_service, get_settings
from busroute.api.schemas import ErrorResponse, HealthResponse
from busroute.core.exceptions import MissingFieldError, RequestValidationError
from busroute.core.models import OptimizationRequest, OptimizationResult
from busroute.core.settings import Settings
from busroute.monitoring.monitoring import OptimizerMetrics
from busroute.services.optimization_service import RouteOptimizationService
from busroute.services.request_validator import validate_request_payload

router = APIRouter()

logger = structlog.get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"
INVALID_BODY_MESSAGE = "Request body must be a JSON object"
OPTIMIZATION_FAILED_MESSAGE = "Failed to optimize route"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/api/optimize-route",
    response_model=OptimizationResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def optimize_route(
    request: Request,
    optimization_service: RouteOptimizationService = Depends(get_optimization_service),
    metrics: OptimizerMetrics = Depends(get_metrics),
):
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _error(400, INVALID_BODY_MESSAGE)

    try:
        validate_request_payload(payload)
    except MissingFieldError as error:
        logger.info("optimize_request_rejected", missing_field=error.field)
        return _error(400, MISSING_FIELDS_MESSAGE)
    except RequestValidationError:
        return _error(400, INVALID_BODY_MESSAGE)

    try:
        optimization_request = OptimizationRequest.model_validate(payload)
        return await optimization_service.optimize(optimization_request)
    except ValidationError as error:
        # Fields present but mistyped.
        metrics.record_failure()
        logger.error(
            "optimize_request_malformed",
            bus_id=payload.get("busId"),
            errors=error.errors(include_url=False),
        )
        return _error(500, OPTIMIZATION_FAILED_MESSAGE)
    except Exception:
        metrics.record_failure()
        logger.exception("route_optimization_failed", bus_id=payload.get("busId"))
        return _error(500, OPTIMIZATION_FAILED_MESSAGE)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Report liveness and whether the model-backed planner is available."""
    return HealthResponse(
        status="healthy",
        model_configured=settings.model_configured,
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/metrics")
async def metrics_endpoint(metrics: OptimizerMetrics = Depends(get_metrics)):
    return Response(content=metrics.render(), media_type=metrics.content_type)

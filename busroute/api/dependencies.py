from functools import lru_cache
from typing import Dict, Tuple

from fastapi import Depends

from busroute.core.settings import Settings
from busroute.monitoring.monitoring import OptimizerMetrics
from busroute.services.optimization_service import (
    RouteOptimizationService,
    build_optimization_service,
)

# Keyed by id(settings); the settings object is kept to guard against id reuse.
_services: Dict[int, Tuple[Settings, RouteOptimizationService]] = {}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def get_metrics() -> OptimizerMetrics:
    return OptimizerMetrics()


def get_optimization_service(
    settings: Settings = Depends(get_settings),
    metrics: OptimizerMetrics = Depends(get_metrics),
) -> RouteOptimizationService:
    """One service per settings object, shared by every request."""
    cached = _services.get(id(settings))
    if cached is not None and cached[0] is settings:
        return cached[1]

    service = build_optimization_service(
        settings, metrics=metrics if settings.METRICS_ENABLED else None
    )
    _services[id(settings)] = (settings, service)
    return service


async def close_optimization_services():
    """Close every cached service and forget it."""
    services = [service for _, service in _services.values()]
    _services.clear()
    for service in services:
        await service.aclose()

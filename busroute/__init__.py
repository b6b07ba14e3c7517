# busroute/__init__.py
"""
School bus route optimizer package.
"""
from busroute.core.settings import Settings
from busroute.core.config import RoutingConfig
from busroute.core.exceptions import RouteOptimizerError
from busroute.services.optimization_service import (
    RouteOptimizationService,
    build_optimization_service,
)
from busroute.monitoring.monitoring import OptimizerMetrics

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "RoutingConfig",
    "RouteOptimizerError",
    "RouteOptimizationService",
    "build_optimization_service",
    "OptimizerMetrics",
]

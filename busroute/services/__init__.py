# busroute/services/__init__.py
from busroute.services.heuristic_optimizer import HeuristicRouteOptimizer
from busroute.services.model_optimizer import ModelRouteOptimizer
from busroute.services.optimization_service import (
    RouteOptimizationService,
    build_optimization_service,
)
from busroute.services.request_validator import validate_request_payload
from busroute.services.response_parser import ParseFailure, ParseResult, parse_route_plan
from busroute.services.strategies import FallbackReason, RouteStrategy

__all__ = [
    "HeuristicRouteOptimizer",
    "ModelRouteOptimizer",
    "RouteOptimizationService",
    "build_optimization_service",
    "validate_request_payload",
    "ParseFailure",
    "ParseResult",
    "parse_route_plan",
    "FallbackReason",
    "RouteStrategy",
]

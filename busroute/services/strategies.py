# busroute/services/strategies.py
from abc import ABC, abstractmethod
from enum import Enum

from busroute.core.models import OptimizationRequest, OptimizationResult


class FallbackReason(str, Enum):
    """Why the heuristic planner ran instead of the model-backed one."""

    MODEL_FAILED = "model_failed"
    MODEL_UNCONFIGURED = "model_unconfigured"


class RouteStrategy(ABC):
    """A way of turning one bus's request into a route plan.

    Implementations hold no per-call state and may be shared between
    concurrent requests.
    """

    name = "strategy"

    @abstractmethod
    async def compute_route(self, request: OptimizationRequest) -> OptimizationResult:
        """Produce a route plan for a single bus."""

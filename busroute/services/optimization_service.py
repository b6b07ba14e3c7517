# busroute/services/optimization_service.py
from contextlib import nullcontext
from typing import Optional

from busroute.core.config import RoutingConfig
from busroute.core.exceptions import OptimizationError
from busroute.core.models import OptimizationRequest, OptimizationResult
from busroute.core.settings import Settings
from busroute.monitoring.monitoring import OptimizerMetrics
from busroute.services.base_service import BaseService
from busroute.services.heuristic_optimizer import HeuristicRouteOptimizer
from busroute.services.llm_client import GeminiTextClient, GenerativeTextClient
from busroute.services.model_optimizer import ModelRouteOptimizer
from busroute.services.prompts import RoutePromptBuilder
from busroute.services.strategies import FallbackReason, RouteStrategy


class RouteOptimizationService(BaseService):
    """Chooses between the model-backed planner and the heuristic.

    The model-backed planner is tried exactly once when it is configured.
    Any exception it raises is logged and answered with the heuristic, so a
    model outage never fails the request. Only a failure of the heuristic
    itself escapes, as ``OptimizationError``.
    """

    def __init__(
        self,
        settings: Settings,
        model_optimizer: Optional[RouteStrategy] = None,
        heuristic: Optional[HeuristicRouteOptimizer] = None,
        metrics: Optional[OptimizerMetrics] = None,
    ):
        super().__init__(settings, metrics)
        self.model_optimizer = model_optimizer
        self.heuristic = heuristic or HeuristicRouteOptimizer()

    @property
    def model_enabled(self) -> bool:
        return self.model_optimizer is not None

    async def optimize(self, request: OptimizationRequest) -> OptimizationResult:
        """Plan a route for one bus."""
        timer = self.metrics.track_duration() if self.metrics else nullcontext()
        with timer:
            if self.model_optimizer is None:
                return await self._run_heuristic(
                    request, FallbackReason.MODEL_UNCONFIGURED
                )

            try:
                result = await self.model_optimizer.compute_route(request)
            except Exception as e:
                self.logger.warning(
                    "model_route_failed",
                    bus_id=request.bus_id,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                return await self._run_heuristic(request, FallbackReason.MODEL_FAILED)

            self._record_success(self.model_optimizer.name)
            return result

    async def _run_heuristic(
        self, request: OptimizationRequest, reason: FallbackReason
    ) -> OptimizationResult:
        if self.metrics:
            self.metrics.record_fallback(reason.value)
        try:
            result = await self._execute_operation(
                "heuristic_route", self.heuristic.compute_route, request, reason=reason
            )
        except Exception as e:
            raise OptimizationError(f"Heuristic route planning failed: {e}") from e

        self._record_success(self.heuristic.name)
        return result

    async def aclose(self):
        close = getattr(self.model_optimizer, "aclose", None)
        if close is not None:
            await close()

    def _record_success(self, strategy: str):
        if self.metrics:
            self.metrics.record_success(strategy)


def build_optimization_service(
    settings: Settings,
    client: Optional[GenerativeTextClient] = None,
    config: Optional[RoutingConfig] = None,
    metrics: Optional[OptimizerMetrics] = None,
) -> RouteOptimizationService:
    """Wire the service from settings.

    The model-backed planner is only created when a client is supplied or a
    Gemini API key is configured; otherwise the service runs heuristic-only.
    """
    config = config or RoutingConfig()
    if client is None and settings.model_configured:
        client = GeminiTextClient(api_key=settings.GEMINI_API_KEY)

    model_optimizer = None
    if client is not None:
        model_optimizer = ModelRouteOptimizer(
            client,
            settings,
            prompt_builder=RoutePromptBuilder(
                fuel_efficiency_km_per_liter=config.FUEL_EFFICIENCY_KM_PER_LITER,
                emission_factor=config.emission_factor,
            ),
        )

    return RouteOptimizationService(
        settings,
        model_optimizer=model_optimizer,
        heuristic=HeuristicRouteOptimizer(config),
        metrics=metrics,
    )

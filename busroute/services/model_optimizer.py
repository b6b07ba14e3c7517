# busroute/services/model_optimizer.py
import asyncio
from typing import Optional

import structlog

from busroute.core.exceptions import ModelResponseError, ModelUnavailableError
from busroute.core.models import OptimizationRequest, OptimizationResult
from busroute.core.settings import Settings
from busroute.services.llm_client import GenerativeTextClient
from busroute.services.prompts import RoutePromptBuilder
from busroute.services.response_parser import parse_route_plan
from busroute.services.strategies import RouteStrategy

logger = structlog.get_logger(__name__)


class ModelRouteOptimizer(RouteStrategy):
    """Delegates route planning to a generative text model.

    The model is a best-effort planner: its JSON is decoded and returned as
    is, without checking its arithmetic. Any problem reaching the model or
    reading its answer is raised so the caller can fall back.
    """

    name = "model"

    def __init__(
        self,
        client: GenerativeTextClient,
        settings: Settings,
        prompt_builder: Optional[RoutePromptBuilder] = None,
    ):
        self.client = client
        self.settings = settings
        self.prompt_builder = prompt_builder or RoutePromptBuilder()

    async def compute_route(self, request: OptimizationRequest) -> OptimizationResult:
        prompt = self.prompt_builder.build(request)
        text = await self._generate(prompt)

        parsed = parse_route_plan(text)
        if not parsed.success:
            logger.warning(
                "model_response_unusable",
                bus_id=request.bus_id,
                failure=parsed.failure.value,
                response_chars=len(text or ""),
            )
            raise ModelResponseError(parsed.failure, parsed.detail)

        logger.info(
            "model_route_planned",
            bus_id=request.bus_id,
            stops=len(parsed.value.optimized_route),
        )
        return parsed.value

    async def aclose(self):
        """Release the client's connections, if it holds any."""
        close = getattr(self.client, "aclose", None)
        if close is not None:
            await close()

    async def _generate(self, prompt: str) -> str:
        try:
            return await asyncio.wait_for(
                self.client.generate(
                    prompt,
                    model=self.settings.GEMINI_MODEL,
                    temperature=self.settings.LLM_TEMPERATURE,
                    max_output_tokens=self.settings.LLM_MAX_OUTPUT_TOKENS,
                ),
                timeout=self.settings.LLM_TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError as e:
            raise ModelUnavailableError(
                f"Model call exceeded {self.settings.LLM_TIMEOUT_SECONDS}s",
                reason="timeout",
            ) from e
        except Exception as e:
            raise ModelUnavailableError(reason=f"{type(e).__name__}: {e}") from e

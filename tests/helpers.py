# tests/helpers.py
import asyncio
import math
from datetime import datetime
from typing import List, Optional

from busroute.core.models import OptimizationRequest
from busroute.monitoring.monitoring import OptimizerMetrics
from busroute.services.heuristic_optimizer import HeuristicRouteOptimizer

# One kilometre of latitude along a meridian, in degrees.
KM_LAT = 180 / (6371.0 * math.pi)

ORIGIN_LAT = 40.0
ORIGIN_LNG = -75.0
START_TIME = datetime(2024, 9, 3, 7, 0)


class FakeTextClient:
    """Stands in for the Gemini client."""

    def __init__(self, response: str = "", error: Exception = None, delay: float = 0.0):
        self.response = response
        self.error = error
        self.delay = delay
        self.calls: List[dict] = []
        self.closed = False

    async def generate(self, prompt, *, model, temperature, max_output_tokens):
        self.calls.append(
            {
                "prompt": prompt,
                "model": model,
                "temperature": temperature,
                "max_output_tokens": max_output_tokens,
            }
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.response

    async def aclose(self):
        self.closed = True


class BrokenHeuristic(HeuristicRouteOptimizer):
    """A planner with a defect in its own arithmetic."""

    def plan(self, request, reason=None):
        raise ZeroDivisionError("bad arithmetic")


def make_stop(
    stop_id: str, km_north: float, students: int = 3, priority: Optional[str] = None
) -> dict:
    stop = {
        "id": stop_id,
        "name": f"Stop {stop_id}",
        "latitude": ORIGIN_LAT + km_north * KM_LAT,
        "longitude": ORIGIN_LNG,
        "studentsCount": students,
    }
    if priority:
        stop["priority"] = priority
    return stop


def make_payload(
    stops=None, overall: str = "light", max_route_time: float = 60, incidents=None
) -> dict:
    return {
        "busId": "BUS-12",
        "currentLocation": {"latitude": ORIGIN_LAT, "longitude": ORIGIN_LNG},
        "stops": stops if stops is not None else [],
        "trafficConditions": {"overall": overall, "incidents": incidents or []},
        "constraints": {
            "maxCapacity": 40,
            "schoolStartTime": "08:15",
            "maxRouteTimeMinutes": max_route_time,
            "fuelEfficiencyTargetKmPerLiter": 5.0,
        },
    }


def make_request(**kwargs) -> OptimizationRequest:
    return OptimizationRequest.model_validate(make_payload(**kwargs))


def sample_value(metrics: OptimizerMetrics, name: str, labels: Optional[dict] = None) -> float:
    """Current value of a metric sample, 0.0 when not yet observed."""
    return metrics.registry.get_sample_value(name, labels or {}) or 0.0

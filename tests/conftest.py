# tests/conftest.py
import json
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from busroute.api import app
from busroute.api.dependencies import get_settings
from busroute.core.config import RoutingConfig
from busroute.core.models import OptimizationRequest, OptimizationResult
from busroute.core.settings import Settings
from busroute.monitoring.monitoring import OptimizerMetrics
from busroute.services.heuristic_optimizer import HeuristicRouteOptimizer
from tests.helpers import START_TIME, make_payload, make_stop


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        GEMINI_API_KEY=None,
        LLM_TIMEOUT_SECONDS=0.5,
        LOG_JSON=False,
    )


@pytest.fixture
def routing_config() -> RoutingConfig:
    return RoutingConfig()


@pytest.fixture
def heuristic(routing_config) -> HeuristicRouteOptimizer:
    return HeuristicRouteOptimizer(routing_config, clock=lambda: START_TIME)


@pytest.fixture
def metrics() -> OptimizerMetrics:
    return OptimizerMetrics()


@pytest.fixture
def sample_payload() -> dict:
    return make_payload(
        stops=[
            make_stop("A", 3.0, students=4),
            make_stop("B", 1.0, students=2, priority="low"),
            make_stop("C", 2.0, students=5, priority="high"),
        ],
        overall="moderate",
        incidents=[{"location": "Main St", "type": "accident", "delayMinutes": 10}],
    )


@pytest.fixture
def sample_request(sample_payload) -> OptimizationRequest:
    return OptimizationRequest.model_validate(sample_payload)


@pytest.fixture
def model_plan() -> OptimizationResult:
    """A plan as the generative model might return it."""
    return OptimizationResult.model_validate(
        {
            "optimizedRoute": [
                {
                    "stopId": "C",
                    "stopName": "Stop C",
                    "sequence": 1,
                    "eta": "07:06 AM",
                    "studentsToPickup": 5,
                    "estimatedDelayMinutes": 1,
                },
                {
                    "stopId": "A",
                    "stopName": "Stop A",
                    "sequence": 2,
                    "eta": "07:11 AM",
                    "studentsToPickup": 4,
                    "estimatedDelayMinutes": 0,
                },
            ],
            "totalDistanceKm": 3.4,
            "totalTimeMinutes": 14,
            "fuelEstimateLiters": 0.8,
            "carbonFootprintKg": 2.1,
            "efficiency": {
                "routeEfficiencyPercent": 88,
                "fuelEfficiencyKmPerLiter": 4.5,
                "timeEfficiencyPercent": 77,
            },
            "alerts": [
                {"type": "traffic", "message": "Accident on Main St", "severity": "medium"}
            ],
        }
    )


@pytest.fixture
def model_plan_text(model_plan) -> str:
    return "Here is the optimized plan:\n```json\n" + json.dumps(model_plan.to_dict()) + "\n```"


@pytest.fixture
def test_client(settings) -> Generator:
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

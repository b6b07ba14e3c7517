# tests/test_core/test_models.py
import pytest
from pydantic import ValidationError

from busroute.core.models import (
    OptimizationRequest,
    OptimizationResult,
    Priority,
    TrafficLevel,
)
from tests.helpers import make_payload, make_stop


def test_request_from_camel_case_payload():
    request = OptimizationRequest.model_validate(
        make_payload(stops=[make_stop("A", 1.0, priority="high")], overall="heavy")
    )

    assert request.bus_id == "BUS-12"
    assert request.stops[0].priority == Priority.HIGH
    assert request.traffic_conditions.overall == TrafficLevel.HEAVY
    assert request.constraints.max_route_time_minutes == 60
    assert request.total_students == 3


def test_request_accepts_dashboard_field_names():
    """Payloads posted by the dashboard use lat/lng and shorter constraint names."""
    request = OptimizationRequest.model_validate(
        {
            "busId": "BUS-7",
            "currentLocation": {"lat": 12.97, "lng": 77.59},
            "stops": [
                {"id": "s1", "name": "Gate", "lat": 12.98, "lng": 77.6, "studentsCount": 2}
            ],
            "trafficConditions": {
                "overall": "moderate",
                "incidents": [{"location": "MG Road", "type": "roadwork", "delay": 5}],
            },
            "constraints": {
                "maxCapacity": 30,
                "schoolStartTime": "8:00",
                "maxRouteTime": 45,
                "fuelEfficiencyTarget": 4.0,
            },
        }
    )

    assert request.current_location.latitude == 12.97
    assert request.stops[0].longitude == 77.6
    assert request.traffic_conditions.incidents[0].delay_minutes == 5
    assert request.constraints.max_route_time_minutes == 45
    assert request.constraints.fuel_efficiency_target_km_per_liter == 4.0


def test_missing_or_null_incidents_default_to_empty():
    payload = make_payload()
    del payload["trafficConditions"]["incidents"]
    assert OptimizationRequest.model_validate(payload).traffic_conditions.incidents == []

    payload["trafficConditions"]["incidents"] = None
    assert OptimizationRequest.model_validate(payload).traffic_conditions.incidents == []


def test_empty_stop_list_is_valid():
    assert OptimizationRequest.model_validate(make_payload(stops=[])).stops == []


@pytest.mark.parametrize(
    "mutate",
    [
        lambda p: p["stops"].append(make_stop("X", 1.0, priority="urgent")),
        lambda p: p["stops"].append(make_stop("X", 1.0, students=-1)),
        lambda p: p["trafficConditions"].update(overall="gridlock"),
        lambda p: p["constraints"].update(schoolStartTime="quarter past eight"),
        lambda p: p["constraints"].update(maxCapacity=0),
        lambda p: p["currentLocation"].update(latitude=120),
    ],
)
def test_request_shape_errors(mutate):
    payload = make_payload()
    mutate(payload)
    with pytest.raises(ValidationError):
        OptimizationRequest.model_validate(payload)


def test_result_accepts_original_output_names():
    result = OptimizationResult.model_validate(
        {
            "optimizedRoute": [
                {
                    "stopId": "s1",
                    "stopName": "Gate",
                    "sequence": 1,
                    "eta": "07:10 AM",
                    "studentsToPickup": 2,
                    "estimatedDelay": 3,
                }
            ],
            "totalDistance": 4.2,
            "totalTime": 12,
            "fuelEstimate": 0.9,
            "carbonFootprint": 2.5,
            "efficiency": {
                "routeEfficiency": 91,
                "fuelEfficiency": 4.5,
                "timeEfficiency": 73,
            },
            "alerts": [],
            "alternativeRoutes": [
                {"routeName": "Ring Road", "timeSaved": 4, "fuelSaved": 0.3, "reason": "Faster"}
            ],
        }
    )

    assert result.optimized_route[0].estimated_delay_minutes == 3
    assert result.total_distance_km == 4.2
    assert result.alternative_routes[0].time_saved_minutes == 4


def test_result_serializes_with_camel_case_and_omits_missing_alternatives(model_plan):
    data = model_plan.to_dict()

    assert "alternativeRoutes" not in data
    assert data["totalDistanceKm"] == 3.4
    assert data["optimizedRoute"][0]["estimatedDelayMinutes"] == 1
    assert data["efficiency"]["fuelEfficiencyKmPerLiter"] == 4.5
    assert data["alerts"][0] == {
        "type": "traffic",
        "message": "Accident on Main St",
        "severity": "medium",
    }
    assert OptimizationResult.from_dict(data) == model_plan


def test_wire_models_accept_field_names_and_aliases():
    assert OptimizationRequest.model_config["populate_by_name"] is True
    result = OptimizationResult.model_validate(
        {
            "optimized_route": [],
            "totalDistanceKm": 0,
            "total_time_minutes": 0,
            "fuelEstimateLiters": 0,
            "carbon_footprint_kg": 0,
            "efficiency": {
                "route_efficiency_percent": 95,
                "fuelEfficiencyKmPerLiter": 4.5,
                "time_efficiency_percent": 95,
            },
            "alerts": [],
        }
    )
    assert result.to_dict()["efficiency"]["routeEfficiencyPercent"] == 95

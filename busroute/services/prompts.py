# busroute/services/prompts.py
import json
from typing import List

from busroute.core.geo import format_number
from busroute.core.models import OptimizationRequest, Stop, TrafficIncident

PLANNING_OBJECTIVES = [
    "Optimize the stop sequence for minimum travel time and fuel consumption",
    "Calculate accurate ETAs for each stop considering traffic",
    "Identify potential delays and bottlenecks",
    "Calculate fuel consumption and carbon footprint",
    "Suggest alternative routes if traffic is severe",
    "Consider student pickup priorities (special needs, long wait times)",
    "Ensure arrival at school before {school_start_time}",
]

RESPONSE_SHAPE = {
    "optimizedRoute": [
        {
            "stopId": "string",
            "stopName": "string",
            "sequence": 1,
            "eta": "07:45 AM",
            "studentsToPickup": 0,
            "estimatedDelayMinutes": 0,
        }
    ],
    "totalDistanceKm": 0.0,
    "totalTimeMinutes": 0,
    "fuelEstimateLiters": 0.0,
    "carbonFootprintKg": 0.0,
    "efficiency": {
        "routeEfficiencyPercent": 0,
        "fuelEfficiencyKmPerLiter": 0.0,
        "timeEfficiencyPercent": 0,
    },
    "alerts": [
        {
            "type": "traffic | delay | capacity | fuel",
            "message": "string",
            "severity": "low | medium | high",
        }
    ],
    "alternativeRoutes": [
        {
            "routeName": "string",
            "timeSavedMinutes": 0,
            "fuelSavedLiters": 0.0,
            "reason": "string",
        }
    ],
}


class RoutePromptBuilder:
    """Render an optimization request as a planning prompt."""

    def __init__(self, fuel_efficiency_km_per_liter: float = 4.5, emission_factor: float = 2.68):
        self.fuel_efficiency_km_per_liter = fuel_efficiency_km_per_liter
        self.emission_factor = emission_factor

    def build(self, request: OptimizationRequest) -> str:
        constraints = request.constraints
        traffic = request.traffic_conditions
        objectives = "\n".join(
            f"{idx}. {objective.format(school_start_time=constraints.school_start_time)}"
            for idx, objective in enumerate(PLANNING_OBJECTIVES, start=1)
        )

        sections = [
            "You are an expert AI route optimization system for school buses. "
            "Analyze the following data and provide optimal routing recommendations:",
            "",
            "**Current Situation:**",
            f"- Bus ID: {request.bus_id}",
            f"- Current Location: {request.current_location.latitude}, "
            f"{request.current_location.longitude}",
            f"- Number of Stops: {len(request.stops)}",
            f"- Traffic Conditions: {traffic.overall.value}",
            f"- School Start Time: {constraints.school_start_time}",
            f"- Max Route Time: {format_number(constraints.max_route_time_minutes)} minutes",
            f"- Bus Capacity: {constraints.max_capacity}",
            f"- Students to Pick Up: {request.total_students}",
            "",
            "**Stops to Visit:**",
            self._format_stops(request.stops),
            "",
            "**Traffic Incidents:**",
            self._format_incidents(traffic.incidents),
            "",
            "**Your Task:**",
            objectives,
            "",
            "**Optimization Criteria:**",
            "- Minimize total distance and time",
            "- Avoid traffic incidents",
            "- Maximize fuel efficiency (target: "
            f"{format_number(constraints.fuel_efficiency_target_km_per_liter)} km/l)",
            "- Prioritize high-priority stops",
            "- Balance between speed and safety",
            "",
            "Provide a detailed optimization plan with:",
            "- Optimal stop sequence with ETAs",
            "- Total distance and estimated time",
            "- Fuel consumption estimate (diesel bus, average "
            f"{format_number(self.fuel_efficiency_km_per_liter)} km/l in city)",
            f"- Carbon footprint (diesel: {format_number(self.emission_factor)} kg CO2 per liter)",
            "- Route efficiency metrics",
            "- Any alerts or warnings",
            "- Alternative route suggestions if beneficial",
            "",
            "Respond with a single JSON object and nothing else. Use exactly these keys "
            "(omit alternativeRoutes when there is no useful alternative):",
            json.dumps(RESPONSE_SHAPE, indent=2),
        ]
        return "\n".join(sections)

    @staticmethod
    def _format_stops(stops: List[Stop]) -> str:
        if not stops:
            return "None"
        lines = []
        for idx, stop in enumerate(stops, start=1):
            line = (
                f"{idx}. {stop.name} ({stop.latitude}, {stop.longitude}) - "
                f"{stop.students_count} students"
            )
            if stop.priority:
                line += f" [{stop.priority.value} priority]"
            lines.append(line)
        return "\n".join(lines)

    @staticmethod
    def _format_incidents(incidents: List[TrafficIncident]) -> str:
        if not incidents:
            return "None reported"
        return "\n".join(
            f"- {incident.type} at {incident.location}: "
            f"+{format_number(incident.delay_minutes)} min delay"
            for incident in incidents
        )

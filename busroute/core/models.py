# models.py

from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def wire_field(name: str, *legacy: str, **kwargs: Any) -> Any:
    """Field serialized as ``name`` that also accepts older dashboard names."""
    return Field(
        alias=name,
        validation_alias=AliasChoices(name, *legacy),
        **kwargs,
    )


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TrafficLevel(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    SEVERE = "severe"


class AlertType(str, Enum):
    TRAFFIC = "traffic"
    DELAY = "delay"
    CAPACITY = "capacity"
    FUEL = "fuel"


class AlertSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class WireModel(BaseModel):
    """Base for camelCase JSON models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict):
        return cls.model_validate(data)


# Request side


class GeoPoint(WireModel):
    latitude: float = wire_field("latitude", "lat", ge=-90, le=90)
    longitude: float = wire_field("longitude", "lng", "lon", ge=-180, le=180)


class Stop(WireModel):
    id: str
    name: str
    latitude: float = wire_field("latitude", "lat", ge=-90, le=90)
    longitude: float = wire_field("longitude", "lng", "lon", ge=-180, le=180)
    students_count: int = Field(..., ge=0)
    priority: Optional[Priority] = None


class TrafficIncident(WireModel):
    location: str
    type: str
    delay_minutes: float = wire_field("delayMinutes", "delay", ge=0)


class TrafficConditions(WireModel):
    overall: TrafficLevel
    incidents: List[TrafficIncident] = Field(default_factory=list)

    @field_validator("incidents", mode="before")
    @classmethod
    def default_incidents(cls, value):
        return [] if value is None else value


class RouteConstraints(WireModel):
    max_capacity: int = Field(..., gt=0)
    school_start_time: str = Field(..., pattern=r"^([01]?\d|2[0-3]):[0-5]\d$")
    # Not lower-bounded; the heuristic guards the division.
    max_route_time_minutes: float = wire_field("maxRouteTimeMinutes", "maxRouteTime")
    fuel_efficiency_target_km_per_liter: float = wire_field(
        "fuelEfficiencyTargetKmPerLiter", "fuelEfficiencyTarget", gt=0
    )


class OptimizationRequest(WireModel):
    bus_id: str
    current_location: GeoPoint
    stops: List[Stop]
    traffic_conditions: TrafficConditions
    constraints: RouteConstraints

    @property
    def total_students(self) -> int:
        return sum(stop.students_count for stop in self.stops)


# Result side


class RouteStop(WireModel):
    stop_id: str
    stop_name: str
    sequence: int = Field(..., ge=1)
    eta: str
    students_to_pickup: int = Field(..., ge=0)
    estimated_delay_minutes: float = wire_field(
        "estimatedDelayMinutes", "estimatedDelay", ge=0
    )


class RouteEfficiency(WireModel):
    route_efficiency_percent: float = wire_field(
        "routeEfficiencyPercent", "routeEfficiency"
    )
    fuel_efficiency_km_per_liter: float = wire_field(
        "fuelEfficiencyKmPerLiter", "fuelEfficiency", ge=0
    )
    time_efficiency_percent: float = wire_field(
        "timeEfficiencyPercent", "timeEfficiency"
    )


class RouteAlert(WireModel):
    type: AlertType
    message: str
    severity: AlertSeverity


class AlternativeRoute(WireModel):
    route_name: str
    time_saved_minutes: float = wire_field("timeSavedMinutes", "timeSaved")
    fuel_saved_liters: float = wire_field("fuelSavedLiters", "fuelSaved")
    reason: str


class OptimizationResult(WireModel):
    optimized_route: List[RouteStop]
    total_distance_km: float = wire_field("totalDistanceKm", "totalDistance", ge=0)
    total_time_minutes: float = wire_field("totalTimeMinutes", "totalTime", ge=0)
    fuel_estimate_liters: float = wire_field(
        "fuelEstimateLiters", "fuelEstimate", ge=0
    )
    carbon_footprint_kg: float = wire_field(
        "carbonFootprintKg", "carbonFootprint", ge=0
    )
    efficiency: RouteEfficiency
    alerts: List[RouteAlert] = Field(default_factory=list)
    alternative_routes: Optional[List[AlternativeRoute]] = None

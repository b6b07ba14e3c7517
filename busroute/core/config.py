# core/config.py

from typing import Dict
from pydantic import BaseModel

from busroute.core.models import Priority, TrafficLevel


class RoutingConfig(BaseModel):
    """Physical constants and tuning knobs for the heuristic route planner."""

    # Geometry
    EARTH_RADIUS_KM: float = 6371.0

    # Travel time
    AVERAGE_SPEED_KMH: float = 30.0
    STOP_DWELL_MINUTES: float = 2.0
    TRAFFIC_MULTIPLIERS: Dict[TrafficLevel, float] = {
        TrafficLevel.LIGHT: 1.0,
        TrafficLevel.MODERATE: 1.3,
        TrafficLevel.HEAVY: 1.6,
        TrafficLevel.SEVERE: 2.0,
    }

    # Stop selection, in km-equivalents added to the distance score
    PRIORITY_BONUS_KM: Dict[Priority, float] = {
        Priority.HIGH: -5.0,
        Priority.MEDIUM: 0.0,
        Priority.LOW: 5.0,
    }

    # Fuel and emissions
    FUEL_EFFICIENCY_KM_PER_LITER: float = 4.5
    SEVERE_FUEL_EFFICIENCY_KM_PER_LITER: float = 3.5
    FUEL_TYPE: str = "diesel"
    EMISSION_FACTORS_KG_PER_LITER: Dict[str, float] = {
        "diesel": 2.68,
        "petrol": 2.31,
        "cng": 1.88,
    }

    # Scoring
    EFFICIENCY_CAP_PERCENT: float = 95.0
    ROUTE_EFFICIENCY_TRAFFIC_PENALTY: float = 30.0

    # Synthetic alternative offered under severe traffic
    ALTERNATE_ROUTE_NAME: str = "Alternate Route via Highway"
    ALTERNATE_ROUTE_TIME_SAVED_MINUTES: float = 15.0
    ALTERNATE_ROUTE_FUEL_SAVED_LITERS: float = 2.5
    ALTERNATE_ROUTE_REASON: str = "Avoid congested city center"

    # Notices attached to every heuristic result
    MODEL_FAILED_NOTICE: str = "Using fallback optimization due to AI processing error"
    MODEL_UNCONFIGURED_NOTICE: str = (
        "AI optimization unavailable - configure GEMINI_API_KEY for enhanced routing"
    )

    ETA_FORMAT: str = "%I:%M %p"

    def traffic_multiplier(self, level: TrafficLevel) -> float:
        return self.TRAFFIC_MULTIPLIERS[level]

    def priority_bonus(self, priority) -> float:
        if priority is None:
            return 0.0
        return self.PRIORITY_BONUS_KM.get(priority, 0.0)

    def fuel_efficiency(self, level: TrafficLevel) -> float:
        if level == TrafficLevel.SEVERE:
            return self.SEVERE_FUEL_EFFICIENCY_KM_PER_LITER
        return self.FUEL_EFFICIENCY_KM_PER_LITER

    @property
    def emission_factor(self) -> float:
        return self.EMISSION_FACTORS_KG_PER_LITER[self.FUEL_TYPE]

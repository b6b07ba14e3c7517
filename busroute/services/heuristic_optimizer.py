# busroute/services/heuristic_optimizer.py
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Tuple

import structlog

from busroute.core.config import RoutingConfig
from busroute.core.geo import format_number, haversine_km, round_half_up, round_int
from busroute.core.models import (
    AlertSeverity,
    AlertType,
    AlternativeRoute,
    OptimizationRequest,
    OptimizationResult,
    RouteAlert,
    RouteEfficiency,
    RouteStop,
    Stop,
    TrafficLevel,
)
from busroute.services.strategies import FallbackReason, RouteStrategy

logger = structlog.get_logger(__name__)


class HeuristicRouteOptimizer(RouteStrategy):
    """Priority-biased nearest-neighbour planner with closed-form estimates.

    Starting from the bus position, repeatedly visit the unvisited stop with
    the smallest ``distance + priority bonus`` score. Travel time follows
    from an average city speed scaled by the traffic multiplier, and fuel and
    emissions follow from distance. The result is fast and deterministic but
    not optimal.
    """

    name = "heuristic"

    def __init__(
        self,
        config: Optional[RoutingConfig] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config or RoutingConfig()
        self.clock = clock

    async def compute_route(
        self,
        request: OptimizationRequest,
        reason: FallbackReason = FallbackReason.MODEL_UNCONFIGURED,
    ) -> OptimizationResult:
        return self.plan(request, reason)

    def plan(
        self,
        request: OptimizationRequest,
        reason: FallbackReason = FallbackReason.MODEL_UNCONFIGURED,
    ) -> OptimizationResult:
        """Synchronous planning entry point."""
        config = self.config
        level = request.traffic_conditions.overall
        multiplier = config.traffic_multiplier(level)
        started_at = self.clock()

        route, total_distance, elapsed = self._sequence_stops(
            request, multiplier, started_at
        )

        total_time = round_int(elapsed)
        fuel_efficiency = config.fuel_efficiency(level)
        fuel_estimate = total_distance / fuel_efficiency
        carbon_footprint = fuel_estimate * config.emission_factor
        max_route_time = request.constraints.max_route_time_minutes

        result = OptimizationResult(
            optimized_route=route,
            total_distance_km=round_half_up(total_distance, 1),
            total_time_minutes=total_time,
            fuel_estimate_liters=round_half_up(fuel_estimate, 1),
            carbon_footprint_kg=round_half_up(carbon_footprint, 1),
            efficiency=RouteEfficiency(
                route_efficiency_percent=self._route_efficiency(multiplier),
                fuel_efficiency_km_per_liter=round_half_up(fuel_efficiency, 1),
                time_efficiency_percent=self._time_efficiency(total_time, max_route_time),
            ),
            alerts=self._build_alerts(level, total_time, max_route_time, reason),
            alternative_routes=self._alternative_routes(level),
        )

        logger.info(
            "heuristic_route_planned",
            bus_id=request.bus_id,
            stops=len(route),
            distance_km=result.total_distance_km,
            time_minutes=total_time,
            reason=reason.value,
        )
        return result

    def _sequence_stops(
        self, request: OptimizationRequest, multiplier: float, started_at: datetime
    ) -> Tuple[List[RouteStop], float, float]:
        config = self.config
        current_lat = request.current_location.latitude
        current_lng = request.current_location.longitude
        unvisited = list(request.stops)
        route: List[RouteStop] = []
        total_distance = 0.0
        elapsed = 0.0

        while unvisited:
            idx, distance = self._select_next(current_lat, current_lng, unvisited)
            stop = unvisited.pop(idx)
            total_distance += distance

            travel_time = (distance / config.AVERAGE_SPEED_KMH) * 60 * multiplier
            elapsed += travel_time + config.STOP_DWELL_MINUTES

            route.append(
                RouteStop(
                    stop_id=stop.id,
                    stop_name=stop.name,
                    sequence=len(route) + 1,
                    eta=self._format_eta(started_at, elapsed),
                    students_to_pickup=stop.students_count,
                    estimated_delay_minutes=round_int((multiplier - 1) * travel_time),
                )
            )
            current_lat, current_lng = stop.latitude, stop.longitude

        return route, total_distance, elapsed

    def _select_next(
        self, lat: float, lng: float, candidates: List[Stop]
    ) -> Tuple[int, float]:
        """Index and distance of the best-scoring stop; first one wins ties."""
        best_idx = 0
        best_score = float("inf")
        best_distance = 0.0
        for idx, stop in enumerate(candidates):
            distance = haversine_km(
                lat, lng, stop.latitude, stop.longitude, self.config.EARTH_RADIUS_KM
            )
            score = distance + self.config.priority_bonus(stop.priority)
            if score < best_score:
                best_idx, best_score, best_distance = idx, score, distance
        return best_idx, best_distance

    def _format_eta(self, started_at: datetime, elapsed_minutes: float) -> str:
        # Whole seconds, so float drift cannot pull an ETA back a minute.
        eta = started_at + timedelta(seconds=round(elapsed_minutes * 60))
        return eta.strftime(self.config.ETA_FORMAT)

    def _route_efficiency(self, multiplier: float) -> float:
        penalty = (multiplier - 1) * self.config.ROUTE_EFFICIENCY_TRAFFIC_PENALTY
        return min(self.config.EFFICIENCY_CAP_PERCENT, round_int(100 - penalty))

    def _time_efficiency(self, total_time: float, max_route_time: float) -> float:
        # Only upper-clamped: a route far over budget reports a negative score.
        if max_route_time <= 0:
            return 0
        return min(
            self.config.EFFICIENCY_CAP_PERCENT,
            round_int(100 - (total_time / max_route_time) * 100),
        )

    def _build_alerts(
        self,
        level: TrafficLevel,
        total_time: float,
        max_route_time: float,
        reason: FallbackReason,
    ) -> List[RouteAlert]:
        notice = (
            self.config.MODEL_FAILED_NOTICE
            if reason == FallbackReason.MODEL_FAILED
            else self.config.MODEL_UNCONFIGURED_NOTICE
        )
        alerts = [
            RouteAlert(type=AlertType.TRAFFIC, message=notice, severity=AlertSeverity.LOW)
        ]

        if level in (TrafficLevel.HEAVY, TrafficLevel.SEVERE):
            alerts.append(
                RouteAlert(
                    type=AlertType.TRAFFIC,
                    message=f"{level.value.upper()} traffic detected. "
                    "Consider alternative routes.",
                    severity=AlertSeverity.HIGH,
                )
            )

        if total_time > max_route_time:
            alerts.append(
                RouteAlert(
                    type=AlertType.DELAY,
                    message=f"Route time ({format_number(total_time)} min) exceeds maximum "
                    f"({format_number(max_route_time)} min)",
                    severity=AlertSeverity.HIGH,
                )
            )

        return alerts

    def _alternative_routes(self, level: TrafficLevel) -> Optional[List[AlternativeRoute]]:
        if level != TrafficLevel.SEVERE:
            return None
        return [
            AlternativeRoute(
                route_name=self.config.ALTERNATE_ROUTE_NAME,
                time_saved_minutes=self.config.ALTERNATE_ROUTE_TIME_SAVED_MINUTES,
                fuel_saved_liters=self.config.ALTERNATE_ROUTE_FUEL_SAVED_LITERS,
                reason=self.config.ALTERNATE_ROUTE_REASON,
            )
        ]

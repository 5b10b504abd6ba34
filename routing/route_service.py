"""
Purpose: Route computation for the two selected points.
What it does:
Resolves a walking Route between two Points.
- Primary: one OSRM /route call (foot profile, full geojson geometry)
- Fallback: straight-line great-circle distance at a fixed walking speed

Every failure of the primary strategy is absorbed here; callers always get a Route.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional, Tuple

import requests
from loguru import logger

from locations.models import Point
from .geometry import haversine_m
from .models import EstimatedRoute, NetworkRoute, Route
from .osrm_client import OSRMClient, OSRMError
from .policy import RoutingPolicy, default_routing_policy

LatLon = Tuple[float, float]

# (lat, lon), (lat, lon) -> metres
DistanceFn = Callable[[LatLon, LatLon], float]


class RouteResolver:
    """
    Turns a pair of Points into a Route, never raising for routing problems.
    """
    def __init__(
        self,
        osrm: Optional[OSRMClient] = None,
        policy: Optional[RoutingPolicy] = None,
        distance_fn: Optional[DistanceFn] = None,
    ):
        self.osrm = osrm or OSRMClient()
        self.policy = policy or default_routing_policy()
        # map widgets expose the same formula as distance_between; injectable so they agree
        self.distance_fn = distance_fn or haversine_m

    async def resolve(self, point_a: Point, point_b: Point) -> Route:
        """
        Resolve the walking route from point_a to point_b.

        The HTTP call runs in a worker thread so the event loop keeps handling UI events.
        """
        try:
            result = await asyncio.to_thread(
                self.osrm.compute_route, [point_a.coordinates, point_b.coordinates]
            )
            return self.network_route(result)
        except (requests.RequestException, OSRMError, KeyError, TypeError, ValueError, OverflowError) as e:
            logger.warning(f"OSRM routing error for {point_a.name} -> {point_b.name}: {e}")
            return self.estimate(point_a, point_b)

    def network_route(self, result: dict) -> NetworkRoute:
        """Normalize an OSRMClient.compute_route result for display."""
        return NetworkRoute(
            polyline=tuple(result["coordinates"]),
            distance_km=result["distance"] / 1000,
            duration_min=int(round(result["duration"] / 60)),
        )

    def estimate(self, point_a: Point, point_b: Point) -> EstimatedRoute:
        """Deterministic straight-line fallback."""
        distance_km = self.distance_fn(point_a.coordinates, point_b.coordinates) / 1000
        duration_min = int(round(distance_km / self.policy.walking_speed_kmh * 60))
        return EstimatedRoute(
            polyline=(point_a.coordinates, point_b.coordinates),
            distance_km=distance_km,
            duration_min=duration_min,
        )

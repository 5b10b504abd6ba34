"""
Purpose: Route models produced by the resolver.
What it does:
Defines the Route tagged variant:
- NetworkRoute (street geometry from OSRM)
- EstimatedRoute (straight segment + walking-speed estimate)

Both carry polyline / distance_km / duration_min so drawing is uniform.

Rule: No HTTP, no fallback decisions. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

LatLon = Tuple[float, float]


class RouteKind(str, Enum):
    NETWORK = "network"
    ESTIMATED = "estimated"


class LineStyle(str, Enum):
    """How the route overlay is stroked."""
    SOLID = "solid"
    DASHED = "dashed"


@dataclass(frozen=True)
class NetworkRoute:
    """
    A route computed by the routing service along the street network.
    """
    polyline: Tuple[LatLon, ...]
    distance_km: float
    duration_min: int

    kind = RouteKind.NETWORK

    @property
    def is_estimate(self) -> bool:
        return False

    @property
    def line_style(self) -> LineStyle:
        return LineStyle.SOLID


@dataclass(frozen=True)
class EstimatedRoute:
    """
    Straight-line fallback between the two endpoints.
    """
    polyline: Tuple[LatLon, LatLon]
    distance_km: float
    duration_min: int

    kind = RouteKind.ESTIMATED

    @property
    def is_estimate(self) -> bool:
        return True

    @property
    def line_style(self) -> LineStyle:
        return LineStyle.DASHED


Route = Union[NetworkRoute, EstimatedRoute]

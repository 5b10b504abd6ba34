"""
Purpose: Domain models for the Locations capability.
What it does:
- Point (index, lat, lon, name): what the selection/routing core consumes
- LocationRecord: a full dataset row (display fields for cards and tooltips)

Rule: No loading, no routing. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

LatLon = Tuple[float, float]


@dataclass(frozen=True)
class Point:
    """
    A point of interest as the core sees it.
    `index` is the position in the loaded dataset and never changes.
    """
    index: int
    lat: float
    lon: float
    name: str

    @property
    def coordinates(self) -> LatLon:
        return (self.lat, self.lon)


@dataclass(frozen=True)
class LocationRecord:
    """
    One row of the tour dataset, display fields included.
    """
    point: Point
    description: str = ""
    analysis: str = ""
    field_notes: str = ""
    image_url: str = ""

    @classmethod
    def new(
        cls,
        index: int,
        name: str,
        lat: float,
        lon: float,
        description: str = "",
        analysis: str = "",
        field_notes: str = "",
        image_url: str = "",
    ) -> LocationRecord:
        return cls(
            point=Point(index=index, lat=float(lat), lon=float(lon), name=name),
            description=description,
            analysis=analysis,
            field_notes=field_notes,
            image_url=image_url,
        )

    @property
    def name(self) -> str:
        return self.point.name

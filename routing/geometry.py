#Purpose: Straight-line distance math shared by the fallback estimate and the map widget.
#Uses the same great-circle formula and Earth radius as Leaflet's CRS.Earth.distance,
#so the fallback distance matches what the map reports on screen.

import math
from typing import Tuple

LatLon = Tuple[float, float]

EARTH_RADIUS_M = 6371000.0


def haversine_m(a: LatLon, b: LatLon) -> float:
    """Great-circle distance in metres between two (lat, lon) points."""
    lat1, lon1 = math.radians(a[0]), math.radians(a[1])
    lat2, lon2 = math.radians(b[0]), math.radians(b[1])

    sin_dlat = math.sin((lat2 - lat1) / 2)
    sin_dlon = math.sin((lon2 - lon1) / 2)
    h = sin_dlat * sin_dlat + math.cos(lat1) * math.cos(lat2) * sin_dlon * sin_dlon
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c

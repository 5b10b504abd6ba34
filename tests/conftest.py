import asyncio

import pytest

from locations.store import load_location_store
from routing.models import NetworkRoute


@pytest.fixture
def tour_payload():
    # Little Italy, Montreal
    return {
        "locations": [
            {"name": "Jean-Talon Market", "lat": 45.5364, "lon": -73.6147,
             "description": "Market", "fieldNotes": "Saturday mornings"},
            {"name": "Madonna della Difesa", "lat": 45.5339, "lon": -73.6113},
            {"name": "Dante Park", "lat": 45.5333, "lon": -73.6120},
            {"name": "Casa d'Italia", "lat": 45.5358, "lon": -73.6132},
        ]
    }


@pytest.fixture
def store(tour_payload):
    return load_location_store(tour_payload)


class GatedResolver:
    """
    Resolver whose results are handed over by the test, one future per pair,
    so completion order can be controlled.
    """
    def __init__(self):
        self.calls = []
        self.gates = {}

    async def resolve(self, point_a, point_b):
        pair = (point_a.index, point_b.index)
        self.calls.append(pair)
        gate = asyncio.get_running_loop().create_future()
        self.gates[pair] = gate
        return await gate


@pytest.fixture
def gated_resolver():
    return GatedResolver()


def network_route(distance_km=1.234, duration_min=15):
    return NetworkRoute(
        polyline=((45.5364, -73.6147), (45.5350, -73.6130), (45.5339, -73.6113)),
        distance_km=distance_km,
        duration_min=duration_min,
    )


class RecordingWidget:
    """MapWidget double that records every call."""
    def __init__(self):
        self.markers = {}
        self.lines = {}
        self.removed = []
        self.highlighted = {}
        self.handlers = {}
        self._next = 0

    def _handle(self, prefix):
        self._next += 1
        return f"{prefix}_{self._next}"

    def add_marker(self, point, icon):
        handle = self._handle("marker")
        self.markers[handle] = point
        return handle

    def draw_line(self, coords, style):
        handle = self._handle("line")
        self.lines[handle] = (list(coords), dict(style))
        return handle

    def remove_layer(self, handle):
        self.removed.append(handle)
        self.lines.pop(handle, None)
        self.markers.pop(handle, None)

    def on(self, event_type, index, callback):
        self.handlers.setdefault((event_type, index), []).append(callback)

    def fire(self, event_type, index=-1):
        for callback in self.handlers.get((event_type, index), []):
            callback()

    def distance_between(self, a, b):
        from routing.geometry import haversine_m
        return haversine_m(a, b)

    def highlight_marker(self, handle, selected):
        self.highlighted[handle] = selected


@pytest.fixture
def make_route():
    return network_route


@pytest.fixture
def widget():
    return RecordingWidget()

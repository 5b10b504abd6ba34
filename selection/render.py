"""
Purpose: Render instructions emitted by the SelectionController.
What it does:
Describes, as plain values, everything the UI must show for the current
selection: highlighted indices, expanded cards, cards to collapse, the
route summary panel and the route overlay.

Rule: Values only. Instructions are rebuilt from controller state every time,
never patched from a previous one.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from routing.models import LatLon, LineStyle


class ControllerState(str, Enum):
    IDLE = "idle"
    ONE_SELECTED = "one_selected"
    TWO_SELECTED_PENDING = "two_selected_pending"
    TWO_SELECTED_RESOLVED = "two_selected_resolved"


@dataclass(frozen=True)
class RoutePanel:
    """
    Route summary: names, distance, walking time and a clear control.
    """
    origin_name: str
    destination_name: str
    distance_km: float
    duration_min: int
    approximate: bool = False
    approx_qualifier: str = "approx."
    clear_label: str = "Clear"

    @property
    def distance_text(self) -> str:
        return f"{self.distance_km:.2f} km"

    @property
    def duration_text(self) -> str:
        text = f"{self.duration_min} min"
        if self.approximate:
            text = f"{text} {self.approx_qualifier}"
        return text

    @property
    def text(self) -> str:
        return (
            f"Route: {self.origin_name} → {self.destination_name}"
            f" | Distance: {self.distance_text}"
            f" | Walking time: {self.duration_text}"
        )


@dataclass(frozen=True)
class RouteLine:
    """Geometry + stroke for the single route overlay."""
    coordinates: Tuple[LatLon, ...]
    style: LineStyle


@dataclass(frozen=True)
class RenderInstruction:
    """
    Full description of what the UI should show after a transition.

    `collapsed` lists indices whose expanded card must be closed by this
    transition (evicted or deselected ids). `collapse_all` is set by clear.
    """
    generation: int
    state: ControllerState
    selected: Tuple[int, ...]
    expanded: Tuple[int, ...] = ()
    collapsed: Tuple[int, ...] = ()
    collapse_all: bool = False
    panel: Optional[RoutePanel] = None
    route_line: Optional[RouteLine] = None

    @property
    def panel_visible(self) -> bool:
        return self.panel is not None

    def is_selected(self, index: int) -> bool:
        return index in self.selected

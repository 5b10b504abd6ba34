"""
Purpose: Central configuration for walking-route resolution and drawing.
What it does:

Stores all tunable values for the route resolver and the route overlay:

WALKING_SPEED_KMH = 4.3
DASH_ARRAY = "8,4" (approximate routes)

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any

@dataclass(frozen=True)
class RoutingPolicy:
    """
    Central configuration for route resolution.
    """

    # --- Fallback estimate ---
    # Average walking speed used when OSRM cannot answer.
    walking_speed_kmh: float = 4.3

    # --- Route overlay styling ---
    # Solid line for OSRM routes; the estimate adds a dash pattern.
    line_color: str = "#1FB8CD"
    line_weight: int = 4
    line_opacity: float = 0.8
    estimate_dash_array: str = "8,4"

    # --- Panel text ---
    # Appended to the walking time when the route is an estimate.
    approx_qualifier: str = "approx."

    # Extra keyword styles merged into every drawn line (e.g. smooth_factor)
    extra_line_style: Dict[str, Any] = field(default_factory=lambda: {"smooth_factor": 1})

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.walking_speed_kmh <= 0:
            raise ValueError("walking_speed_kmh must be > 0")

        if not 0 <= self.line_opacity <= 1:
            raise ValueError("line_opacity must be between 0 and 1")

        if self.line_weight <= 0:
            raise ValueError("line_weight must be > 0")

def default_routing_policy() -> RoutingPolicy:
    """
    Convenience factory for the default policy.
    """
    p = RoutingPolicy()
    p.validate()
    return p

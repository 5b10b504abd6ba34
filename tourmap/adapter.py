"""
Purpose: Thin adapter from RenderInstruction values to widget/card calls.
What it does:
- Creates one marker per location and wires marker clicks, map clicks and
  the clear control to a SelectionController
- Applies each RenderInstruction: card classes, marker highlight, the single
  route overlay (old line removed before the new one is drawn) and the panel
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from locations.store import LocationStore
from routing.models import LineStyle
from routing.policy import RoutingPolicy, default_routing_policy
from selection.controller import SelectionController
from selection.render import RenderInstruction
from .cards import EXPANDED, SELECTED, CardList, RoutePanelView
from .icons import marker_icon
from .widget import MAP_EVENT, LayerHandle, MapWidget


class RenderAdapter:
    """
    Translates render instructions into MapWidget / CardList / panel updates.
    """
    def __init__(self, widget: MapWidget, store: LocationStore, policy: Optional[RoutingPolicy] = None):
        self.widget = widget
        self.store = store
        self.policy = policy or default_routing_policy()

        self.cards = CardList(len(store))
        self.panel = RoutePanelView()
        self.markers: List[LayerHandle] = []
        self.route_layer: Optional[LayerHandle] = None

    def add_markers(self) -> None:
        for record in self.store:
            self.markers.append(self.widget.add_marker(record.point, marker_icon(record.point.index)))

    def bind(self, controller: SelectionController) -> None:
        """Wire widget events to the controller and subscribe to its instructions."""
        if not self.markers:
            self.add_markers()

        for index in range(len(self.store)):
            self.widget.on("click", index, lambda index=index: controller.marker_click(index))
        self.widget.on("click", MAP_EVENT, controller.background_click)
        self.widget.on("clear", MAP_EVENT, controller.clear_action)

        controller.add_listener(self.apply)
        self.apply(controller.render(collapse_all=True))

    def line_style(self, style: LineStyle) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "color": self.policy.line_color,
            "weight": self.policy.line_weight,
            "opacity": self.policy.line_opacity,
        }
        if style is LineStyle.DASHED:
            options["dash_array"] = self.policy.estimate_dash_array
        else:
            options.update(self.policy.extra_line_style)
        return options

    def apply(self, instruction: RenderInstruction) -> None:
        # cards
        for index in range(len(self.cards)):
            self.cards.set_class(index, SELECTED, instruction.is_selected(index))
            self.cards.set_class(index, EXPANDED, index in instruction.expanded)

        # markers
        for index, handle in enumerate(self.markers):
            self.widget.highlight_marker(handle, instruction.is_selected(index))

        # route overlay: at most one at a time
        if self.route_layer is not None:
            self.widget.remove_layer(self.route_layer)
            self.route_layer = None
        if instruction.route_line is not None:
            self.route_layer = self.widget.draw_line(
                list(instruction.route_line.coordinates),
                self.line_style(instruction.route_line.style),
            )

        # route panel
        if instruction.panel is None:
            self.panel.hide()
        else:
            self.panel.visible = True
            self.panel.text = instruction.panel.text
            self.panel.clear_label = instruction.panel.clear_label

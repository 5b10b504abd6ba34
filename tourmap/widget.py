"""
Purpose: The map widget boundary.
What it does:
- MapWidget: the narrow interface the render adapter talks to
  (markers, one route line, layer removal, event hooks, on-screen distance)
- FoliumMapWidget: implementation on top of a folium (Leaflet) map

Folium produces a static HTML page, so click events are registered here and
fired from Python (scripts, tests) through `fire`.
"""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, Dict, List, Protocol, Tuple, Union

import folium
from loguru import logger

from locations.models import Point
from routing.geometry import haversine_m

LatLon = Tuple[float, float]
LayerHandle = str
EventCallback = Callable[[], Any]

# event index used for map-level events (background click)
MAP_EVENT = -1


class MapWidget(Protocol):
    def add_marker(self, point: Point, icon: Any) -> LayerHandle: ...

    def draw_line(self, coords: List[LatLon], style: Dict[str, Any]) -> LayerHandle: ...

    def remove_layer(self, handle: LayerHandle) -> None: ...

    def on(self, event_type: str, index: int, callback: EventCallback) -> None: ...

    def distance_between(self, a: LatLon, b: LatLon) -> float: ...

    def highlight_marker(self, handle: LayerHandle, selected: bool) -> None: ...


class FoliumMapWidget:
    """
    MapWidget backed by a folium.Map.
    """
    def __init__(
        self,
        center: LatLon = (45.5350, -73.6145),
        zoom_start: int = 16,
        min_zoom: int = 13,
        max_zoom: int = 19,
    ):
        self.map = folium.Map(
            location=list(center),
            zoom_start=zoom_start,
            min_zoom=min_zoom,
            max_zoom=max_zoom,
            tiles="OpenStreetMap",
            zoom_control=False,
            prefer_canvas=True,
        )
        self._layers: Dict[LayerHandle, folium.map.Layer] = {}
        self._handlers: Dict[Tuple[str, int], List[EventCallback]] = defaultdict(list)

    #----------------
    # layers
    #----------------
    def add_marker(self, point: Point, icon: Any) -> LayerHandle:
        marker = folium.Marker(
            location=[point.lat, point.lon],
            icon=icon,
            tooltip=point.name,
            rise_on_hover=True,
        )
        marker.add_to(self.map)
        return self._track(marker)

    def draw_line(self, coords: List[LatLon], style: Dict[str, Any]) -> LayerHandle:
        line = folium.PolyLine(locations=[list(c) for c in coords], **style)
        line.add_to(self.map)
        return self._track(line)

    def remove_layer(self, handle: LayerHandle) -> None:
        layer = self._layers.pop(handle, None)
        if layer is None:
            return
        # folium has no public API for detaching a child from a map
        self.map._children.pop(layer.get_name(), None)

    def highlight_marker(self, handle: LayerHandle, selected: bool) -> None:
        marker = self._layers[handle]
        marker.options["zIndexOffset"] = 1000 if selected else 0

    def has_layer(self, handle: LayerHandle) -> bool:
        return handle in self._layers

    @property
    def layer_count(self) -> int:
        return len(self._layers)

    def _track(self, layer) -> LayerHandle:
        handle = layer.get_name()
        self._layers[handle] = layer
        return handle

    #----------------
    # events
    #----------------
    def on(self, event_type: str, index: int, callback: EventCallback) -> None:
        self._handlers[(event_type, index)].append(callback)

    def fire(self, event_type: str, index: int = MAP_EVENT) -> None:
        handlers = self._handlers.get((event_type, index), [])
        if not handlers:
            logger.debug(f"No handler for {event_type} on {index}")
        for callback in handlers:
            callback()

    #----------------
    # geometry + output
    #----------------
    def distance_between(self, a: LatLon, b: LatLon) -> float:
        """Metres between two points, same formula as Leaflet's map.distance."""
        return haversine_m(a, b)

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        self.map.save(str(path))
        return path

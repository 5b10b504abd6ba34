"""
Tour map package: the UI side of the selection-and-route flow.

Public API:
- MapWidget protocol + FoliumMapWidget
- CardList, RoutePanelView (render targets)
- RenderAdapter (RenderInstruction -> widget calls)
"""
from .widget import MapWidget, FoliumMapWidget, MAP_EVENT
from .cards import CardList, RoutePanelView, SELECTED, EXPANDED
from .icons import marker_icon, marker_svg
from .adapter import RenderAdapter

__all__ = ["MapWidget",
           "FoliumMapWidget",
             "MAP_EVENT",
               "CardList",
               "RoutePanelView",
               "SELECTED",
               "EXPANDED",
               "marker_icon",
               "marker_svg",
               "RenderAdapter",
               ]

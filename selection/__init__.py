"""
Selection domain package.

Public API:
- SelectionState (bounded two-item selection)
- SelectionController (event orchestration + route resolution)
- Render values: RenderInstruction, RoutePanel, RouteLine, ControllerState
"""
from .state import SelectionState, MAX_SELECTED
from .render import ControllerState, RenderInstruction, RoutePanel, RouteLine
from .controller import SelectionController

__all__ = ["SelectionState",
           "MAX_SELECTED",
             "ControllerState",
               "RenderInstruction",
               "RoutePanel",
               "RouteLine",
               "SelectionController",
               ]

"""
Purpose: Orchestrator for the selection-and-route flow (the "glue").
What it does:
Receives card/marker/background/clear events, drives SelectionState,
starts a RouteResolver task whenever two points are selected, and emits a
RenderInstruction after every transition and every accepted route.

A generation counter is bumped on every transition. A route resolution
captures the generation it was started under and is applied only if that
generation is still current when it completes; otherwise it is dropped.
"""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional, Set

from loguru import logger

from locations.store import LocationStore
from routing.models import Route
from routing.policy import RoutingPolicy, default_routing_policy
from routing.route_service import RouteResolver
from .render import ControllerState, RenderInstruction, RouteLine, RoutePanel
from .state import SelectionState

RenderListener = Callable[[RenderInstruction], None]


class SelectionController:
    """
    Owns the selection, the expanded cards, the current route and the
    generation counter. Constructed once and handed to whatever wires UI events.
    """
    def __init__(
        self,
        store: LocationStore,
        resolver: RouteResolver,
        policy: Optional[RoutingPolicy] = None,
    ):
        self.store = store
        self.resolver = resolver
        self.policy = policy or default_routing_policy()

        self.selection = SelectionState()
        self.state = ControllerState.IDLE
        self.generation = 0
        self.route: Optional[Route] = None
        self.expanded: Set[int] = set()

        self._pending: Optional[asyncio.Task] = None
        self._listeners: List[RenderListener] = []
        self.last_instruction: Optional[RenderInstruction] = None

    #----------------
    # wiring
    #----------------
    def add_listener(self, listener: RenderListener) -> None:
        self._listeners.append(listener)

    @property
    def pending(self) -> Optional[asyncio.Task]:
        return self._pending

    async def wait_pending(self) -> None:
        """Wait for the in-flight resolution, if any (scripts and tests)."""
        while self._pending is not None and not self._pending.done():
            await self._pending

    #----------------
    # UI events
    #----------------
    def card_click(self, index: int) -> RenderInstruction:
        """A card click flips the card's own expanded state, then selects."""
        self._check_index(index)
        self._loop_for(index)
        if index in self.expanded:
            self.expanded.discard(index)
        else:
            self.expanded.add(index)
        return self.select(index)

    def marker_click(self, index: int) -> RenderInstruction:
        return self.select(index)

    def select(self, index: int) -> RenderInstruction:
        self._check_index(index)
        loop = self._loop_for(index)

        was_selected = index in self.selection
        members = self.selection.toggle(index)
        self._begin_transition()

        collapsed = []
        if was_selected:
            collapsed.append(index)
        if self.selection.evicted is not None:
            collapsed.append(self.selection.evicted)
        for gone in collapsed:
            self.expanded.discard(gone)

        if len(members) == 0:
            self.state = ControllerState.IDLE
        elif len(members) == 1:
            self.state = ControllerState.ONE_SELECTED
        else:
            self.state = ControllerState.TWO_SELECTED_PENDING

        logger.info(f"Selection {members} -> {self.state.value} (generation {self.generation})")
        instruction = self._emit(collapsed=tuple(collapsed))

        if self.state is ControllerState.TWO_SELECTED_PENDING:
            self._start_resolution(loop, *members)
        return instruction

    def background_click(self) -> RenderInstruction:
        return self.clear()

    def clear_action(self) -> RenderInstruction:
        return self.clear()

    def clear(self) -> RenderInstruction:
        self.selection.clear()
        self.expanded.clear()
        self._begin_transition()
        self.state = ControllerState.IDLE
        logger.info(f"Selection cleared (generation {self.generation})")
        return self._emit(collapse_all=True)

    #----------------
    # route resolution
    #----------------
    def _start_resolution(self, loop: asyncio.AbstractEventLoop, first: int, second: int) -> None:
        generation = self.generation
        point_a = self.store.point(first)
        point_b = self.store.point(second)
        # an older task is left to finish; its result fails the generation check
        self._pending = loop.create_task(
            self._resolve(generation, point_a, point_b)
        )

    async def _resolve(self, generation: int, point_a, point_b) -> None:
        try:
            route = await self.resolver.resolve(point_a, point_b)
        except Exception:
            logger.exception(f"Route resolution failed for {point_a.name} -> {point_b.name}")
            route = self.resolver.estimate(point_a, point_b)
        self.apply_route(generation, route)

    def apply_route(self, generation: int, route: Route) -> Optional[RenderInstruction]:
        """Apply a finished resolution if it still belongs to the current selection."""
        if generation != self.generation:
            logger.debug(f"Dropping stale route (generation {generation}, current {self.generation})")
            return None

        self.route = route
        self.state = ControllerState.TWO_SELECTED_RESOLVED
        return self._emit()

    #----------------
    # helpers
    #----------------
    def _check_index(self, index: int) -> None:
        if index not in self.store:
            raise IndexError(f"Selection index {index} is outside the loaded locations")

    def _loop_for(self, index: int) -> Optional[asyncio.AbstractEventLoop]:
        """
        Running loop if selecting `index` would start a resolution, else None.
        Raises RuntimeError before any state changes when no loop is running.
        """
        if index in self.selection or len(self.selection) == 0:
            return None
        return asyncio.get_running_loop()

    def _begin_transition(self) -> None:
        # every transition invalidates the current route and any in-flight result
        self.generation += 1
        self.route = None

    def _emit(self, collapsed=(), collapse_all: bool = False) -> RenderInstruction:
        instruction = self.render(collapsed=collapsed, collapse_all=collapse_all)
        self.last_instruction = instruction
        for listener in self._listeners:
            listener(instruction)
        return instruction

    def render(self, collapsed=(), collapse_all: bool = False) -> RenderInstruction:
        """Derive the full render instruction from the current state."""
        panel = None
        route_line = None
        if self.state is ControllerState.TWO_SELECTED_RESOLVED and self.route is not None:
            first, second = self.selection.members
            panel = RoutePanel(
                origin_name=self.store.point(first).name,
                destination_name=self.store.point(second).name,
                distance_km=self.route.distance_km,
                duration_min=self.route.duration_min,
                approximate=self.route.is_estimate,
                approx_qualifier=self.policy.approx_qualifier,
            )
            route_line = RouteLine(
                coordinates=tuple(self.route.polyline),
                style=self.route.line_style,
            )

        return RenderInstruction(
            generation=self.generation,
            state=self.state,
            selected=self.selection.members,
            expanded=tuple(sorted(self.expanded)),
            collapsed=tuple(collapsed),
            collapse_all=collapse_all,
            panel=panel,
            route_line=route_line,
        )

"""
Purpose: In-memory render targets for the card list and the route panel.
What it does:
Keeps the CSS classes of each location card ("selected", "expanded") and the
route summary panel's visibility/text, keyed by point index.
Markup itself is produced elsewhere; this is the state it would be bound to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Set

SELECTED = "selected"
EXPANDED = "expanded"


class CardList:
    """Class sets for each card, indexed like the LocationStore."""

    def __init__(self, size: int):
        self._classes: Dict[int, Set[str]] = {index: set() for index in range(size)}

    def __len__(self) -> int:
        return len(self._classes)

    def classes(self, index: int) -> Set[str]:
        return set(self._classes[index])

    def has_class(self, index: int, name: str) -> bool:
        return name in self._classes[index]

    def set_class(self, index: int, name: str, on: bool) -> None:
        if on:
            self._classes[index].add(name)
        else:
            self._classes[index].discard(name)

    def indices_with(self, name: str) -> Set[int]:
        return {index for index, classes in self._classes.items() if name in classes}


@dataclass
class RoutePanelView:
    visible: bool = False
    text: str = ""
    clear_label: str = ""

    def hide(self) -> None:
        self.visible = False
        self.text = ""
        self.clear_label = ""

"""
Purpose: The bounded two-item selection.
What it does:
Keeps at most two point indices in insertion order (oldest first).
toggle(id) removes a present id, appends an absent one, and when full
evicts the oldest before appending. clear() empties it.

Rule: Pure state machine. No I/O or rendering.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

MAX_SELECTED = 2


class SelectionState:
    """
    Ordered FIFO set of at most MAX_SELECTED point indices.
    """
    def __init__(self) -> None:
        self._members: List[int] = []
        # id pushed out by the last toggle's "full and replacing" branch
        self.evicted: Optional[int] = None

    @property
    def members(self) -> Tuple[int, ...]:
        return tuple(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, index: int) -> bool:
        return index in self._members

    def toggle(self, index: int) -> Tuple[int, ...]:
        self.evicted = None

        if index in self._members:
            self._members.remove(index)
        elif len(self._members) < MAX_SELECTED:
            self._members.append(index)
        else:
            self.evicted = self._members.pop(0)
            self._members.append(index)

        return self.members

    def clear(self) -> Tuple[int, ...]:
        self._members = []
        self.evicted = None
        return self.members

    def __repr__(self) -> str:
        return f"SelectionState({self._members!r})"

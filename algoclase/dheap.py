"""A max-priority queue backed by a d-ary heap."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass
class _Entry:
    data: Any
    priority: float


class DHeap:
    """Max-heap where every node has at most ``branching_factor`` children."""

    def __init__(
        self,
        elements: Iterable[Any] | None = None,
        priorities: Iterable[float] | None = None,
        branching_factor: int = 2,
    ) -> None:
        elements = list(elements) if elements is not None else []
        priorities = list(priorities) if priorities is not None else []

        if len(elements) != len(priorities):
            raise ValueError(
                f"La longitud de la lista de elementos ({len(elements)}) "
                "debe coincidir con la longitud de la lista de prioridades "
                f"({len(priorities)})"
            )
        if branching_factor < 2:
            raise ValueError(
                f"El factor de ramificación ({branching_factor}) debe ser mayor que 1."
            )

        self.d = branching_factor
        self._entries: list[_Entry] = []
        if elements:
            self._heapify(elements, priorities)

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        """Return True when the heap holds no elements."""
        return not self._entries

    def validate(self) -> bool:
        """Check that every node has a priority no lower than its children."""
        for index in range(self._first_leaf()):
            priority = self._entries[index].priority
            if any(child.priority > priority for child in self._children(index)):
                return False
        return True

    def insert(self, element: Any, priority: float) -> None:
        """Add ``element`` with the given priority."""
        self._entries.append(_Entry(element, float(priority)))
        self._bubble_up(len(self._entries) - 1)

    def top(self) -> Any:
        """Remove and return the element with the highest priority."""
        if self.is_empty():
            raise IndexError("Heap is empty.")
        best = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._entries[0] = last
            if len(self._entries) > 1:
                self._push_down(0)
        return best.data

    def peek(self) -> Any:
        """Return the element with the highest priority without removing it."""
        if self.is_empty():
            raise IndexError("Heap is empty.")
        return self._entries[0].data

    def _heapify(self, elements: list[Any], priorities: list[float]) -> None:
        self._entries = [_Entry(e, float(p)) for e, p in zip(elements, priorities)]
        for index in reversed(range(self._first_leaf())):
            self._push_down(index)

    def _first_child(self, index: int) -> int:
        return self.d * index + 1

    def _parent(self, index: int) -> int:
        return -1 if index == 0 else (index - 1) // self.d

    def _first_leaf(self) -> int:
        size = len(self._entries)
        if size < 2:
            return size
        return (size - 2) // self.d + 1

    def _children(self, index: int) -> list[_Entry]:
        first = self._first_child(index)
        return self._entries[first:first + self.d]

    def _highest_priority_child(self, index: int) -> int:
        first = self._first_child(index)
        last = min(first + self.d, len(self._entries))
        if first >= len(self._entries):
            return -1
        return max(range(first, last), key=lambda i: self._entries[i].priority)

    def _push_down(self, index: int) -> None:
        entry = self._entries[index]
        current = index
        first_leaf = self._first_leaf()
        while current < first_leaf:
            child = self._highest_priority_child(current)
            if self._entries[child].priority <= entry.priority:
                break
            self._entries[current] = self._entries[child]
            current = child
        self._entries[current] = entry

    def _bubble_up(self, index: int) -> None:
        entry = self._entries[index]
        current = index
        while current > 0:
            parent = self._parent(current)
            if self._entries[parent].priority >= entry.priority:
                break
            self._entries[current] = self._entries[parent]
            current = parent
        self._entries[current] = entry
"""Fixed-capacity stack of shapes."""

from __future__ import annotations

from collections.abc import Iterator

from paintkit.shape import Shape


class StackFullError(Exception):
    """Raised when pushing onto a stack that is at capacity."""


class StackEmptyError(LookupError):
    """Raised when removing from an empty stack."""


class ShapeStack:
    """Shapes in drawing order, bottom first, with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Shape] = []

    @property
    def top(self) -> int:
        """Index of the top shape, ``-1`` when empty."""
        return len(self._items) - 1

    def push(self, shape: Shape) -> None:
        if len(self._items) >= self.capacity:
            raise StackFullError("stack is full; cannot add the shape")
        self._items.append(shape)

    def pop(self) -> Shape:
        if not self._items:
            raise StackEmptyError("stack is empty; nothing to remove")
        return self._items.pop()

    def remove_at(self, index: int) -> Shape:
        """Remove and return the shape at ``index``, shifting later shapes down."""
        if not self._items:
            raise StackEmptyError("stack is empty; nothing to remove")
        if not 0 <= index < len(self._items):
            raise IndexError(f"invalid index {index}")
        return self._items.pop(index)

    def find(self, shape_id: int) -> Shape | None:
        return next((s for s in self._items if s.shape_id == shape_id), None)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Shape:
        return self._items[index]
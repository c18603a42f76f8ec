"""Queue of planned motion blocks."""

from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_MODE_ABSOLUTE, FEEDRATE_DEFAULT, PLANNER_BUFFER_SIZE


@dataclass
class PlanBlock:
    """A planned move; target is (X, Y, Z) in mm, feed rate in mm/min."""

    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    feed_rate: float = FEEDRATE_DEFAULT
    is_arc: bool = False
    i: float = 0.0
    j: float = 0.0
    k: float = 0.0
    radius: float = 0.0
    absolute: bool = DEFAULT_MODE_ABSOLUTE
    rapid: bool = False


class Planner:
    """Ring buffer of blocks that keeps one slot free, so it holds capacity - 1."""

    def __init__(self, capacity: int = PLANNER_BUFFER_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[PlanBlock | None] = [None] * capacity
        self._head = 0
        self._tail = 0

    def reset(self) -> None:
        self._head = 0
        self._tail = 0

    def is_full(self) -> bool:
        return (self._head + 1) % self.capacity == self._tail

    def is_empty(self) -> bool:
        return self._head == self._tail

    def push(self, block: PlanBlock) -> bool:
        """Queue a block. Returns False and drops it if the planner is full."""
        if self.is_full():
            return False
        self._slots[self._head] = block
        self._head = (self._head + 1) % self.capacity
        return True

    def pop(self) -> PlanBlock | None:
        """Return the next block to execute, or None if there is none."""
        if self.is_empty():
            return None
        block = self._slots[self._tail]
        self._slots[self._tail] = None
        self._tail = (self._tail + 1) % self.capacity
        return block

    def __len__(self) -> int:
        return (self._head - self._tail) % self.capacity
"""Bounded FIFO queue of raw G-code lines."""

from __future__ import annotations

import logging
from collections import deque

from .config import GCODE_BUFFER_SIZE, GCODE_LINE_MAX_LENGTH

logger = logging.getLogger(__name__)


class GCodeBuffer:
    """Holds pending lines; overlong lines are truncated, overflow is discarded."""

    def __init__(
        self,
        capacity: int = GCODE_BUFFER_SIZE,
        max_line_length: int = GCODE_LINE_MAX_LENGTH,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if max_line_length < 2:
            raise ValueError("max_line_length must be at least 2")
        self.capacity = capacity
        self.max_line_length = max_line_length
        self._lines: deque[str] = deque()

    def push(self, line: str) -> bool:
        """Queue a line. Returns False if it was empty or the buffer was full."""
        if not line:
            return False
        if len(self._lines) >= self.capacity:
            logger.warning("G-code buffer overflow, line discarded")
            return False
        self._lines.append(line[: self.max_line_length - 1])
        return True

    def pop(self) -> str | None:
        """Return the oldest line, or None if the buffer is empty."""
        if not self._lines:
            return None
        return self._lines.popleft()

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)
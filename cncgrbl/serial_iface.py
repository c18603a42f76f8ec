"""Line assembly of incoming serial characters into the G-code buffer."""

from __future__ import annotations

from collections.abc import Callable

from .config import BAUD_RATE, GCODE_LINE_MAX_LENGTH
from .gcode_buffer import GCodeBuffer


class SerialInterface:
    """Collects characters into lines and queues each complete line."""

    def __init__(
        self,
        buffer: GCodeBuffer | None = None,
        max_line_length: int = GCODE_LINE_MAX_LENGTH,
        output: Callable[[str], None] = print,
    ) -> None:
        if max_line_length < 2:
            raise ValueError("max_line_length must be at least 2")
        self.buffer = buffer if buffer is not None else GCodeBuffer()
        self.max_line_length = max_line_length
        self.baud_rate = BAUD_RATE
        self._output = output
        self._pending: list[str] = []

    @property
    def pending(self) -> str:
        """Characters received since the last line end."""
        return "".join(self._pending)

    def init(self) -> None:
        self._output("[INFO] Serial interface ready")

    def feed(self, data: str | bytes) -> int:
        """Process received data; returns how many complete lines were handed on."""
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("latin-1")
        completed = 0
        for char in data:
            if char in "\r\n":
                if self._pending:
                    self.buffer.push(self.pending)
                    self._pending.clear()
                    completed += 1
            elif len(self._pending) < self.max_line_length - 1:
                self._pending.append(char)
        return completed
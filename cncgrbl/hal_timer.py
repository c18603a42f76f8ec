"""Simulated periodic hardware timer that drives the step generator."""

from __future__ import annotations

from collections.abc import Callable

TIMER_FREQUENCY_HZ = 1_000_000


class StepTimer:
    """Periodic alarm with a 1 MHz tick; ``tick`` stands for one alarm firing."""

    def __init__(self) -> None:
        self.callback: Callable[[], None] | None = None
        self.interval_us: int | None = None
        self.running = False

    def attach_callback(self, callback: Callable[[], None] | None) -> None:
        self.callback = callback

    def start(self, interval_us: int) -> None:
        """Arm the timer to fire every ``interval_us`` microseconds."""
        if interval_us <= 0:
            raise ValueError("interval_us must be positive")
        self.interval_us = int(interval_us)
        self.running = True

    def stop(self) -> None:
        self.running = False

    def tick(self) -> bool:
        """Fire the alarm once; returns True if the callback ran."""
        if not self.running or self.callback is None:
            return False
        self.callback()
        return True
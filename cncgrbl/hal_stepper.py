"""Turns planned blocks into step pulses driven by the periodic timer."""

from __future__ import annotations

import math
from collections.abc import Callable

from .config import STEPS_PER_MM_X, STEPS_PER_MM_Y, STEPS_PER_MM_Z
from .hal_pins import Axis, PinBank
from .hal_timer import StepTimer
from .planner import PlanBlock, Planner

STEPS_PER_MM = (STEPS_PER_MM_X, STEPS_PER_MM_Y, STEPS_PER_MM_Z)
MIN_INTERVAL_US = 50
_MAX_INTERVAL_US = 0xFFFFFFFF


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _lround(value: float) -> int:
    """Round to nearest, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _interval_us(feed_rate: float) -> int:
    steps_per_sec = feed_rate * STEPS_PER_MM_X / 60.0
    if steps_per_sec <= 0:
        raise ValueError(f"feed rate must be positive, got {feed_rate}")
    interval = min(int(1e6 / steps_per_sec), _MAX_INTERVAL_US)
    return max(interval, MIN_INTERVAL_US)


class Stepper:
    """Bresenham-style step generator for three axes."""

    def __init__(
        self,
        planner: Planner | None = None,
        pins: PinBank | None = None,
        timer: StepTimer | None = None,
        output: Callable[[str], None] = print,
    ) -> None:
        self.planner = planner if planner is not None else Planner()
        self.pins = pins if pins is not None else PinBank()
        self.timer = timer if timer is not None else StepTimer()
        self._output = output
        self.current_block: PlanBlock | None = None
        self._active = False
        self._position = [0, 0, 0]
        self._delta = [0, 0, 0]
        self._total = 0
        self._counter = 0

    @property
    def active(self) -> bool:
        return self._active

    @property
    def position_steps(self) -> tuple[int, int, int]:
        """Machine position in steps once the current block completes."""
        return tuple(self._position)

    def init(self) -> None:
        """Set up the pins and hook the step generator to the timer."""
        self.pins.init()
        self.timer.attach_callback(self._on_tick)
        self._output("HAL stepper initialized")

    def _on_tick(self) -> None:
        if not self._active:
            return
        for axis, delta in zip(Axis, self._delta):
            if delta == 0:
                continue
            step_pos = _trunc_div(delta * self._counter, self._total)
            prev_pos = _trunc_div(delta * (self._counter - 1), self._total)
            if step_pos != prev_pos:
                self.pins.step(axis)
        self._counter += 1
        if self._counter >= self._total:
            self._active = False
            self.timer.stop()

    def start_next_move(self) -> bool:
        """Take the next planned block and start stepping; True if motion began."""
        if self._active or self.planner.is_empty():
            return False
        block = self.planner.pop()
        if block is None:
            return False
        self.current_block = block

        deltas = [
            _lround((target - _trunc_div(position, spm)) * spm)
            for target, position, spm in zip(block.target, self._position, STEPS_PER_MM)
        ]
        for axis, delta in zip(Axis, deltas):
            self.pins.set_dir(axis, delta >= 0)

        self._delta = [abs(delta) for delta in deltas]
        self._total = max(self._delta)
        if self._total == 0:
            return False

        interval = _interval_us(block.feed_rate)
        self._counter = 0
        self._active = True
        for axis, delta in zip(Axis, self._delta):
            self._position[axis] += delta if self.pins.get_dir_state(axis) else -delta

        self.timer.start(interval)
        self._output("HAL stepper executing block...")
        return True

    def loop(self) -> None:
        """Start the next block when the previous one has finished."""
        if not self._active:
            self.start_next_move()
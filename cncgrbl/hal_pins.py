"""Simulated step/direction/enable pins for the three stepper axes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

LOW = 0
HIGH = 1
OUTPUT = "output"


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


X_STEP_PIN = 2
X_DIR_PIN = 15
X_ENABLE_PIN = 21
Y_STEP_PIN = 4
Y_DIR_PIN = 16
Y_ENABLE_PIN = 22
Z_STEP_PIN = 17
Z_DIR_PIN = 5
Z_ENABLE_PIN = 23


@dataclass(frozen=True)
class AxisPins:
    step: int
    dir: int
    enable: int


AXIS_PINS = {
    Axis.X: AxisPins(X_STEP_PIN, X_DIR_PIN, X_ENABLE_PIN),
    Axis.Y: AxisPins(Y_STEP_PIN, Y_DIR_PIN, Y_ENABLE_PIN),
    Axis.Z: AxisPins(Z_STEP_PIN, Z_DIR_PIN, Z_ENABLE_PIN),
}


class PinBank:
    """Pin levels of the driver board; unknown axes are ignored."""

    def __init__(self) -> None:
        self._levels: dict[int, int] = {}
        self.modes: dict[int, str] = {}
        self.steps: dict[Axis, int] = {axis: 0 for axis in Axis}

    @staticmethod
    def _pins_for(axis: int) -> AxisPins | None:
        try:
            return AXIS_PINS[Axis(axis)]
        except ValueError:
            return None

    def init(self) -> None:
        """Configure every pin as output and disable all motors."""
        for pins in AXIS_PINS.values():
            for pin in (pins.step, pins.dir, pins.enable):
                self.modes[pin] = OUTPUT
        for axis in Axis:
            self.enable_motor(axis, False)

    def set_dir(self, axis: int, forward: bool) -> None:
        pins = self._pins_for(axis)
        if pins is not None:
            self._levels[pins.dir] = HIGH if forward else LOW

    def step(self, axis: int) -> None:
        """Emit one step pulse on the axis."""
        pins = self._pins_for(axis)
        if pins is None:
            return
        self._levels[pins.step] = HIGH
        self._levels[pins.step] = LOW
        self.steps[Axis(axis)] += 1

    def enable_motor(self, axis: int, enable: bool) -> None:
        """Drive the enable pin; the driver is active when it is LOW."""
        pins = self._pins_for(axis)
        if pins is not None:
            self._levels[pins.enable] = LOW if enable else HIGH

    def get_dir_state(self, axis: int) -> bool:
        pins = self._pins_for(axis)
        if pins is None:
            return False
        return self.read(pins.dir) == HIGH

    def read(self, pin: int) -> int:
        return self._levels.get(pin, LOW)
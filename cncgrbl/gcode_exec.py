"""Execution of parsed G-code commands against the motion planner."""

from __future__ import annotations

import time
from collections.abc import Callable

from .config import DEFAULT_MODE_ABSOLUTE, FEEDRATE_DEFAULT
from .gcode import GCode
from .planner import PlanBlock, Planner

_ARC_FEEDRATE_DEFAULT = 1000.0


class Executor:
    """Applies commands: queues moves, tracks position and positioning mode."""

    def __init__(
        self,
        planner: Planner | None = None,
        output: Callable[[str], None] = print,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.planner = planner if planner is not None else Planner()
        self._output = output
        self._sleep = sleep
        self.absolute = DEFAULT_MODE_ABSOLUTE
        self._position = (0.0, 0.0, 0.0)

    @property
    def position(self) -> tuple[float, float, float]:
        """Position in mm after the last accepted move."""
        return self._position

    def _target(self, cmd: GCode) -> tuple[float, float, float]:
        coords = (cmd.x, cmd.y, cmd.z)
        return tuple(
            current if value is None else (value if self.absolute else current + value)
            for current, value in zip(self._position, coords)
        )

    def _report_coords(self, cmd: GCode, *, with_feed: bool) -> None:
        labelled = [("X", cmd.x), ("Y", cmd.y), ("Z", cmd.z)]
        if with_feed:
            labelled.append(("F", cmd.f))
        for label, value in labelled:
            if value is not None:
                self._output(f"  {label}: {value:.3f}")

    def _linear_move(self, cmd: GCode, *, rapid: bool) -> PlanBlock:
        code = "G0" if rapid else "G1"
        self._output(f"[{code}] {'Rapid move' if rapid else 'Linear move'}")
        self._report_coords(cmd, with_feed=not rapid)

        block = PlanBlock(
            target=self._target(cmd),
            feed_rate=cmd.f if cmd.f is not None else FEEDRATE_DEFAULT,
            is_arc=False,
            absolute=self.absolute,
            rapid=rapid,
        )
        self.planner.push(block)
        self._position = block.target
        self._output(f"[SUCCESS] Move queued in planner {code}")
        return block

    def _arc(self, cmd: GCode) -> PlanBlock:
        self._output("[G2/G3] Arc")
        block = PlanBlock(
            target=self._target(cmd),
            feed_rate=cmd.f if cmd.f is not None else _ARC_FEEDRATE_DEFAULT,
            is_arc=True,
            i=cmd.i or 0.0,
            j=cmd.j or 0.0,
            k=cmd.k or 0.0,
            radius=cmd.r or 0.0,
            absolute=self.absolute,
            rapid=False,
        )
        # Arcs only advance the tracked position; they are not queued.
        self._position = block.target
        self._output("[SUCCESS] Arc added to planner")
        return block

    def _dwell(self, cmd: GCode) -> None:
        seconds = cmd.p or 0.0
        self._output(f"[G4] Dwell {seconds:.3f} seconds")
        milliseconds = max(int(seconds * 1000), 0)
        self._sleep(milliseconds / 1000)

    def _execute_g(self, cmd: GCode) -> PlanBlock | None:
        number = cmd.number
        if number == 0:
            return self._linear_move(cmd, rapid=True)
        if number == 1:
            return self._linear_move(cmd, rapid=False)
        if number in (2, 3):
            return self._arc(cmd)
        if number == 4:
            self._dwell(cmd)
        elif number == 90:
            self.absolute = True
            self._output("[G90] Absolute Mode")
        elif number == 91:
            self.absolute = False
            self._output("[G91] Relative Mode")
        else:
            self._output(f"[WARN] Command G{number} not implemented")
        return None

    def _execute_m(self, cmd: GCode) -> None:
        messages = {
            3: "[M3] Spindle ON (clockwise)",
            4: "[M4] Spindle ON (counter-clockwise)",
            5: "[M5] Spindle OFF",
            30: "[M30] End of program",
        }
        message = messages.get(cmd.number)
        if message is None:
            message = f"[WARN] Command M{cmd.number} not implemented"
        self._output(message)

    def execute(self, cmd: GCode) -> PlanBlock | None:
        """Run one command; returns the block built for a move or arc."""
        if cmd.letter == "G":
            return self._execute_g(cmd)
        if cmd.letter == "M":
            self._execute_m(cmd)
            return None
        self._output("[ERROR] Unknown command type")
        return None
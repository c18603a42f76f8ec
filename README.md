# cncgrbl

A compact G-code interpreter and motion core for three-axis CNC machines.
It parses G-code lines, queues them, turns moves into planned blocks, and
converts those blocks into step pulses on simulated STEP/DIR/ENABLE pins,
driven by a software step timer.

## Installation

```
pip install cncgrbl
```

For running the tests:

```
pip install "cncgrbl[test]"
pytest
```

## Overview

| Module | What it provides |
| --- | --- |
| `cncgrbl.config` | Default settings: baud rate, buffer sizes, default feed rate, steps per mm |
| `cncgrbl.gcode` | `GCode`, `GCodeParseError`, `parse_gcode(line)` |
| `cncgrbl.gcode_buffer` | `GCodeBuffer`: a bounded FIFO of raw G-code lines |
| `cncgrbl.planner` | `PlanBlock`, `Planner`: a bounded ring buffer of planned moves |
| `cncgrbl.gcode_exec` | `Executor`: runs parsed commands and feeds the planner |
| `cncgrbl.hal_pins` | `Axis`, `PinBank`: simulated step, direction and enable pins per axis |
| `cncgrbl.hal_timer` | `StepTimer`: a periodic timer that calls a callback on each `tick()` |
| `cncgrbl.hal_stepper` | `Stepper`: turns planned blocks into step pulses |
| `cncgrbl.serial_iface` | `SerialInterface`: splits incoming characters into G-code lines |

## Parsing G-code

```python
from cncgrbl.gcode import parse_gcode

cmd = parse_gcode("G1 X10 Y-2.5 F600 ; move")
print(cmd.letter, cmd.number)  # G 1
print(cmd.code)                # G1
print(cmd.x, cmd.y, cmd.f)     # 10.0 -2.5 600.0
print(cmd.z)                   # None
```

Letters are case-insensitive, spaces and tabs are skipped, parenthesised
comments `( ... )` are dropped, and everything after `;` is ignored. Unknown
letters are ignored; when a line holds several `G`/`M` words the last one
wins. Parameters not present on the line are `None`. A line with no `G` or
`M` word raises `GCodeParseError` (a `ValueError`).

## Queues

`GCodeBuffer(capacity=16, max_line_length=100)` holds raw lines. `push`
ignores empty lines, truncates a line to `max_line_length - 1` characters,
and returns `False` (logging a warning) when the buffer is full. `pop`
returns the oldest line or `None`.

`Planner(capacity=16)` is a ring buffer that keeps one slot free, so it
holds at most `capacity - 1` blocks. `push` returns `False` and drops the
block when it is full; `pop` returns the next block or `None`.

## Running a program

```python
from cncgrbl.gcode import parse_gcode
from cncgrbl.gcode_buffer import GCodeBuffer
from cncgrbl.gcode_exec import Executor
from cncgrbl.hal_pins import Axis, PinBank
from cncgrbl.hal_stepper import Stepper
from cncgrbl.hal_timer import StepTimer
from cncgrbl.planner import Planner
from cncgrbl.serial_iface import SerialInterface

lines = GCodeBuffer(16, 100)
serial = SerialInterface(lines, 100, print)
serial.feed("G90\nG1 X10 Y5 F600\n")

planner = Planner(16)
executor = Executor(planner, print, lambda seconds: None)
while len(lines):
    executor.execute(parse_gcode(lines.pop()))

pins = PinBank()
timer = StepTimer()
stepper = Stepper(planner, pins, timer, print)
stepper.init()
stepper.loop()          # picks up the next planned block
while timer.running:
    timer.tick()        # each tick emits the step pulses for that interval

print(pins.steps[Axis.X], pins.steps[Axis.Y])  # 80 50
print(stepper.position_steps)                  # (80, 50, 0)
```

`Executor` tracks the current `position` and the absolute (`G90`) or
relative (`G91`) mode, and handles `G0`, `G1`, `G2`/`G3`, `G4`, `M3`, `M4`,
`M5` and `M30`. `execute` returns the `PlanBlock` built for a move or arc,
otherwise `None`. Unknown commands produce a warning on the output rather
than an error. `G4` waits `P` seconds through the `sleep` function given to
the executor.

`Stepper.start_next_move` takes one block from the planner, sets the
direction pins, and arms the timer with an interval derived from the feed
rate (never below 50 µs); it returns `True` if motion began. Each
`StepTimer.tick()` then distributes steps across the axes until the block is
done and the timer stops. Call `Stepper.loop()` again to start the next block.

## What this package does not do

- It drives no real hardware: `PinBank` only records pin levels, modes and
  step counts, and `StepTimer` fires only when `tick()` is called.
- `SerialInterface` opens no serial port; data is handed to it with `feed()`.
- Arcs (`G2`/`G3`) update the tracked position but are not queued in the
  planner, so no steps are generated for them.
- There is no command-line tool; the pieces are wired together in Python as
  shown above.
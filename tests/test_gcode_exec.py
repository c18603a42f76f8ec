import pytest

from cncgrbl.config import FEEDRATE_DEFAULT
from cncgrbl.gcode import GCode, parse_gcode
from cncgrbl.gcode_exec import Executor
from cncgrbl.planner import Planner


@pytest.fixture
def lines():
    return []


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def executor(lines, sleeps):
    return Executor(Planner(), output=lines.append, sleep=sleeps.append)


def run(executor, *commands):
    return [executor.execute(parse_gcode(text)) for text in commands]


def test_absolute_linear_move_is_queued(executor):
    run(executor, "G1 X10 Y5")
    block = executor.planner.pop()
    assert block.target == (10.0, 5.0, 0.0)
    assert block.feed_rate == FEEDRATE_DEFAULT
    assert block.rapid is False
    assert block.is_arc is False
    assert executor.position == (10.0, 5.0, 0.0)


def test_rapid_move_flags_block(executor):
    run(executor, "G0 Z3 F250")
    block = executor.planner.pop()
    assert block.rapid is True
    assert block.feed_rate == 250.0
    assert block.target == (0.0, 0.0, 3.0)


def test_relative_mode_accumulates(executor):
    run(executor, "G91", "G1 X1 Y2", "G1 X1")
    assert executor.absolute is False
    assert executor.position == (2.0, 2.0, 0.0)
    first = executor.planner.pop()
    second = executor.planner.pop()
    assert first.target == (1.0, 2.0, 0.0)
    assert second.target == (2.0, 2.0, 0.0)
    assert second.absolute is False


def test_absolute_mode_restored(executor):
    run(executor, "G91", "G1 X4", "G90", "G1 X1")
    assert executor.absolute is True
    assert executor.position == (1.0, 0.0, 0.0)


def test_arc_updates_position_without_queuing(executor):
    (block,) = run(executor, "G2 X5 Y5 I2.5 J0 R3")
    assert block.is_arc is True
    assert block.i == 2.5
    assert block.radius == 3.0
    assert executor.planner.is_empty()
    assert executor.position == (5.0, 5.0, 0.0)


def test_dwell_sleeps_for_p_seconds(executor, sleeps):
    run(executor, "G4 P1.5")
    assert sleeps == [1.5]
    assert executor.planner.is_empty() is True
    assert executor.position == (0.0, 0.0, 0.0)


def test_move_output_reports_coordinates(executor, lines):
    run(executor, "G1 X1.5 F200")
    assert lines[0] == "[G1] Linear move"
    assert "  X: 1.500" in lines
    assert "  F: 200.000" in lines
    block = executor.planner.pop()
    assert block.feed_rate == 200.0
    assert block.target == (1.5, 0.0, 0.0)


def test_spindle_command_reported(executor, lines):
    run(executor, "M3")
    assert lines == ["[M3] Spindle ON (clockwise)"]
    assert executor.planner.is_empty() is True
    assert executor.position == (0.0, 0.0, 0.0)


def test_unknown_g_command_warns(executor, lines):
    result = run(executor, "G5")
    assert result == [None]
    assert lines == ["[WARN] Command G5 not implemented"]


def test_unknown_letter_reports_error(executor, lines):
    executor.execute(GCode(letter="X", number=0))
    assert lines[0].startswith("[ERROR]")
    assert executor.planner.is_empty() is True
    assert executor.position == (0.0, 0.0, 0.0)


def test_full_planner_still_moves_position(lines, sleeps):
    executor = Executor(Planner(2), output=lines.append, sleep=sleeps.append)
    run(executor, "G1 X1", "G1 X2")
    assert len(executor.planner) == 1
    assert executor.position == (2.0, 0.0, 0.0)
import pytest

from cncgrbl.config import FEEDRATE_DEFAULT, PLANNER_BUFFER_SIZE
from cncgrbl.planner import PlanBlock, Planner


def _block(x):
    return PlanBlock(target=(float(x), 0.0, 0.0))


def test_new_planner_is_empty():
    planner = Planner()
    assert planner.capacity == PLANNER_BUFFER_SIZE
    assert planner.is_empty()
    assert not planner.is_full()
    assert planner.pop() is None


def test_block_defaults():
    block = PlanBlock()
    assert block.feed_rate == FEEDRATE_DEFAULT
    assert block.absolute is True
    assert block.rapid is False
    assert block.is_arc is False


def test_push_pop_fifo():
    planner = Planner()
    blocks = [_block(n) for n in range(5)]
    for block in blocks:
        assert planner.push(block)
    assert [planner.pop() for _ in blocks] == blocks
    assert planner.is_empty()


def test_holds_one_less_than_capacity():
    planner = Planner(capacity=4)
    accepted = 0
    while planner.push(_block(accepted)):
        accepted += 1
    assert planner.is_full()
    assert accepted == planner.capacity - 1
    assert len(planner) == accepted


def test_full_planner_drops_block():
    planner = Planner(capacity=3)
    planner.push(_block(1))
    planner.push(_block(2))
    assert planner.push(_block(3)) is False
    assert planner.pop() == _block(1)
    assert planner.pop() == _block(2)
    assert planner.pop() is None


def test_reset_empties():
    planner = Planner()
    planner.push(_block(1))
    planner.reset()
    assert planner.is_empty()
    assert planner.pop() is None


def test_wraparound():
    planner = Planner(capacity=3)
    out = []
    for n in range(8):
        planner.push(_block(n))
        out.append(planner.pop().target[0])
    assert out == [float(n) for n in range(8)]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Planner(capacity=0)
import pytest

from cncgrbl.hal_timer import StepTimer


def test_tick_before_start_does_nothing():
    calls = []
    timer = StepTimer()
    timer.attach_callback(lambda: calls.append(1))
    assert timer.tick() is False
    assert calls == []


def test_tick_runs_callback_when_started():
    calls = []
    timer = StepTimer()
    timer.attach_callback(lambda: calls.append(1))
    timer.start(500)
    assert timer.interval_us == 500
    assert timer.tick() is True
    assert timer.tick() is True
    assert len(calls) == 2


def test_stop_halts_callbacks():
    calls = []
    timer = StepTimer()
    timer.attach_callback(lambda: calls.append(1))
    timer.start(100)
    timer.tick()
    timer.stop()
    assert timer.running is False
    assert timer.tick() is False
    assert len(calls) == 1


def test_callback_may_stop_timer():
    timer = StepTimer()
    calls = []

    def callback():
        calls.append(1)
        timer.stop()

    timer.attach_callback(callback)
    timer.start(50)
    timer.tick()
    assert timer.running is False
    assert timer.tick() is False
    assert len(calls) == 1


def test_no_callback_attached():
    timer = StepTimer()
    timer.start(100)
    assert timer.tick() is False


def test_invalid_interval():
    with pytest.raises(ValueError):
        StepTimer().start(0)
import pytest

from superboids.core.timing import FixedStep


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_no_step_before_interval_elapses():
    timer = FixedStep(step_seconds=0.25)
    timer.start()

    assert timer.advance(0.125) == 0
    assert timer.advance(0.125) == 1


def test_single_step_per_frame_by_default():
    timer = FixedStep(step_seconds=0.25, max_frame_time=1.0)
    timer.start()

    # Three intervals worth of time, but only one step may run
    assert timer.advance(0.75) == 1


def test_backlog_beyond_cap_is_dropped():
    timer = FixedStep(step_seconds=0.25, max_frame_time=1.0)
    timer.start()

    assert timer.advance(0.875) == 1
    # Whole missed steps are gone, the 0.125 remainder is kept
    assert timer.advance(0.0) == 0
    assert timer.advance(0.125) == 1


def test_catch_up_runs_missed_steps():
    timer = FixedStep(step_seconds=0.25, max_frame_time=1.0, max_steps_per_frame=4)
    timer.start()

    assert timer.advance(0.75) == 3


def test_frame_time_is_clamped():
    timer = FixedStep(step_seconds=0.25, max_frame_time=0.5, max_steps_per_frame=10)
    timer.start()

    assert timer.advance(10.0) == 2


def test_reads_injected_clock():
    clock = FakeClock()
    timer = FixedStep(step_seconds=0.25, clock=clock)
    timer.start()

    clock.now = 0.25
    assert timer.advance() == 1
    clock.now = 0.375
    assert timer.advance() == 0


@pytest.mark.parametrize(
    "kwargs", [{"step_seconds": 0.0}, {"max_steps_per_frame": 0}]
)
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        FixedStep(**kwargs)

import pytest

from xframe.timer import Timer


def _clock(times):
    values = iter(times)
    return lambda: next(values)


def test_initial_state_after_initialize():
    timer = Timer(_clock([10.0]))
    timer.initialize()
    assert timer.elapsed_time == 0.0
    assert timer.total_time == 0.0
    assert timer.frames_per_second == 0.0


def test_elapsed_and_total_accumulate():
    timer = Timer(_clock([5.0, 5.25, 5.75]))
    timer.initialize()
    timer.update()
    assert timer.elapsed_time == pytest.approx(0.25)
    timer.update()
    assert timer.elapsed_time == pytest.approx(0.5)
    assert timer.total_time == pytest.approx(0.75)


def test_fps_not_reported_before_one_second():
    timer = Timer(_clock([0.0, 0.3, 0.6]))
    timer.initialize()
    timer.update()
    timer.update()
    assert timer.frames_per_second == 0.0


def test_fps_after_one_second():
    times = [0.0] + [0.25 * i for i in range(1, 5)]
    timer = Timer(_clock(times))
    timer.initialize()
    for _ in range(4):
        timer.update()
    assert timer.total_time == pytest.approx(1.0)
    assert timer.frames_per_second == pytest.approx(4.0)


def test_fps_uses_frames_over_time_span():
    timer = Timer(_clock([0.0, 0.5, 1.0, 1.5, 2.0]))
    timer.initialize()
    for _ in range(4):
        timer.update()
    assert timer.frames_per_second == pytest.approx(2.0)


def test_initialize_resets_totals():
    timer = Timer(_clock([0.0, 2.0, 100.0]))
    timer.initialize()
    timer.update()
    assert timer.total_time == pytest.approx(2.0)
    timer.initialize()
    assert timer.total_time == 0.0
    assert timer.frames_per_second == 0.0


def test_default_clock_moves_forward():
    timer = Timer()
    timer.initialize()
    timer.update()
    timer.update()
    assert timer.elapsed_time >= 0.0
    assert timer.total_time >= timer.elapsed_time
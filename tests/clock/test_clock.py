import time

import pytest

from blockfall.clock.simple import SimpleClock

TAKES_TOO_LONG_MESSAGE = "Takes too long. Enable when making changes to a clock class!"


class FakeTime:
    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def perf_counter(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_time(monkeypatch: pytest.MonkeyPatch) -> FakeTime:
    fake = FakeTime()
    monkeypatch.setattr("blockfall.clock.simple.time", fake)
    return fake


def test_first_tick_reports_no_elapsed_time(fake_time: FakeTime) -> None:
    clock = SimpleClock(fps=10)
    fake_time.now = 5

    assert clock.tick() == 0
    assert fake_time.sleeps == []
    assert fake_time.sleeps == []


def test_tick_sleeps_for_the_rest_of_the_frame(fake_time: FakeTime) -> None:
    clock = SimpleClock(fps=10)
    clock.tick()

    fake_time.now += 0.03
    elapsed_ms = clock.tick()

    assert fake_time.sleeps == [pytest.approx(0.07)]
    assert elapsed_ms == pytest.approx(100)


def test_tick_does_not_sleep_when_frame_took_too_long(fake_time: FakeTime) -> None:
    clock = SimpleClock(fps=10)
    clock.tick()

    fake_time.now += 0.25
    elapsed_ms = clock.tick()

    assert fake_time.sleeps == []
    assert elapsed_ms == pytest.approx(250)


def test_reset(fake_time: FakeTime) -> None:
    clock = SimpleClock(fps=10)
    clock.tick()
    fake_time.now += 3

    clock.reset()

    assert clock.tick() == 0
    assert fake_time.sleeps == []


def measure_average_time_between_ticks(
    clock: SimpleClock, simulated_processing_time_between_ticks_s: float = 0, num_samples: int = 10
) -> float:
    clock.tick()
    before = time.perf_counter()

    for _ in range(num_samples):
        time.sleep(simulated_processing_time_between_ticks_s)
        clock.tick()

    after = time.perf_counter()

    return (after - before) / num_samples


@pytest.mark.skip(reason=TAKES_TOO_LONG_MESSAGE)
@pytest.mark.parametrize("processing_time_factor", [0, 0.5])
def test_clock_tick_delay_in_real_time(processing_time_factor: float) -> None:
    fps = 60
    desired_tick_delay = 1 / fps
    clock = SimpleClock(fps=fps)

    tick_delay = measure_average_time_between_ticks(
        clock, simulated_processing_time_between_ticks_s=desired_tick_delay * processing_time_factor
    )

    assert tick_delay == pytest.approx(desired_tick_delay, abs=1e-3)

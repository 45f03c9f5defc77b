import time


class SimpleClock:
    def __init__(self, fps: float = 60) -> None:
        self._tick_delay = 1 / fps
        self._last_tick: float | None = None

    def tick(self) -> float:
        """Sleep until the next frame is due. Return the milliseconds since the previous tick (0 on the first)."""
        if (
            self._last_tick is not None
            and (remaining_delay := self._last_tick + self._tick_delay - time.perf_counter()) > 0
        ):
            time.sleep(remaining_delay)

        now = time.perf_counter()
        elapsed_ms = 0.0 if self._last_tick is None else (now - self._last_tick) * 1000
        self._last_tick = now

        return elapsed_ms

    def reset(self) -> None:
        self._last_tick = None

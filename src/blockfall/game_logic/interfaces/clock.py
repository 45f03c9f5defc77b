from typing import Protocol


class Clock(Protocol):
    def tick(self) -> float:
        """Wait for the next frame and return the elapsed milliseconds since the previous one."""
        ...

    def reset(self) -> None: ...

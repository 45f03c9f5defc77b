import io
import sys
from types import TracebackType
from typing import Self, TextIO


class BufferedPrint:
    """Redirection of stdout to a buffer which is printed to the console all at once at the desired time."""

    def __init__(self) -> None:
        self._buffer = io.StringIO()
        self._previous_stdout: TextIO = sys.stdout

    def is_active(self) -> bool:
        return sys.stdout is self._buffer

    def start_buffering(self) -> Self:
        if self.is_active():
            raise RuntimeError("BufferedPrint is already active")

        self._previous_stdout = sys.stdout
        sys.stdout = self._buffer
        return self

    def print_and_reset_buffer(self) -> None:
        output = self._stop_buffering()
        print(output, end="", flush=True)

    def discard_and_reset_buffer(self) -> None:
        self._stop_buffering()

    def _stop_buffering(self) -> str:
        if not self.is_active():
            raise RuntimeError("BufferedPrint is not active")

        sys.stdout = self._previous_stdout
        output = self._buffer.getvalue()
        self._buffer.close()
        self._buffer = io.StringIO()
        return output

    def __enter__(self) -> Self:
        return self.start_buffering()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        # a half-drawn frame is worse than a skipped one
        if exc_type is None:
            self.print_and_reset_buffer()
        else:
            self.discard_and_reset_buffer()

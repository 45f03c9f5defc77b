from collections.abc import Iterable, Iterator

from blockfall.game_logic.interfaces.controller import Action, Controller


class StubController(Controller):
    """Replays a fixed script: one batch of actions per frame, then nothing."""

    def __init__(self, batches: Iterable[Iterable[Action]] = (), *, restart_on_frames: Iterable[int] = ()) -> None:
        self._batches: Iterator[Iterable[Action]] = iter(batches)
        self._restart_on_frames = set(restart_on_frames)
        self._frame_counter = 0

    def get_actions(self) -> list[Action]:
        self._frame_counter += 1
        return list(next(self._batches, ()))

    def restart_requested(self) -> bool:
        # asked once per frame, before get_actions
        return self._frame_counter + 1 in self._restart_on_frames

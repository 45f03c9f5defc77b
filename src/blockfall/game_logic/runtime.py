import logging

from blockfall.game_logic.game import Game
from blockfall.game_logic.interfaces.clock import Clock
from blockfall.game_logic.interfaces.controller import Controller
from blockfall.game_logic.interfaces.ui import UI

LOGGER = logging.getLogger(__name__)


class Runtime:
    """Frame loop tying a game to its clock, its controller, and its UI.

    Everything happens on the calling thread, so the game never sees concurrent mutations: each frame first applies the
    queued player actions, then advances gravity by the elapsed time, then draws.
    """

    def __init__(self, *, game: Game, ui: UI, clock: Clock, controller: Controller) -> None:
        self._game = game
        self._ui = ui
        self._clock = clock
        self._controller = controller

        self._frame_counter = 0
        self._stopped = False

    @property
    def frame_counter(self) -> int:
        return self._frame_counter

    @property
    def game(self) -> Game:
        return self._game

    def stop(self) -> None:
        """Stop producing frames. Takes effect before the next frame."""
        self._stopped = True

    def run(self, max_frames: int | None = None) -> None:
        self._stopped = False
        self._clock.reset()
        self._ui.initialize(*self._game.snapshot().board.shape)
        LOGGER.info("Runtime started")

        try:
            while not self._stopped and (max_frames is None or self._frame_counter < max_frames):
                self.advance_frame(self._clock.tick())
        except KeyboardInterrupt:
            LOGGER.info("Interrupted by user")
        finally:
            self._ui.terminate()
            LOGGER.info("Runtime stopped after %d frames", self._frame_counter)

    def advance_frame(self, elapsed_ms: float) -> None:
        self._frame_counter += 1

        if self._controller.quit_requested():
            self.stop()
            return

        # always consume the request, so that a press during a running game can't restart the next game over screen
        if self._controller.restart_requested() and not self._game.running:
            self._game.restart()

        for action in self._controller.get_actions():
            self._game.handle_input(action)

        self._game.tick(elapsed_ms)

        self._ui.draw(self._game.snapshot())

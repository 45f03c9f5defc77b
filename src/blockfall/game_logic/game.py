import logging

import numpy as np
from numpy.typing import NDArray

from blockfall.config import DEFAULT_CONFIG, GameConfig
from blockfall.game_logic.components import Piece, PieceCatalog
from blockfall.game_logic.interfaces.controller import Action
from blockfall.game_logic.interfaces.ui import GameSnapshot
from blockfall.game_logic.rules.move_rotate import DOWN, LEFT, RIGHT, attempt_rotate, try_move
from blockfall.game_logic.session import GameSession, GameState

LOGGER = logging.getLogger(__name__)


class Game:
    """Entry point of the engine: the only place where the session gets mutated.

    `tick` is driven by the runtime's clock, `handle_input` by the controller. Both are no-ops while the game is not
    running, so they can be called unconditionally from an always-on loop.
    """

    def __init__(
        self,
        session: GameSession | None = None,
        *,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        """Play on the given session, or on a new one with the standard pieces built from `config` and `seed`."""
        if session is not None:
            if config is not None or seed is not None:
                msg = "config and seed only apply to a new session, they can't be combined with an existing one"
                raise ValueError(msg)
            self._session = session
            return

        config = config or DEFAULT_CONFIG
        self._session = GameSession(
            PieceCatalog.standard(config.board_width, spawn_width=config.spawn_width, seed=seed), config
        )

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def state(self) -> GameState:
        return self._session.state

    @property
    def running(self) -> bool:
        return self._session.running

    @property
    def board(self) -> NDArray[np.bool_]:
        return self._session.board.occupancy()

    @property
    def active_piece(self) -> Piece | None:
        return self._session.piece.copy() if self._session.piece is not None else None

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def level(self) -> int:
        return self._session.level

    @property
    def lines_cleared(self) -> int:
        return self._session.lines_cleared

    @property
    def combo(self) -> int:
        return self._session.combo

    @property
    def drop_interval(self) -> float:
        return self._session.drop_interval

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self._session.board.as_array(),
            piece=self.active_piece,
            score=self._session.score,
            level=self._session.level,
            lines_cleared=self._session.lines_cleared,
            combo=self._session.combo,
            state=self._session.state,
            cell_colors=self._session.catalog.colors,
        )

    def start(self) -> None:
        self._session.start()

    def restart(self) -> None:
        LOGGER.info("Restarting game (was %s)", self._session.state.name)
        self._session.start()

    def reset(self) -> None:
        self._session.reset()

    def tick(self, elapsed_ms: float) -> None:
        if not self._session.running:
            return

        self._session.drop_counter += elapsed_ms
        if self._session.drop_counter > self._session.drop_interval:
            self._drop_or_lock()
            self._session.drop_counter = 0

    def handle_input(self, action: Action) -> bool:
        """Apply a player action. Return whether it changed the active piece or the board."""
        session = self._session
        if not session.running or session.piece is None:
            return False

        match action:
            case Action.MOVE_LEFT:
                return try_move(session.piece, session.board, LEFT)
            case Action.MOVE_RIGHT:
                return try_move(session.piece, session.board, RIGHT)
            case Action.SOFT_DROP:
                self._drop_or_lock()
                session.drop_counter = 0
                return True
            case Action.ROTATE:
                return attempt_rotate(session.piece, session.board, session.config.wall_kick_offsets)
            case _:
                msg = f"Unknown action: {action}"
                raise ValueError(msg)

    def _drop_or_lock(self) -> None:
        assert self._session.piece is not None

        if not try_move(self._session.piece, self._session.board, DOWN):
            self._session.lock()

import logging
from enum import Enum, auto

from blockfall.config import DEFAULT_CONFIG, GameConfig
from blockfall.game_logic.components import Board, Piece, PieceCatalog, has_collision
from blockfall.game_logic.components.exceptions import CannotSpawnPieceError, NoActivePieceError
from blockfall.game_logic.rules.scoring import compute_points, drop_interval_for_level, level_for_lines

LOGGER = logging.getLogger(__name__)


class GameState(Enum):
    NOT_STARTED = auto()
    RUNNING = auto()
    GAME_OVER = auto()


class GameSession:
    """The mutable state of one run: board, active piece, and the score/level/speed counters.

    Owns locking pieces into the board and clearing full rows. It is mutated exclusively through `Game`, which decides
    when to call into it.
    """

    def __init__(self, catalog: PieceCatalog, config: GameConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.catalog = catalog

        self.board = Board.create_empty(config.board_height, config.board_width)
        self.piece: Piece | None = None
        self.state = GameState.NOT_STARTED

        self._reset_counters()

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    def _reset_counters(self) -> None:
        self.score = 0
        self.level = 1
        self.lines_cleared = 0
        self.combo = 0
        self.drop_interval = drop_interval_for_level(self.level, self.config)
        # time accumulated since the last forced drop
        self.drop_counter: float = 0

    def start(self) -> None:
        self.board = Board.create_empty(self.config.board_height, self.config.board_width)
        self._reset_counters()
        self.state = GameState.RUNNING
        LOGGER.info("Game started on a %dx%d board", *self.board.size)

        try:
            self.spawn()
        except CannotSpawnPieceError:
            self._game_over()

    def reset(self) -> None:
        self.board.clear()
        self.piece = None
        self._reset_counters()
        self.state = GameState.NOT_STARTED

    def spawn(self) -> None:
        piece = self.catalog.generate()
        if has_collision(piece, self.board):
            msg = f"Freshly generated {piece!r} collides with the board"
            raise CannotSpawnPieceError(msg)

        self.piece = piece
        LOGGER.debug("Spawned %r", piece)

    def lock(self) -> int:
        """Solidify the active piece, then clear full rows. Return the number of cleared rows.

        If the next piece cannot be spawned the game is over, and there is nothing left to clear.
        """
        self.solidify()
        if not self.running:
            return 0
        return self.clear_full_rows()

    def solidify(self) -> None:
        if self.piece is None:
            raise NoActivePieceError

        self.board.merge_piece(self.piece)
        LOGGER.debug("Locked %r", self.piece)

        try:
            self.spawn()
        except CannotSpawnPieceError:
            self._game_over()

    def clear_full_rows(self) -> int:
        rows_removed = 0

        # rows below the lowest full row never change, so the sweep can start there
        full_rows = self.board.full_row_indices()
        row_idx = full_rows[-1] if full_rows else -1
        while row_idx >= 0:
            if self.board.is_row_full(row_idx):
                # the row shifted down into this index has to be checked as well, so don't advance
                self.board.clear_row(row_idx)
                rows_removed += 1
            else:
                row_idx -= 1

        self._update_progression(rows_removed)
        return rows_removed

    def _update_progression(self, rows_removed: int) -> None:
        if rows_removed == 0:
            self.combo = 0
            return

        self.combo += 1
        points = compute_points(rows_removed, self.level, self.combo, self.config)
        self.score += points
        self.lines_cleared += rows_removed
        LOGGER.debug(
            "Cleared %d row(s) with combo %d for %d points (score %d)", rows_removed, self.combo, points, self.score
        )

        new_level = level_for_lines(self.lines_cleared, self.config)
        if new_level > self.level:
            self.level = new_level
            self.drop_interval = drop_interval_for_level(self.level, self.config)
            LOGGER.info("Reached level %d, drop interval is now %s ms", self.level, self.drop_interval)

    def _game_over(self) -> None:
        LOGGER.info(
            "Game over at level %d with score %d after %d cleared lines", self.level, self.score, self.lines_cleared
        )
        # all counters go back to their initial values in the same step that stops the game
        self.piece = None
        self._reset_counters()
        self.state = GameState.GAME_OVER

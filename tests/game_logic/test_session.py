import random

import numpy as np
import pytest

from blockfall.config import GameConfig
from blockfall.game_logic.components import Board, PieceCatalog, Vec
from blockfall.game_logic.components.exceptions import NoActivePieceError
from blockfall.game_logic.session import GameSession, GameState

SMALL_CONFIG = GameConfig(board_height=4, board_width=4)


def _o_piece_session(config: GameConfig = SMALL_CONFIG) -> GameSession:
    """A started session whose catalog only contains the O piece, spawning at the top left of a 4-wide board."""
    catalog = PieceCatalog(
        [[[1, 1], [1, 1]]],
        ["#E0E722"],
        board_width=config.board_width,
        spawn_width=config.spawn_width,
        rng=random.Random(0),  # noqa: S311
    )
    session = GameSession(catalog, config)
    session.start()
    return session


def test_new_session_is_not_started() -> None:
    session = GameSession(PieceCatalog.standard(board_width=14))

    assert session.state is GameState.NOT_STARTED
    assert not session.running
    assert session.piece is None
    assert session.board.size == (30, 14)


def test_start() -> None:
    session = _o_piece_session()

    assert session.state is GameState.RUNNING
    assert session.running
    assert session.piece is not None
    assert session.piece.position == Vec(0, 0)
    assert (session.score, session.level, session.lines_cleared, session.combo) == (0, 1, 0, 0)
    assert session.drop_interval == 1000
    assert session.drop_counter == 0
    assert not session.board.occupancy().any()


def test_start_allocates_a_fresh_board() -> None:
    session = _o_piece_session()
    session.board = Board.from_string_representation("X...\n....\n....\n....")

    session.start()

    assert not session.board.occupancy().any()


def test_clear_full_rows_non_adjacent() -> None:
    session = GameSession(PieceCatalog.standard(board_width=14, seed=0))
    session.start()

    rows = ["." * 14] * 30
    rows[27] = "X" * 14
    rows[28] = "X" + "." * 13
    rows[29] = "X" * 14
    session.board = Board.from_string_representation("\n".join(rows))

    assert session.clear_full_rows() == 2

    assert session.board.size == (30, 14)
    expected_rows = ["." * 14] * 29 + ["X" + "." * 13]
    assert str(session.board) == "\n".join(expected_rows)


def test_clear_full_rows_adjacent() -> None:
    session = _o_piece_session()
    session.board = Board.from_string_representation(
        """
            .X..
            XXXX
            XXXX
            XX.X
        """
    )

    assert session.clear_full_rows() == 2

    assert (
        str(session.board)
        == """
            ....
            ....
            .X..
            XX.X
        """.replace(" ", "").strip()
    )


def test_clear_full_rows_keeps_cell_values() -> None:
    session = _o_piece_session()
    session.board = Board(np.array([[0, 3, 0, 0], [1, 2, 3, 4], [0, 0, 0, 0], [5, 0, 0, 0]], dtype=np.uint8))

    session.clear_full_rows()

    np.testing.assert_array_equal(
        session.board.as_array(), [[0, 0, 0, 0], [0, 3, 0, 0], [0, 0, 0, 0], [5, 0, 0, 0]]
    )


def test_score_and_combo_progression() -> None:
    session = _o_piece_session()

    # GIVEN one full row
    session.board = Board.from_string_representation("....\n....\n....\nXXXX")
    assert session.clear_full_rows() == 1
    assert (session.score, session.combo, session.lines_cleared) == (100, 1, 1)

    # GIVEN two full rows on the next lock: combo bonus applies
    session.board = Board.from_string_representation("....\n....\nXXXX\nXXXX")
    assert session.clear_full_rows() == 2
    assert (session.score, session.combo, session.lines_cleared) == (100 + 350, 2, 3)

    # GIVEN a lock without full rows: combo breaks, score stays
    session.board = Board.from_string_representation("....\n....\n....\nXXX.")
    assert session.clear_full_rows() == 0
    assert (session.score, session.combo, session.lines_cleared) == (450, 0, 3)

    # GIVEN one full row again: combo starts over
    session.board = Board.from_string_representation("....\n....\n....\nXXXX")
    assert session.clear_full_rows() == 1
    assert (session.score, session.combo, session.lines_cleared) == (550, 1, 4)


def test_score_is_multiplied_by_level() -> None:
    session = _o_piece_session()
    session.level = 3
    session.lines_cleared = 20

    session.board = Board.from_string_representation("....\n....\n....\nXXXX")
    session.clear_full_rows()

    assert session.score == 300


def test_level_up_at_ten_lines() -> None:
    session = _o_piece_session()
    session.lines_cleared = 9

    session.board = Board.from_string_representation("....\n....\n....\nXXXX")
    session.clear_full_rows()

    assert session.lines_cleared == 10
    assert session.level == 2
    assert session.drop_interval == 900
    # points are computed with the level before the level up
    assert session.score == 100


def test_drop_interval_floor() -> None:
    session = _o_piece_session()
    session.lines_cleared = 99
    session.level = 10
    session.drop_interval = 200

    session.board = Board.from_string_representation("....\n....\n....\nXXXX")
    session.clear_full_rows()

    assert session.lines_cleared == 100
    assert session.level == 11
    assert session.drop_interval == 200


def test_no_level_change_below_threshold() -> None:
    session = _o_piece_session()
    session.lines_cleared = 5

    session.board = Board.from_string_representation("....\n....\nXXXX\nXXXX")
    session.clear_full_rows()

    assert session.level == 1
    assert session.drop_interval == 1000


def test_solidify_merges_piece_and_spawns_next() -> None:
    session = _o_piece_session()
    assert session.piece is not None
    locked_piece = session.piece
    locked_piece.position = Vec(2, 1)

    session.solidify()

    assert (
        str(session.board)
        == """
            ....
            ....
            .XX.
            .XX.
        """.replace(" ", "").strip()
    )
    assert session.board.as_array()[2, 1] == 1
    assert session.piece is not None
    assert session.piece is not locked_piece
    assert session.piece.position == Vec(0, 0)
    assert session.running


def test_solidify_without_piece_fails() -> None:
    session = GameSession(PieceCatalog.standard(board_width=14))

    with pytest.raises(NoActivePieceError):
        session.solidify()


def test_game_over_when_next_piece_collides() -> None:
    session = _o_piece_session()
    assert session.piece is not None
    session.piece.position = Vec(2, 2)
    session.board = Board.from_string_representation(
        """
            ....
            X...
            ....
            XX..
        """
    )
    session.score = 500
    session.level = 4
    session.lines_cleared = 31
    session.combo = 2
    session.drop_interval = 700
    session.drop_counter = 123

    rows_removed = session.lock()

    # the bottom row was completed by the lock, but the game ended before it could be cleared
    assert rows_removed == 0
    assert session.board.is_row_full(3)

    assert session.state is GameState.GAME_OVER
    assert not session.running
    assert session.piece is None
    assert (session.score, session.level, session.lines_cleared, session.combo) == (0, 1, 0, 0)
    assert session.drop_interval == 1000
    assert session.drop_counter == 0


def test_lock_clears_rows_when_game_goes_on() -> None:
    session = _o_piece_session()
    assert session.piece is not None
    session.piece.position = Vec(2, 2)
    session.board = Board.from_string_representation("....\n....\nXX..\nXX..")

    assert session.lock() == 2

    assert session.running
    assert session.score == 300
    assert not session.board.occupancy().any()


def test_start_on_a_board_too_narrow_to_spawn_is_game_over() -> None:
    # pieces spawn at x = 4 // 2 - 8 // 2 = -2, outside the board
    session = _o_piece_session(GameConfig(board_height=4, board_width=4, spawn_width=8))

    assert session.state is GameState.GAME_OVER
    assert session.piece is None


def test_reset() -> None:
    session = _o_piece_session()
    session.board = Board.from_string_representation("....\n....\n....\nXX..")
    session.score = 100

    session.reset()

    assert session.state is GameState.NOT_STARTED
    assert session.piece is None
    assert session.score == 0
    assert not session.board.occupancy().any()

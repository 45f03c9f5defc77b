import numpy as np

from blockfall.game_logic.components.board import Board
from blockfall.game_logic.components.piece import Piece


def has_collision(piece: Piece, board: Board) -> bool:
    """Whether any filled cell of the piece lies outside the board or on top of an occupied board cell."""
    ys, xs = piece.occupied_cells()

    if np.any((ys < 0) | (ys >= board.height) | (xs < 0) | (xs >= board.width)):
        return True

    return bool(np.any(board.array_view()[ys, xs]))

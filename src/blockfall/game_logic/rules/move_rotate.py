import logging
from collections.abc import Sequence

from blockfall.config import DEFAULT_CONFIG
from blockfall.game_logic.components import Board, Piece, Vec, has_collision, rotate_clockwise

LOGGER = logging.getLogger(__name__)

LEFT = Vec(0, -1)
RIGHT = Vec(0, 1)
DOWN = Vec(1, 0)


def try_move(piece: Piece, board: Board, offset: Vec) -> bool:
    """Move the piece by `offset` unless that makes it collide. Return whether the move was successful."""
    piece.move(offset)

    if has_collision(piece, board):
        piece.move(-offset)
        return False

    return True


def attempt_rotate(
    piece: Piece, board: Board, wall_kick_offsets: Sequence[int] = DEFAULT_CONFIG.wall_kick_offsets
) -> bool:
    """Rotate the piece clockwise, shifting it sideways if the rotated shape collides ("wall kick").

    The offsets are tried in the given order, each relative to the original position; the first one that resolves the
    collision wins. If none does, shape and position are restored and the rotation is rejected.

    Returns:
        Whether the rotation was successful.
    """
    original_shape = piece.shape
    piece.shape = rotate_clockwise(original_shape)

    if not has_collision(piece, board):
        return True

    for x_offset in wall_kick_offsets:
        if try_move(piece, board, Vec(0, x_offset)):
            LOGGER.debug("Rotation resolved by wall kick of %+d", x_offset)
            return True

    piece.shape = original_shape
    LOGGER.debug("Rotation rejected at %s", piece.position)
    return False

from blockfall.game_logic.components.board import Board
from blockfall.game_logic.components.catalog import PieceCatalog
from blockfall.game_logic.components.collision import has_collision
from blockfall.game_logic.components.piece import Piece, Vec, rotate_clockwise

__all__ = ["Board", "Piece", "PieceCatalog", "Vec", "has_collision", "rotate_clockwise"]

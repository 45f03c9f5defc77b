from typing import Self

import numpy as np
from numpy.typing import NDArray

from blockfall.game_logic.components.exceptions import PieceOutOfBoundsError
from blockfall.game_logic.components.piece import Piece


class Board:
    """Fixed-size grid of locked cells. A cell value of 0 means empty, anything else means occupied."""

    def __init__(self, board_array: NDArray[np.uint8]) -> None:
        if board_array.ndim != 2 or 0 in board_array.shape:  # noqa: PLR2004
            msg = f"Board array must be two-dimensional and non-empty, got shape {board_array.shape}"
            raise ValueError(msg)

        self._board: NDArray[np.uint8] = board_array

    @classmethod
    def create_empty(cls, height: int, width: int) -> Self:
        return cls(np.zeros((height, width), dtype=np.uint8))

    @classmethod
    def from_string_representation(cls, string: str) -> Self:
        if not set(string) <= {"X", ".", " ", "\n"}:
            msg = (
                "Invalid string representation of board! "
                f"Must consist of only 'X', '.', spaces, and newlines, but found {set(string)}"
            )
            raise ValueError(msg)

        width = 0
        _board: list[list[bool]] = []
        for line in string.strip().splitlines():
            line = line.strip()  # noqa: PLW2901
            if not width:
                width = len(line)
            elif len(line) != width:
                msg = "Invalid string representation of board (all lines must have the same width)"
                raise ValueError(msg)

            _board.append([c == "X" for c in line])

        return cls(np.array(_board, dtype=np.uint8))

    @property
    def height(self) -> int:
        return self._board.shape[0]

    @property
    def width(self) -> int:
        return self._board.shape[1]

    @property
    def size(self) -> tuple[int, int]:
        return self.height, self.width

    def __str__(self) -> str:
        return "\n".join("".join(("X" if c else ".") for c in line) for line in self._board)

    def as_array(self) -> NDArray[np.uint8]:
        return self._board.copy()

    def array_view(self) -> NDArray[np.uint8]:
        """Read access without copying. Callers must not write into the returned array."""
        return self._board

    def occupancy(self) -> NDArray[np.bool_]:
        return self._board != 0

    def clear(self) -> None:
        self._board[...] = 0

    def is_row_full(self, row_idx: int) -> bool:
        return bool(np.all(self._board[row_idx]))

    def full_row_indices(self) -> list[int]:
        return [int(idx) for idx in np.where(np.all(self._board, axis=1))[0]]

    def clear_row(self, row_idx: int) -> None:
        if row_idx < 0 or row_idx >= self.height:
            msg = f"Row index out of range (0-{self.height - 1})"
            raise IndexError(msg)

        # move everything above the cleared row one row down
        self._board[1 : row_idx + 1] = self._board[:row_idx]
        # fill the top row with zeros (empty)
        self._board[0] = 0

    def merge_piece(self, piece: Piece) -> None:
        ys, xs = piece.occupied_cells()

        if ys.min() < 0 or xs.min() < 0 or ys.max() >= self.height or xs.max() >= self.width:
            msg = f"Cannot merge {piece!r}: it sticks out of the {self.height}x{self.width} board"
            raise PieceOutOfBoundsError(msg)

        self._board[ys, xs] = piece.cell_value

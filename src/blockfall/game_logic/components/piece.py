from collections.abc import Sequence
from copy import deepcopy
from dataclasses import dataclass
from typing import Self

import numpy as np
from numpy.typing import NDArray

from blockfall.game_logic.components.exceptions import InvalidShapeError


@dataclass(frozen=True, slots=True)
class Vec:
    y: int
    x: int

    def __add__(self, other: Self) -> "Vec":
        return Vec(y=self.y + other.y, x=self.x + other.x)

    def __neg__(self) -> "Vec":
        return Vec(y=-self.y, x=-self.x)


def shape_from_rows(rows: Sequence[Sequence[int]]) -> NDArray[np.uint8]:
    """Build a shape array from nested rows of 0 (empty) and 1 (filled)."""
    if not rows or not rows[0]:
        msg = "Shape must have at least one row and one column"
        raise InvalidShapeError(msg)

    if any(len(row) != len(rows[0]) for row in rows):
        msg = f"Shape must be rectangular, got row lengths {[len(row) for row in rows]}"
        raise InvalidShapeError(msg)

    shape = np.array(rows, dtype=np.uint8)
    if not np.isin(shape, (0, 1)).all():
        msg = f"Shape cells must be 0 or 1, got {sorted(set(np.unique(shape).tolist()))}"
        raise InvalidShapeError(msg)

    if not shape.any():
        msg = "Shape must have at least one filled cell"
        raise InvalidShapeError(msg)

    return shape


def rotate_clockwise(shape: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Return a new shape rotated by 90 degrees clockwise; `shape` itself is left untouched.

    Works for non-square shapes too: a 1x4 bar becomes a 4x1 bar.
    """
    return np.rot90(shape, k=-1).copy()


class Piece:
    """The active, player-controlled piece: a shape, its color, and its top-left position on the board."""

    def __init__(self, shape: NDArray[np.uint8], color: str, cell_value: int, position: Vec) -> None:
        self.shape = shape
        self.color = color
        # value written into board cells when this piece locks (non-zero)
        self.cell_value = cell_value
        self.position = position

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    @property
    def height(self) -> int:
        return self.shape.shape[0]

    @property
    def width(self) -> int:
        return self.shape.shape[1]

    def occupied_cells(self) -> tuple[NDArray[np.intp], NDArray[np.intp]]:
        """Return the (ys, xs) board coordinates of all filled cells of the piece."""
        ys, xs = np.nonzero(self.shape)
        return ys + self.position.y, xs + self.position.x

    def move(self, offset: Vec) -> None:
        self.position += offset

    def copy(self) -> Self:
        return deepcopy(self)

    def __str__(self) -> str:
        return "\n".join("".join("X" if cell else "." for cell in row) for row in self.shape)

    def __repr__(self) -> str:
        return f"Piece(color={self.color!r}, position={self.position}, shape={self.shape.tolist()})"

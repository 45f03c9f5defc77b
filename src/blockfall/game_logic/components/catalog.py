import random
from collections.abc import Sequence
from dataclasses import dataclass
from math import ceil
from typing import Protocol, Self

import numpy as np
from numpy.typing import NDArray

from blockfall.game_logic.components.exceptions import InvalidShapeError
from blockfall.game_logic.components.piece import Piece, Vec, shape_from_rows


class RandomSource(Protocol):
    def randrange(self, stop: int, /) -> int: ...


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    shape: NDArray[np.uint8]
    color: str


STANDARD_SHAPES: tuple[tuple[tuple[int, ...], ...], ...] = (
    ((1, 1), (1, 1)),
    ((1, 1, 1, 1),),
    ((1, 0, 0), (1, 1, 1)),
    ((0, 0, 1), (1, 1, 1)),
    ((0, 1, 1), (1, 1, 0)),
    ((0, 1, 0), (1, 1, 1)),
    ((1, 1, 0), (0, 1, 1)),
)

STANDARD_COLORS: tuple[str, ...] = (
    "#E0E722",
    "#4D4DFF",
    "#C724B1",
    "#FFAD00",
    "#44D62C",
    "#DB3EB1",
    "#D22730",
)


class PieceCatalog:
    """Immutable set of (shape, color) pairs, and a uniform random generator of pieces drawn from it.

    Board cells of a locked piece hold `catalog index + 1`, so 0 stays reserved for empty cells.
    """

    def __init__(
        self,
        shapes: Sequence[Sequence[Sequence[int]]],
        colors: Sequence[str],
        *,
        board_width: int,
        spawn_width: int = 4,
        rng: RandomSource | None = None,
    ) -> None:
        if not shapes:
            msg = "A piece catalog needs at least one shape"
            raise ValueError(msg)

        if len(shapes) != len(colors):
            msg = f"Every shape needs exactly one color ({len(shapes)} shapes, {len(colors)} colors)"
            raise ValueError(msg)

        if len(shapes) > np.iinfo(np.uint8).max:
            msg = f"At most {np.iinfo(np.uint8).max} shapes fit into a board cell, got {len(shapes)}"
            raise ValueError(msg)

        entries = []
        for rows, color in zip(shapes, colors, strict=True):
            shape = shape_from_rows(rows)
            shape.flags.writeable = False
            # a shape must fit the board in both orientations
            if max(shape.shape) > board_width:
                msg = f"Shape {shape.tolist()} does not fit on a board of width {board_width}"
                raise InvalidShapeError(msg)
            entries.append(CatalogEntry(shape=shape, color=color))

        self._entries = tuple(entries)
        self._spawn_x = board_width // 2 - ceil(spawn_width / 2)
        self._rng: RandomSource = rng or random.Random()  # noqa: S311

    @classmethod
    def standard(cls, board_width: int, *, spawn_width: int = 4, seed: int | None = None) -> Self:
        return cls(
            STANDARD_SHAPES,
            STANDARD_COLORS,
            board_width=board_width,
            spawn_width=spawn_width,
            rng=random.Random(seed),  # noqa: S311
        )

    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        return self._entries

    @property
    def colors(self) -> tuple[str, ...]:
        return tuple(entry.color for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def create_piece(self, index: int) -> Piece:
        entry = self._entries[index]
        return Piece(
            shape=entry.shape.copy(),
            color=entry.color,
            cell_value=index + 1,
            position=Vec(0, self._spawn_x),
        )

    def generate(self) -> Piece:
        """Return a new piece, chosen uniformly at random, horizontally centered at the top of the board."""
        return self.create_piece(self._rng.randrange(len(self._entries)))

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from blockfall.game_logic.components import Piece
from blockfall.game_logic.session import GameState


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of everything the UI draws for one frame."""

    board: NDArray[np.uint8]
    piece: Piece | None
    score: int
    level: int
    lines_cleared: int
    combo: int
    state: GameState
    # color of locked cells, indexed by `cell value - 1`
    cell_colors: tuple[str, ...]

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING


class UI(ABC):
    @abstractmethod
    def initialize(self, board_height: int, board_width: int) -> None: ...

    @abstractmethod
    def draw(self, snapshot: GameSnapshot) -> None: ...

    def terminate(self) -> None:  # noqa: B027
        """Give the terminal (or window) back. Default: nothing to clean up."""

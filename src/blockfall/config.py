from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

_DEFAULT_SCORE_TABLE = MappingProxyType({1: 100, 2: 300, 3: 500, 4: 800})


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Tunable constants of a game session.

    Time values are in milliseconds, matching what the clock feeds into `Game.tick`.
    """

    board_height: int = 30
    board_width: int = 14

    lines_per_level: int = 10
    base_drop_interval_ms: float = 1000
    drop_interval_step_ms: float = 100
    min_drop_interval_ms: float = 200

    # horizontal shifts tried in this order when a rotated piece collides
    wall_kick_offsets: tuple[int, ...] = (-1, 1, -2, 2)

    score_table: Mapping[int, int] = field(default_factory=lambda: _DEFAULT_SCORE_TABLE)
    score_per_row_beyond_table: int = 200
    combo_bonus: int = 50

    # width of a "typical" piece, used to center freshly spawned pieces
    spawn_width: int = 4

    def __post_init__(self) -> None:
        if self.board_height <= 0 or self.board_width <= 0:
            msg = "board_height and board_width have to be > 0"
            raise ValueError(msg)

        if self.lines_per_level < 1:
            msg = "lines_per_level has to be >= 1"
            raise ValueError(msg)

        if not 0 < self.min_drop_interval_ms <= self.base_drop_interval_ms:
            msg = "min_drop_interval_ms has to be > 0 and <= base_drop_interval_ms"
            raise ValueError(msg)

        if self.drop_interval_step_ms < 0:
            msg = "drop_interval_step_ms has to be >= 0"
            raise ValueError(msg)

        if self.spawn_width < 1:
            msg = "spawn_width has to be >= 1"
            raise ValueError(msg)


DEFAULT_CONFIG = GameConfig()

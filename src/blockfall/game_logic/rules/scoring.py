from blockfall.config import DEFAULT_CONFIG, GameConfig


def compute_points(rows_removed: int, level: int, combo: int, config: GameConfig = DEFAULT_CONFIG) -> int:
    """Points for clearing `rows_removed` rows at once, at the given level, as the `combo`-th clear in a row.

    Clears beyond the score table (not reachable with four-cell pieces) are worth a flat amount per row.
    """
    if rows_removed <= 0:
        return 0

    base_points = config.score_table.get(rows_removed, rows_removed * config.score_per_row_beyond_table)
    combo_bonus = (combo - 1) * config.combo_bonus
    return (base_points + combo_bonus) * level


def level_for_lines(lines_cleared: int, config: GameConfig = DEFAULT_CONFIG) -> int:
    return lines_cleared // config.lines_per_level + 1


def drop_interval_for_level(level: int, config: GameConfig = DEFAULT_CONFIG) -> float:
    return max(
        config.base_drop_interval_ms - (level - 1) * config.drop_interval_step_ms,
        config.min_drop_interval_ms,
    )

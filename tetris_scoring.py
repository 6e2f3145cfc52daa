
"""Score, level and fall-speed rules"""
from tetris_config import CONFIG, ROWS_PER_LEVEL, TICK_RATE_MS, TICK_RATE_MULTIPLIER

SCORE_TABLE = {0: 0, 1: 40, 2: 100, 3: 300, 4: 1200}


def score_delta(rows_removed: int, level: int) -> int:
    return SCORE_TABLE[min(rows_removed, 4)] * level


def level_for_rows(total_removed: int) -> int:
    return 1 + total_removed // ROWS_PER_LEVEL


def next_level(level: int, previous_total: int, total: int) -> int:
    """Adds one level per multiple of ROWS_PER_LEVEL crossed, possibly several."""
    return level + total // ROWS_PER_LEVEL - previous_total // ROWS_PER_LEVEL


def tick_interval_ms(level: int) -> int:
    return max(CONFIG["MIN_TICK_MS"], TICK_RATE_MS - TICK_RATE_MULTIPLIER * level)

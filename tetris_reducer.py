
"""State transitions: one event in, one new GameState out"""
import logging
from dataclasses import replace
from typing import Iterable

from tetris_config import CONFIG
from tetris_board import (overlaps_occupied_or_wall, will_collide_moving_down,
                          has_reached_floor, merge, sweep)
from tetris_piece import try_rotate
from tetris_scoring import score_delta, next_level
from tetris_state import GameState, DroppedBlock, reset_game

log = logging.getLogger(__name__)

LEFT, RIGHT, DOWN, ROTATE, RESTART, TICK = "left", "right", "down", "rotate", "restart", "tick"
EVENTS = (LEFT, RIGHT, DOWN, ROTATE, RESTART, TICK)


def reduce(state: GameState, event: str) -> GameState:
    if event not in EVENTS:
        raise ValueError(f"unknown event: {event!r}")

    if event == RESTART:
        if state.game_end or CONFIG["RESTART_WHILE_PLAYING"]:
            log.info("restart (score %d, level %d)", state.score, state.level)
            return reset_game(state)
        return state

    if state.game_end:
        return state

    if event == ROTATE:
        if not CONFIG["ROTATION_ENABLED"]:
            return state
        rotated = try_rotate(state.grid, state.falling)
        return replace(state, falling=rotated) if rotated else state

    p = state.falling
    x, y = p.x, p.y
    if event == LEFT and not overlaps_occupied_or_wall(p.shape, x-1, y, state.grid):
        x -= 1
    elif event == RIGHT and not overlaps_occupied_or_wall(p.shape, x+1, y, state.grid):
        x += 1
    falling = event in (DOWN, TICK)
    if falling:
        y += 1

    collision = falling and will_collide_moving_down(p.shape, x, y, state.grid)
    if not collision and not has_reached_floor(p.shape, y):
        return replace(state, falling=p.moved(x, y))
    return lock(state)


def lock(state: GameState) -> GameState:
    """Merges the falling piece at its last valid position and spawns the next one."""
    p = state.falling
    grid, removed = sweep(merge(state.grid, p))
    total = state.removed_rows + removed
    score = state.score + score_delta(removed, state.level)
    level = next_level(state.level, state.removed_rows, total)
    game_end = any(cell == 1 for cell in grid[0])
    upcoming, source = state.source.draw()

    if removed:
        log.debug("cleared %d row(s), total %d", removed, total)
    if game_end:
        log.info("game over: score %d, level %d, rows %d", score, level, total)

    return replace(
        state,
        game_end=game_end,
        falling=state.next_piece,
        grid=grid,
        dropped_blocks=state.dropped_blocks + (DroppedBlock(p.x, p.y, p.shape),),
        score=score,
        level=level,
        removed_rows=total,
        next_piece=upcoming,
        source=source,
    )


def reduce_all(state: GameState, events: Iterable[str]) -> GameState:
    for e in events:
        state = reduce(state, e)
    return state

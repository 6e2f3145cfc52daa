
"""Immutable game state and the render-facing snapshot"""
from dataclasses import dataclass
from typing import Optional, Tuple

from tetris_board import Grid, Shape, create_empty_grid, occupied_cells
from tetris_piece import FallingPiece
from tetris_rng import PieceSource
from tetris_scoring import tick_interval_ms

PLAYING = "playing"
GAME_OVER = "game_over"


@dataclass(frozen=True)
class DroppedBlock:
    x: int
    y: int
    shape: Shape


@dataclass(frozen=True)
class GameState:
    game_end: bool
    falling: FallingPiece
    grid: Grid
    dropped_blocks: Tuple[DroppedBlock, ...]
    score: int
    level: int
    removed_rows: int
    next_piece: FallingPiece
    source: PieceSource

    @property
    def phase(self) -> str:
        return GAME_OVER if self.game_end else PLAYING


def initial_state(source: Optional[PieceSource] = None) -> GameState:
    """Fresh game: empty grid, zero score, level 1, two pieces drawn."""
    if source is None:
        source = PieceSource.seeded()
    falling, source = source.draw()
    upcoming, source = source.draw()
    return GameState(
        game_end=False,
        falling=falling,
        grid=create_empty_grid(),
        dropped_blocks=(),
        score=0,
        level=1,
        removed_rows=0,
        next_piece=upcoming,
        source=source,
    )


def reset_game(state: GameState) -> GameState:
    return initial_state(state.source)


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything a renderer needs, without touching engine internals."""
    grid: Grid
    falling_cells: Tuple[Tuple[int, int], ...]
    falling_x: int
    falling_y: int
    falling_shape: Shape
    falling_colour: str
    next_shape: Shape
    next_colour: str
    score: int
    level: int
    removed_rows: int
    game_end: bool
    tick_ms: int


def snapshot(state: GameState) -> RenderSnapshot:
    p = state.falling
    return RenderSnapshot(
        grid=state.grid,
        falling_cells=tuple(occupied_cells(p.shape, p.x, p.y)),
        falling_x=p.x,
        falling_y=p.y,
        falling_shape=p.shape,
        falling_colour=p.colour,
        next_shape=state.next_piece.shape,
        next_colour=state.next_piece.colour,
        score=state.score,
        level=state.level,
        removed_rows=state.removed_rows,
        game_end=state.game_end,
        tick_ms=tick_interval_ms(state.level),
    )

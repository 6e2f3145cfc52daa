
"""Grid helpers: set_cell, collision predicates, merge, sweep"""
from typing import Tuple

from tetris_config import GRID_WIDTH, GRID_HEIGHT

Row = Tuple[int, ...]
Grid = Tuple[Row, ...]
Shape = Tuple[Tuple[int, ...], ...]

EMPTY_ROW: Row = (0,) * GRID_WIDTH


def create_empty_grid() -> Grid:
    return (EMPTY_ROW,) * GRID_HEIGHT


def set_cell(grid: Grid, x: int, y: int, value: int) -> Grid:
    """Returns a copy of grid with (x, y) set; off-grid coordinates are a no-op."""
    if x < 0 or x >= GRID_WIDTH or y < 0 or y >= GRID_HEIGHT:
        return grid
    row = grid[y][:x] + (value,) + grid[y][x+1:]
    return grid[:y] + (row,) + grid[y+1:]


def occupied_cells(shape: Shape, x: int, y: int):
    for sy, row in enumerate(shape):
        for sx, v in enumerate(row):
            if v == 1:
                yield x+sx, y+sy


def overlaps_occupied_or_wall(shape: Shape, x: int, y: int, grid: Grid) -> bool:
    for gx, gy in occupied_cells(shape, x, y):
        if gx < 0 or gx >= GRID_WIDTH: return True
        if 0 <= gy < GRID_HEIGHT and grid[gy][gx] == 1: return True
    return False


def will_collide_moving_down(shape: Shape, x: int, y: int, grid: Grid) -> bool:
    for gx, gy in occupied_cells(shape, x, y):
        if gy >= GRID_HEIGHT: return True
        if gy >= 0 and 0 <= gx < GRID_WIDTH and grid[gy][gx] == 1: return True
    return False


def has_reached_floor(shape: Shape, y: int) -> bool:
    # bounding box, not the lowest occupied row
    return y + len(shape) > GRID_HEIGHT


def merge(grid: Grid, piece) -> Grid:
    for gx, gy in occupied_cells(piece.shape, piece.x, piece.y):
        grid = set_cell(grid, gx, gy, 1)
    return grid


def is_row_full(row: Row) -> bool:
    return all(cell == 1 for cell in row)


def remove_full_rows(grid: Grid) -> Grid:
    return tuple(row for row in grid if not is_row_full(row))


def compact_to_height(grid: Grid, removed_count: int) -> Grid:
    """Prepends removed_count empty rows and restores exactly GRID_HEIGHT rows."""
    rows = (EMPTY_ROW,) * max(removed_count, 0) + tuple(grid)
    if len(rows) < GRID_HEIGHT:
        rows = (EMPTY_ROW,) * (GRID_HEIGHT - len(rows)) + rows
    return rows[:GRID_HEIGHT]


def sweep(grid: Grid) -> Tuple[Grid, int]:
    kept = remove_full_rows(grid)
    removed = len(grid) - len(kept)
    return compact_to_height(kept, removed), removed

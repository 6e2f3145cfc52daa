"""testing grid model, collision predicates and line clear"""
import pytest

from tetris_config import GRID_WIDTH, GRID_HEIGHT
from tetris_board import (create_empty_grid, set_cell, overlaps_occupied_or_wall,
                          will_collide_moving_down, has_reached_floor, merge,
                          is_row_full, remove_full_rows, compact_to_height, sweep)
from tetris_piece import FallingPiece

SQUARE = ((1, 1), (1, 1))
FULL_ROW = (1,) * GRID_WIDTH


@pytest.fixture
def grid():
    """Returns a new, empty grid for each test."""
    return create_empty_grid()


def with_row(grid, y, row):
    return grid[:y] + (tuple(row),) + grid[y+1:]


class TestGridModel:
    """Tests for create_empty_grid and set_cell."""

    def test_empty_grid_dimensions(self, grid):
        assert len(grid) == GRID_HEIGHT
        assert all(len(row) == GRID_WIDTH for row in grid)
        assert all(cell == 0 for row in grid for cell in row)

    def test_set_cell_returns_new_grid(self, grid):
        """The input grid must not change."""
        updated = set_cell(grid, 3, 7, 1)
        assert updated[7][3] == 1
        assert grid[7][3] == 0
        assert sum(map(sum, updated)) == 1

    @pytest.mark.parametrize("x, y", [(-1, 0), (GRID_WIDTH, 0), (0, -1), (0, GRID_HEIGHT), (-5, 40)])
    def test_set_cell_off_grid_is_noop(self, grid, x, y):
        assert set_cell(grid, x, y, 1) is grid

    def test_set_cell_can_clear(self, grid):
        g = set_cell(set_cell(grid, 0, 0, 1), 0, 0, 0)
        assert g == grid


class TestCollision:
    """Tests for the wall/occupied and downward collision predicates."""

    def test_square_fits_on_empty_grid(self, grid):
        assert overlaps_occupied_or_wall(SQUARE, 4, 0, grid) is False

    def test_left_wall(self, grid):
        assert overlaps_occupied_or_wall(SQUARE, -1, 0, grid) is True

    def test_right_wall(self, grid):
        assert overlaps_occupied_or_wall(SQUARE, GRID_WIDTH - 2, 0, grid) is False
        assert overlaps_occupied_or_wall(SQUARE, GRID_WIDTH - 1, 0, grid) is True

    def test_empty_shape_column_ignored_at_wall(self, grid):
        """Only occupied shape cells count against the wall."""
        shape = ((0, 1), (0, 1))
        assert overlaps_occupied_or_wall(shape, -1, 0, grid) is False

    def test_overlaps_occupied_cell(self, grid):
        g = set_cell(grid, 5, 1, 1)
        assert overlaps_occupied_or_wall(SQUARE, 4, 0, g) is True
        assert overlaps_occupied_or_wall(SQUARE, 2, 0, g) is False

    def test_moving_down_into_floor(self, grid):
        assert will_collide_moving_down(SQUARE, 4, 18, grid) is False
        assert will_collide_moving_down(SQUARE, 4, 19, grid) is True

    def test_moving_down_onto_block(self, grid):
        g = set_cell(grid, 4, 10, 1)
        assert will_collide_moving_down(SQUARE, 4, 9, g) is True
        assert will_collide_moving_down(SQUARE, 4, 8, g) is False

    def test_floor_uses_bounding_box(self):
        assert has_reached_floor(SQUARE, 18) is False
        assert has_reached_floor(SQUARE, 19) is True

    def test_floor_counts_empty_trailing_rows(self):
        """A shape with an empty bottom row still reaches the floor early."""
        shape = ((1, 1), (0, 0))
        assert has_reached_floor(shape, 19) is True


class TestMerge:
    def test_merge_sets_occupied_cells(self, grid):
        p = FallingPiece(((0, 1), (1, 1)), 2, 3)
        g = merge(grid, p)
        assert g[3][2] == 0
        assert g[3][3] == 1
        assert g[4][2] == 1 and g[4][3] == 1

    def test_merge_ignores_off_grid_cells(self, grid):
        p = FallingPiece(SQUARE, GRID_WIDTH - 1, GRID_HEIGHT - 1)
        g = merge(grid, p)
        assert sum(map(sum, g)) == 1
        assert g[GRID_HEIGHT - 1][GRID_WIDTH - 1] == 1


class TestLineClear:
    """Tests for is_row_full, remove_full_rows and compact_to_height."""

    def test_row_full(self):
        assert is_row_full(FULL_ROW) is True

    def test_row_of_zeros_not_full(self):
        assert is_row_full((0,) * GRID_WIDTH) is False

    def test_single_gap_not_full(self):
        row = list(FULL_ROW); row[4] = 0
        assert is_row_full(tuple(row)) is False

    def test_remove_full_rows_keeps_order(self, grid):
        g = with_row(grid, 19, FULL_ROW)
        g = with_row(g, 18, (1,) + (0,) * (GRID_WIDTH - 1))
        g = with_row(g, 17, FULL_ROW)
        kept = remove_full_rows(g)
        assert len(kept) == GRID_HEIGHT - 2
        assert kept[-1] == (1,) + (0,) * (GRID_WIDTH - 1)

    @pytest.mark.parametrize("removed", [0, 1, 4, GRID_HEIGHT])
    def test_compact_restores_height(self, grid, removed):
        g = grid
        for y in range(GRID_HEIGHT - removed, GRID_HEIGHT):
            g = with_row(g, y, FULL_ROW)
        kept = remove_full_rows(g)
        assert len(compact_to_height(kept, removed)) == GRID_HEIGHT

    def test_compact_pads_short_count(self, grid):
        """A removed count smaller than the gap still yields full height."""
        g = with_row(with_row(grid, 19, FULL_ROW), 18, FULL_ROW)
        assert len(compact_to_height(remove_full_rows(g), 0)) == GRID_HEIGHT

    def test_sweep_shifts_rows_down(self, grid):
        marker = (0, 1) + (0,) * (GRID_WIDTH - 2)
        g = with_row(with_row(grid, 19, FULL_ROW), 18, marker)
        swept, removed = sweep(g)
        assert removed == 1
        assert swept[19] == marker
        assert swept[0] == (0,) * GRID_WIDTH

    def test_sweep_nothing_to_clear(self, grid):
        g = set_cell(grid, 0, 19, 1)
        swept, removed = sweep(g)
        assert removed == 0
        assert swept == g

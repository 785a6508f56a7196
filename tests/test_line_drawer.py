"""Tests for the integer line drawer."""

from line_drawer import draw_line, line_cells


def _grid(width, height):
    return [[(' ', 'empty')] * width for _ in range(height)]


def _written(grid):
    return {
        (x, y)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell != (' ', 'empty')
    }


def test_single_point_writes_one_cell():
    grid = _grid(4, 4)
    draw_line(grid, 0, 0, 0, 0, '#', 'hour_hand')

    assert _written(grid) == {(0, 0)}
    assert grid[0][0] == ('#', 'hour_hand')


def test_horizontal_line_writes_every_cell():
    grid = _grid(8, 2)
    draw_line(grid, 0, 0, 5, 0, '*', 'minute_hand')

    assert _written(grid) == {(x, 0) for x in range(6)}


def test_steep_line_is_connected_and_ends_at_target():
    cells = list(line_cells(0, 0, 3, 4))

    assert cells[0] == (0, 0)
    assert cells[-1] == (3, 4)
    for (ax, ay), (bx, by) in zip(cells, cells[1:]):
        assert abs(ax - bx) <= 1 and abs(ay - by) <= 1
        assert (ax, ay) != (bx, by)


def test_negative_slopes_reach_their_end():
    for x1, y1 in [(-3, 4), (3, -4), (-5, -2), (0, -6), (-6, 0)]:
        cells = list(line_cells(0, 0, x1, y1))
        assert cells[-1] == (x1, y1)
        assert len(cells) == max(abs(x1), abs(y1)) + 1


def test_diagonal_steps_both_axes_at_once():
    assert list(line_cells(0, 0, 3, 3)) == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_shallow_line_stair_steps():
    assert list(line_cells(0, 0, 4, 2)) == [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2)]


def test_out_of_bounds_cells_are_skipped():
    grid = _grid(3, 3)
    draw_line(grid, -2, -2, 4, 4, '.', 'second_hand')

    assert _written(grid) == {(0, 0), (1, 1), (2, 2)}


def test_empty_grid_is_a_no_op():
    grid = []
    draw_line(grid, 0, 0, 3, 3, '.', 'second_hand')

    assert grid == []

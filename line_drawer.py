"""
Integer line drawing for character grids
Stamps a straight segment onto a grid of (char, category) cells
"""

from typing import Iterator, List, Tuple


def line_cells(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    """Yield every cell on the segment (x0, y0) -> (x1, y1), endpoints included."""
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    x, y = x0, y0

    while True:
        yield x, y
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        # Both steps are tested on their own so diagonals move in x and y together
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def draw_line(grid: List[list], x0: int, y0: int, x1: int, y1: int, char: str, category: str):
    """Write (char, category) into every grid cell the segment passes through.

    Cells outside the grid are skipped.
    """
    height = len(grid)
    width = len(grid[0]) if height else 0

    for x, y in line_cells(x0, y0, x1, y1):
        if 0 <= y < height and 0 <= x < width:
            grid[y][x] = (char, category)

"""
Analog clock face rasterizer
Maps the circle, hour markers and hands of a clock onto a character grid
"""

import math
from datetime import datetime
from typing import List, Optional, Tuple

from line_drawer import draw_line

TAU = 2 * math.pi

# Terminal cells are roughly twice as tall as they are wide
Y_SCALE = 0.5

MIN_WIDTH_FOR_NUMERALS = 60
CIRCLE_TOLERANCE = 1.0
NUMERAL_RADIUS = 0.88
TICK_RADIUS = 0.92

HOUR_LENGTH = 0.45
MINUTE_LENGTH = 0.75
SECOND_LENGTH = 0.90

# Index 0 sits at the top of the face
ROMAN_NUMERALS = [
    "XII", "I", "II", "III", "IV", "V",
    "VI", "VII", "VIII", "IX", "X", "XI",
]


class Category:
    EMPTY = "empty"
    CIRCLE = "circle"
    NUMERAL = "numeral"
    HOUR_HAND = "hour_hand"
    MINUTE_HAND = "minute_hand"
    SECOND_HAND = "second_hand"


EMPTY_CELL = (' ', Category.EMPTY)

HAND_CHARS = {
    Category.HOUR_HAND: '#',
    Category.MINUTE_HAND: '*',
    Category.SECOND_HAND: '.',
}

CATEGORY_COLORS = {
    Category.EMPTY: None,
    Category.CIRCLE: "cyan",
    Category.NUMERAL: "yellow",
    Category.HOUR_HAND: "green",
    Category.MINUTE_HAND: "blue",
    Category.SECOND_HAND: "red",
}

Cell = Tuple[str, str]
Grid = List[List[Cell]]


def blank_grid(width: int, height: int) -> Grid:
    """Create a height x width grid of empty cells."""
    return [[EMPTY_CELL] * width for _ in range(height)]


def face_geometry(width: int, height: int) -> Tuple[int, int, int]:
    """Return (cx, cy, radius) for a width x height area."""
    radius = max(0, min(width, height) // 2 - 2)
    return width // 2, height // 2, radius


def hand_angles(now: datetime) -> Tuple[float, float, float]:
    """Return (hour, minute, second) hand angles in radians, clockwise from 12.

    Lower units carry into higher ones so the hands sweep instead of jumping.
    """
    secs = now.second + now.microsecond / 1_000_000
    mins = now.minute + secs / 60
    hours = now.hour % 12 + mins / 60

    return hours / 12 * TAU, mins / 60 * TAU, secs / 60 * TAU


def polar_offset(angle: float, distance: float) -> Tuple[int, int]:
    """Grid offset for a point at `distance` along `angle`, truncated toward zero."""
    return int(math.sin(angle) * distance), -int(math.cos(angle) * distance * Y_SCALE)


def hand_endpoint(cx: int, cy: int, angle: float, length: int) -> Tuple[int, int]:
    """Grid cell where a hand of `length` cells pointing at `angle` ends."""
    dx, dy = polar_offset(angle, length)
    return cx + dx, cy + dy


def draw_circle(grid: Grid, cx: int, cy: int, radius: int):
    """Mark every cell within CIRCLE_TOLERANCE of the aspect-corrected circle."""
    for y, row in enumerate(grid):
        dy = int((y - cy) / Y_SCALE)
        for x in range(len(row)):
            dx = x - cx
            dist = math.sqrt(dx * dx + dy * dy)
            if abs(dist - radius) < CIRCLE_TOLERANCE:
                row[x] = ('o', Category.CIRCLE)


def _place_if_empty(grid: Grid, x: int, y: int, char: str):
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]) and grid[y][x][1] == Category.EMPTY:
        grid[y][x] = (char, Category.NUMERAL)


def draw_markers(grid: Grid, cx: int, cy: int, radius: int):
    """Draw Roman numerals on wide areas and single ticks on narrow ones.

    Markers only go into empty cells, so the circle outline stays intact.
    """
    width = len(grid[0]) if grid else 0

    if width >= MIN_WIDTH_FOR_NUMERALS:
        for i, numeral in enumerate(ROMAN_NUMERALS):
            dx, dy = polar_offset(i * TAU / 12, radius * NUMERAL_RADIUS)
            center_x, center_y = cx + dx, cy + dy
            for j, ch in enumerate(numeral):
                offset_x = j - (len(numeral) - 1) // 2
                _place_if_empty(grid, center_x + offset_x, center_y, ch)
    else:
        for i in range(12):
            dx, dy = polar_offset(i * TAU / 12, radius * TICK_RADIUS)
            _place_if_empty(grid, cx + dx, cy + dy, '|')


def draw_hands(grid: Grid, cx: int, cy: int, radius: int, now: datetime):
    """Draw hour, minute and second hands, in that order, so seconds end on top."""
    hour_angle, minute_angle, second_angle = hand_angles(now)
    hands = [
        (Category.HOUR_HAND, hour_angle, HOUR_LENGTH),
        (Category.MINUTE_HAND, minute_angle, MINUTE_LENGTH),
        (Category.SECOND_HAND, second_angle, SECOND_LENGTH),
    ]

    for category, angle, fraction in hands:
        x, y = hand_endpoint(cx, cy, angle, int(radius * fraction))
        draw_line(grid, cx, cy, x, y, HAND_CHARS[category], category)


def rasterize(width: int, height: int, now: datetime) -> Grid:
    """Build the raw (char, category) grid for one frame."""
    grid = blank_grid(width, height)
    if width <= 0 or height <= 0:
        return grid

    cx, cy, radius = face_geometry(width, height)
    draw_circle(grid, cx, cy, radius)
    draw_markers(grid, cx, cy, radius)
    draw_hands(grid, cx, cy, radius, now)
    return grid


def cell_color(category: str, use_color: bool) -> Optional[str]:
    """Color name for a category, or None when color is off."""
    if not use_color:
        return None
    return CATEGORY_COLORS[category]


def style_rows(grid: Grid, use_color: bool) -> List[List[Tuple[str, Optional[str]]]]:
    """Turn a raw grid into rows of (char, color) spans."""
    return [
        [(ch, cell_color(category, use_color)) for ch, category in row]
        for row in grid
    ]


def draw_clock(width: int, height: int, now: datetime, use_color: bool = False):
    """Render one frame of the clock as styled rows."""
    return style_rows(rasterize(width, height, now), use_color)

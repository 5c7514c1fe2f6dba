"""Braille scatter plot drawing.

Each terminal cell holds a 2x4 grid of Braille dots, so a ``w x h`` cell
area resolves ``2w x 4h`` plot positions.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..chart import ChartBounds, NumericSample

BRAILLE_BASE = 0x2800
# Dot bit for (row % 4, col % 2) inside one Braille cell.
_DOT_BITS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)


def braille_rows(
    points: Iterable[NumericSample],
    bounds: ChartBounds,
    width: int,
    height: int,
) -> list[str]:
    """Plot ``points`` into ``height`` strings of ``width`` Braille cells.

    Points outside ``bounds`` are dropped.
    """
    if width <= 0 or height <= 0:
        return []
    dot_cols = width * 2
    dot_rows = height * 4
    x_span = bounds.x_max - bounds.x_min
    y_span = bounds.y_max - bounds.y_min
    grid = [[0] * width for _ in range(height)]
    for point in points:
        if not (bounds.x_min <= point.x <= bounds.x_max and bounds.y_min <= point.y <= bounds.y_max):
            continue
        fx = (point.x - bounds.x_min) / x_span if x_span else 0.5
        fy = (point.y - bounds.y_min) / y_span if y_span else 0.5
        dot_x = min(dot_cols - 1, int(round(fx * (dot_cols - 1))))
        dot_y = min(dot_rows - 1, int(round((1.0 - fy) * (dot_rows - 1))))
        grid[dot_y // 4][dot_x // 2] |= _DOT_BITS[dot_y % 4][dot_x % 2]
    return ["".join(chr(BRAILLE_BASE + bits) if bits else " " for bits in row) for row in grid]

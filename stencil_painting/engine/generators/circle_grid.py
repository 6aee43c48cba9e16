"""Circle grid — one rasterized circle per (2r+1)-pixel square, background 0.

The circle tile is built with an incremental midpoint-style walk over the
top-right octant. Each visited point (x, y) fills four vertical chords:

    column x       rows y .. 2r-y     (mid right)
    column 2r-x    rows y .. 2r-y     (mid left)
    column y       rows x .. 2r-x     (far left, point reflected on the diagonal)
    column 2r-y    rows x .. 2r-x     (far right)

so one octant's walk paints the whole disc. A circle of radius r therefore
spans 2r+1 pixels.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from stencil_painting.engine.generators.square_grid import square_indices
from stencil_painting.engine.registry import generator
from stencil_painting.errors import InvalidParameterError
from stencil_painting.models.specs import CircleGrid
from stencil_painting.utils.masking import mask_indices, mask_to_text, repeat_tile

logger = logging.getLogger(__name__)

BACKGROUND_SEGMENT = 0


def _fill_column(tile: NDArray[np.bool_], col: int, row_a: int, row_b: int) -> None:
    lo, hi = min(row_a, row_b), max(row_a, row_b)
    tile[lo : hi + 1, col] = True


def _fill_chords(tile: NDArray[np.bool_], x: int, y: int, radius: int) -> None:
    far = 2 * radius
    _fill_column(tile, x, y, far - y)
    _fill_column(tile, far - x, y, far - y)
    _fill_column(tile, y, x, far - x)
    _fill_column(tile, far - y, x, far - x)


def circle_tile(radius: int) -> NDArray[np.bool_]:
    """(2r+1, 2r+1) bool tile, True inside the circle."""
    if radius <= 0:
        raise InvalidParameterError(f"radius must be > 0, got {radius}")

    size = 2 * radius + 1
    tile = np.zeros((size, size), dtype=bool)
    r_sq = radius * radius

    # Start at the top and step right/down towards the 45 degree point.
    # Candidate order: right, right+down, down.
    x, y = radius, 0
    while True:
        _fill_chords(tile, x, y, radius)

        right_sq = (x - radius + 1) ** 2
        if right_sq + (y - radius) ** 2 <= r_sq:
            x += 1
        elif right_sq + (y - radius + 1) ** 2 <= r_sq:
            x += 1
            y += 1
        else:
            y += 1

        # 45 degree boundary crossed
        if x - radius < y:
            break

    return tile


@generator(CircleGrid, name="circle_grid", description="Tile the canvas with circles on a background")
def circle_grid(width: int, height: int, spec: CircleGrid) -> NDArray[np.int64]:
    tile = circle_tile(spec.radius)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Circle tile r=%d:\n%s", spec.radius, mask_to_text(tile))

    indices = square_indices(width, height, tile.shape[0], start_at=1)
    return mask_indices(indices, repeat_tile(tile, width, height), BACKGROUND_SEGMENT)

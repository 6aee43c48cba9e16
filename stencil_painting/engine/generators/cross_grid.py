"""Cross grid — plus-shaped segments laid along (2, 1) diagonals.

The canvas is divided into cells of cross_intersection_width pixels. A cross
centred on cell (cx, cy) covers the centre and its four neighbours. Crosses
centred on the lattice generated by (2, 1) and (-1, 2) tile the plane, so
the grid is painted by walking that lattice one diagonal at a time:

1. Top row: diagonals starting at (0, 0), then alternately stepping the start
   by (+3, -1) or (+2, +1) along the top edge.
2. Left column: diagonals starting at (-1, 2), then alternately stepping by
   (-1, +2) or (+1, +3) down the left edge.

Some top-row diagonals are walked twice, and the second walk overwrites the
first (last writer wins). Cells no cross reaches keep index 0.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from stencil_painting.engine.registry import generator
from stencil_painting.errors import InvalidParameterError
from stencil_painting.models.specs import CrossGrid

logger = logging.getLogger(__name__)

# Centre last, so the centre cell always carries the cross's own index.
_CROSS_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1), (0, 0))

_DIAGONAL_STEP = (2, 1)


def _in_grid(cells: NDArray[np.int64], cx: int, cy: int) -> bool:
    grid_h, grid_w = cells.shape
    return 0 <= cx < grid_w and 0 <= cy < grid_h


def _touches_grid(cells: NDArray[np.int64], cx: int, cy: int) -> bool:
    return any(_in_grid(cells, cx + dx, cy + dy) for dx, dy in _CROSS_OFFSETS)


def _stamp_cross(cells: NDArray[np.int64], cx: int, cy: int, index: int) -> None:
    for dx, dy in _CROSS_OFFSETS:
        if _in_grid(cells, cx + dx, cy + dy):
            cells[cy + dy, cx + dx] = index


def _fill_diagonal(cells: NDArray[np.int64], cx: int, cy: int, index: int) -> int:
    """Stamp crosses from (cx, cy) along the diagonal. Returns the next free index."""
    while _touches_grid(cells, cx, cy):
        _stamp_cross(cells, cx, cy, index)
        index += 1
        cx += _DIAGONAL_STEP[0]
        cy += _DIAGONAL_STEP[1]
    return index


def cross_cells(grid_w: int, grid_h: int) -> NDArray[np.int64]:
    """Segment index per cell for a grid_w x grid_h cell grid."""
    cells = np.zeros((grid_h, grid_w), dtype=np.int64)
    index = 0

    cx, cy = 0, 0
    while True:
        index = _fill_diagonal(cells, cx, cy, index)
        if _in_grid(cells, cx, cy):
            cx, cy = cx + 3, cy - 1
        elif _in_grid(cells, cx, cy + 1):
            cx, cy = cx + 2, cy + 1
        else:
            break

    cx, cy = -1, 2
    while True:
        index = _fill_diagonal(cells, cx, cy, index)
        if _in_grid(cells, cx, cy):
            cx, cy = cx - 1, cy + 2
        elif _in_grid(cells, cx + 1, cy):
            cx, cy = cx + 1, cy + 3
        else:
            break

    logger.debug("Cross grid %dx%d cells: %d crosses walked", grid_w, grid_h, index)
    return cells


@generator(CrossGrid, name="cross_grid", description="Plus-shaped segments on a diagonal lattice")
def cross_grid(width: int, height: int, spec: CrossGrid) -> NDArray[np.int64]:
    cell = spec.cross_intersection_width
    if cell <= 0:
        raise InvalidParameterError(f"cross_intersection_width must be > 0, got {cell}")
    cells = cross_cells(-(-width // cell), -(-height // cell))
    rows = np.arange(height) // cell
    cols = np.arange(width) // cell
    return cells[np.ix_(rows, cols)]

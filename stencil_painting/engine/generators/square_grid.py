"""Square grid — axis-aligned tiles of side_length pixels.

index(x, y) = x // s + (y // s) * ceil(width / s) + start_at
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from stencil_painting.engine.registry import generator
from stencil_painting.errors import InvalidParameterError
from stencil_painting.models.specs import SquareGrid


def square_indices(width: int, height: int, side_length: int, start_at: int = 0) -> NDArray[np.int64]:
    if side_length <= 0:
        raise InvalidParameterError(f"side_length must be > 0, got {side_length}")
    squares_per_row = -(-width // side_length)
    cols = np.arange(width, dtype=np.int64) // side_length
    rows = np.arange(height, dtype=np.int64) // side_length
    return cols[np.newaxis, :] + rows[:, np.newaxis] * squares_per_row + start_at


@generator(SquareGrid, name="square_grid", description="Tile the canvas with squares")
def square_grid(width: int, height: int, spec: SquareGrid) -> NDArray[np.int64]:
    return square_indices(width, height, spec.side_length, spec.start_at)

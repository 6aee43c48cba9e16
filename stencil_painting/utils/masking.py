"""Boolean mask utilities — tile repetition, index masking, text rendering.

A BoolMask is a numpy bool array of shape (height, width).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from stencil_painting.errors import ImageFormatError


def repeat_tile(tile: NDArray[np.bool_], width: int, height: int) -> NDArray[np.bool_]:
    """Repeat a tile over a width x height canvas, wrapping modulo the tile size.

    Args:
        tile: (tile_h, tile_w) bool array.
        width: Canvas width.
        height: Canvas height.

    Returns:
        (height, width) bool array where mask[y, x] = tile[y % tile_h, x % tile_w].
    """
    tile = np.asarray(tile, dtype=bool)
    if tile.ndim != 2 or tile.size == 0:
        raise ImageFormatError(f"Tile must be a non-empty 2-D array, got shape {tile.shape}")
    tile_h, tile_w = tile.shape
    rows = np.arange(height) % tile_h
    cols = np.arange(width) % tile_w
    return tile[np.ix_(rows, cols)]


def mask_indices(
    indices: NDArray[np.int64],
    mask: NDArray[np.bool_],
    false_value: int = 0,
) -> NDArray[np.int64]:
    """Overwrite indices with false_value wherever mask is False. Mutates in place."""
    if indices.shape != mask.shape:
        raise ImageFormatError(f"Mask shape {mask.shape} != index grid shape {indices.shape}")
    indices[~mask] = false_value
    return indices


def mask_to_text(mask: NDArray[np.bool_], filled: str = ".", empty: str = ",") -> str:
    """Render a bool mask one line per row."""
    return "\n".join("".join(filled if cell else empty for cell in row) for row in mask)

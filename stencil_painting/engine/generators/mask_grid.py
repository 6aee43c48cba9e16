"""Mask grid — tile a folder of boolean masks, one index range per mask.

Each mask is repeated over the canvas. Every repetition of every mask is its
own segment, so a mask contributes ceil(width / mw) * ceil(height / mh)
indices, offset by the masks before it. Index 0 is reserved for "no mask"
only when some position is off in every mask.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from stencil_painting.engine.registry import generator
from stencil_painting.errors import EmptyMaskFolder, InconsistentMaskSize
from stencil_painting.io.images import load_masks
from stencil_painting.models.specs import MaskGrid

logger = logging.getLogger(__name__)


def first_segment_index(masks: list[NDArray[np.bool_]]) -> int:
    """1 if some position is off in every mask, else 0."""
    covered = np.logical_or.reduce(np.stack(masks), axis=0)
    return 0 if bool(covered.all()) else 1


def tile_masks(width: int, height: int, masks: list[NDArray[np.bool_]]) -> NDArray[np.int64]:
    if not masks:
        raise EmptyMaskFolder("At least one mask is required")
    mask_h, mask_w = masks[0].shape
    for mask in masks[1:]:
        if mask.shape != (mask_h, mask_w):
            raise InconsistentMaskSize(f"Mask shape {mask.shape} != {(mask_h, mask_w)}")

    start = first_segment_index(masks)
    segments_per_row = -(-width // mask_w)
    segments_per_mask = -(-height // mask_h) * segments_per_row

    rows = np.arange(height)
    cols = np.arange(width)
    tile_ids = (cols // mask_w)[np.newaxis, :] + (rows // mask_h)[:, np.newaxis] * segments_per_row
    wrap = np.ix_(rows % mask_h, cols % mask_w)

    indices = np.zeros((height, width), dtype=np.int64)
    for mask in masks:
        on = mask[wrap]
        indices[on] = tile_ids[on] + start
        start += segments_per_mask

    logger.debug(
        "Tiled %d masks (%dx%d): %d segments per mask, last index %d",
        len(masks), mask_w, mask_h, segments_per_mask, start - 1,
    )
    return indices


@generator(MaskGrid, name="mask_grid", description="Tile a folder of greyscale masks")
def mask_grid(width: int, height: int, spec: MaskGrid) -> NDArray[np.int64]:
    return tile_masks(width, height, load_masks(spec.mask_folder))

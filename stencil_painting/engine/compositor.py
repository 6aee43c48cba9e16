"""Averaging compositor — recolor every pixel with its segment's mean content color.

Stages:
  1. Count -- max decoded stencil index + 1 sizes the accumulators
  2. Accumulate -- per-segment channel sums and pixel counts from the content
  3. Average -- integer mean per channel; empty segments become opaque black
  4. Render -- look up each pixel's segment average

Alpha handling:
  - alpha_averaging=False: content alpha is an inclusion filter. Pixels with
    alpha 0 are left out of their segment; the rest count as alpha 255.
  - alpha_averaging=True: alpha is averaged like any other channel.
Content without an alpha channel is treated as fully opaque.
"""

from __future__ import annotations

import logging
import time

import numpy as np
from numpy.typing import NDArray

from stencil_painting.config import settings
from stencil_painting.engine.codec import OPAQUE, stencil_indices
from stencil_painting.errors import DimensionMismatch, InvalidParameterError
from stencil_painting.models.raw_image import RGBA_CHANNELS, RawImage

logger = logging.getLogger(__name__)

EMPTY_SEGMENT_COLOR = (0, 0, 0, OPAQUE)


def count_segments(indices: NDArray[np.int64]) -> int:
    if indices.size == 0:
        return 0
    return int(indices.max()) + 1


def _content_rgba(content: RawImage) -> NDArray[np.uint8]:
    px = content.pixels()
    if content.has_alpha:
        return px
    rgba = np.full((content.height, content.width, RGBA_CHANNELS), OPAQUE, dtype=np.uint8)
    rgba[..., :3] = px
    return rgba


def accumulate(
    indices: NDArray[np.int64],
    content: RawImage,
    num_segments: int,
    alpha_averaging: bool = False,
) -> tuple[NDArray[np.uint64], NDArray[np.int64]]:
    """Per-segment (R, G, B, A) sums and pixel counts.

    Returns:
        sums: (num_segments, 4) uint64.
        counts: (num_segments,) int64.
    """
    rgba = _content_rgba(content).reshape(-1, RGBA_CHANNELS)
    seg = indices.reshape(-1)

    if alpha_averaging:
        include = np.ones(seg.shape, dtype=bool)
    else:
        include = rgba[:, 3] != 0

    seg = seg[include]
    values = rgba[include].astype(np.float64)
    if not alpha_averaging:
        values[:, 3] = OPAQUE

    sums = np.zeros((num_segments, RGBA_CHANNELS), dtype=np.uint64)
    for channel in range(RGBA_CHANNELS):
        # 255 * pixel_count < 2**53, so float64 sums are exact
        sums[:, channel] = np.bincount(seg, weights=values[:, channel], minlength=num_segments).astype(np.uint64)
    counts = np.bincount(seg, minlength=num_segments).astype(np.int64)
    return sums, counts


def average(sums: NDArray[np.uint64], counts: NDArray[np.int64]) -> NDArray[np.uint8]:
    """Truncating integer mean per segment; zero-count segments are opaque black."""
    averages = np.empty((len(counts), RGBA_CHANNELS), dtype=np.uint8)
    averages[:] = EMPTY_SEGMENT_COLOR
    filled = counts > 0
    averages[filled] = (sums[filled] // counts[filled, np.newaxis].astype(np.uint64)).astype(np.uint8)
    return averages


def render(indices: NDArray[np.int64], averages: NDArray[np.uint8]) -> RawImage:
    return RawImage.from_array(averages[indices])


def composite(stencil: RawImage, content: RawImage, alpha_averaging: bool = False) -> RawImage:
    """Replace every pixel with the average content color of its stencil segment.

    Raises:
        DimensionMismatch: stencil and content sizes differ.
        InvalidParameterError: the images have no pixels.
    """
    if stencil.dimensions != content.dimensions:
        raise DimensionMismatch(stencil.dimensions, content.dimensions, what="content")
    if stencil.pixel_count == 0:
        raise InvalidParameterError(f"Cannot composite an empty {stencil.width}x{stencil.height} image")

    t0 = time.perf_counter()
    indices = stencil_indices(stencil)
    num_segments = count_segments(indices)
    if num_segments > settings.stencil_segment_warning_threshold:
        logger.warning(
            "Stencil has %d segments (threshold %d); accumulators use %.1f MB",
            num_segments,
            settings.stencil_segment_warning_threshold,
            num_segments * (RGBA_CHANNELS * 8 + 8) / 1e6,
        )

    sums, counts = accumulate(indices, content, num_segments, alpha_averaging)
    output = render(indices, average(sums, counts))

    elapsed = (time.perf_counter() - t0) * 1000
    logger.debug(
        "Composited %dx%d over %d segments (alpha_averaging=%s) in %.1fms",
        stencil.width, stencil.height, num_segments, alpha_averaging, elapsed,
    )
    return output

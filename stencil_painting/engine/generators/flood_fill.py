"""Flood-fill segmenter — one segment per 4-connected region of equal color.

Pixels are compared on their RGB bytes only; alpha is ignored. Seeds are
taken in row-major order, so segment indices follow the order in which each
region's top-left-most pixel is first met.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from stencil_painting.engine.codec import decode_pixels, indices_to_stencil
from stencil_painting.engine.registry import generator
from stencil_painting.errors import DimensionMismatch, InvalidParameterError
from stencil_painting.io.images import load_raw_image
from stencil_painting.models.raw_image import RawImage
from stencil_painting.models.specs import FloodFill

logger = logging.getLogger(__name__)

_UNFILLED = -1


def flood_fill_labels(colors: NDArray) -> NDArray[np.int64]:
    """Label 4-connected regions of equal value in a (height, width) array."""
    height, width = colors.shape
    flat = np.asarray(colors).ravel().tolist()
    labels = [_UNFILLED] * (width * height)
    next_label = 0

    for seed in range(width * height):
        if labels[seed] != _UNFILLED:
            continue

        target = flat[seed]
        labels[seed] = next_label
        stack = [seed]
        while stack:
            pos = stack.pop()
            x = pos % width
            neighbours = []
            if pos >= width:
                neighbours.append(pos - width)
            if pos + width < width * height:
                neighbours.append(pos + width)
            if x > 0:
                neighbours.append(pos - 1)
            if x < width - 1:
                neighbours.append(pos + 1)
            for n in neighbours:
                if labels[n] == _UNFILLED and flat[n] == target:
                    labels[n] = next_label
                    stack.append(n)

        next_label += 1

    logger.debug("Flood fill %dx%d: %d segments", width, height, next_label)
    return np.asarray(labels, dtype=np.int64).reshape(height, width)


def segment_by_flood_fill(image: RawImage) -> RawImage:
    """Stencil with one segment per 4-connected region of identical RGB."""
    if image.pixel_count == 0:
        raise InvalidParameterError("Cannot flood fill an empty image")
    return indices_to_stencil(flood_fill_labels(decode_pixels(image.pixels())))


@generator(FloodFill, name="flood_fill", description="Segment an existing image by flood fill")
def flood_fill(width: int, height: int, spec: FloodFill) -> NDArray[np.int64]:
    source = load_raw_image(spec.source_path)
    if source.dimensions != (width, height):
        raise DimensionMismatch(
            (width, height), source.dimensions, what=f"source {spec.source_path.name}", against="Canvas"
        )
    if source.pixel_count == 0:
        raise InvalidParameterError(f"Source image {spec.source_path} is empty")
    return flood_fill_labels(decode_pixels(source.pixels()))

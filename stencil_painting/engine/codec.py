"""Segment codec — segment index <-> RGB triple.

index i is stored as (i % 256, (i // 256) % 256, i // 65536). The mapping is
exact below 256**3; larger indices wrap in the blue byte, which is an
accepted approximation rather than an error.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from stencil_painting.errors import InvalidParameterError
from stencil_painting.models.raw_image import RawImage

# One byte per channel.
_BASE = 256
_BASE_2 = _BASE * _BASE

# Largest index that round-trips exactly, plus one.
MAX_SEGMENTS = _BASE * _BASE * _BASE

OPAQUE = 255


def encode(index: int) -> tuple[int, int, int]:
    if index < 0:
        raise InvalidParameterError(f"Segment index must be >= 0, got {index}")
    return (index % _BASE, (index // _BASE) % _BASE, (index // _BASE_2) % _BASE)


def decode(r: int, g: int, b: int) -> int:
    return int(r) + int(g) * _BASE + int(b) * _BASE_2


def encode_indices(indices: NDArray) -> NDArray[np.uint8]:
    """Vectorized encode: shape S -> shape S + (3,)."""
    idx = np.asarray(indices, dtype=np.int64)
    if idx.size and idx.min() < 0:
        raise InvalidParameterError("Segment indices must be >= 0")
    out = np.empty(idx.shape + (3,), dtype=np.uint8)
    out[..., 0] = idx % _BASE
    out[..., 1] = (idx // _BASE) % _BASE
    out[..., 2] = (idx // _BASE_2) % _BASE
    return out


def decode_pixels(pixels: NDArray) -> NDArray[np.int64]:
    """Vectorized decode of the first three channels: shape S + (C,) -> S."""
    px = np.asarray(pixels)
    return (
        px[..., 0].astype(np.int64)
        + px[..., 1].astype(np.int64) * _BASE
        + px[..., 2].astype(np.int64) * _BASE_2
    )


def indices_to_rgba(indices: NDArray) -> NDArray[np.uint8]:
    """(H, W) segment indices -> (H, W, 4) stencil pixels with alpha 255."""
    idx = np.asarray(indices)
    out = np.full(idx.shape + (4,), OPAQUE, dtype=np.uint8)
    out[..., :3] = encode_indices(idx)
    return out


def indices_to_stencil(indices: NDArray) -> RawImage:
    """(H, W) segment indices -> RGBA stencil RawImage."""
    return RawImage.from_array(indices_to_rgba(indices))


def stencil_indices(stencil: RawImage) -> NDArray[np.int64]:
    """Decode a stencil RawImage back to (H, W) segment indices."""
    return decode_pixels(stencil.pixels())

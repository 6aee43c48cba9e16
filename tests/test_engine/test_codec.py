"""Tests for the segment codec."""

from __future__ import annotations

import numpy as np
import pytest

from stencil_painting.engine.codec import (
    MAX_SEGMENTS,
    decode,
    decode_pixels,
    encode,
    encode_indices,
    indices_to_rgba,
    indices_to_stencil,
    stencil_indices,
)
from stencil_painting.errors import InvalidParameterError


class TestScalarCodec:
    def test_known_values(self):
        assert encode(0) == (0, 0, 0)
        assert encode(255) == (255, 0, 0)
        assert encode(256) == (0, 1, 0)
        assert encode(65536) == (0, 0, 1)
        assert encode(MAX_SEGMENTS - 1) == (255, 255, 255)

    def test_decode_inverts_encode_at_byte_boundaries(self):
        for i in [0, 1, 255, 256, 257, 65535, 65536, 65537, 1_000_000, MAX_SEGMENTS - 1]:
            assert decode(*encode(i)) == i

    def test_overflow_wraps_silently(self):
        assert encode(MAX_SEGMENTS) == (0, 0, 0)
        assert encode(MAX_SEGMENTS + 5) == encode(5)

    def test_negative_index_rejected(self):
        with pytest.raises(InvalidParameterError):
            encode(-1)


class TestVectorCodec:
    def test_round_trip_over_index_range(self):
        idx = np.concatenate([
            np.arange(0, 70_000, dtype=np.int64),
            np.arange(70_000, MAX_SEGMENTS, 997, dtype=np.int64),
            np.array([MAX_SEGMENTS - 1], dtype=np.int64),
        ])
        assert np.array_equal(decode_pixels(encode_indices(idx)), idx)

    def test_matches_scalar_encode(self):
        idx = np.array([[0, 300], [70_000, 16_000_000]])
        enc = encode_indices(idx)
        assert enc.shape == (2, 2, 3)
        for (r, c), value in np.ndenumerate(idx):
            assert tuple(int(v) for v in enc[r, c]) == encode(int(value))

    def test_rgba_alpha_is_opaque(self):
        rgba = indices_to_rgba(np.arange(6).reshape(2, 3))
        assert rgba.shape == (2, 3, 4)
        assert (rgba[..., 3] == 255).all()

    def test_decode_ignores_alpha(self):
        px = np.array([[[1, 2, 3, 0], [1, 2, 3, 255]]], dtype=np.uint8)
        assert decode_pixels(px).tolist() == [[decode(1, 2, 3)] * 2]

    def test_stencil_round_trip(self):
        idx = np.array([[0, 1, 2], [512, 70_000, 3]])
        stencil = indices_to_stencil(idx)
        assert stencil.dimensions == (3, 2)
        assert stencil.has_alpha
        assert np.array_equal(stencil_indices(stencil), idx)

"""Tests for mask loading and mask tiling."""

from __future__ import annotations

import numpy as np
import pytest

from stencil_painting.engine.codec import stencil_indices
from stencil_painting.engine.generators.mask_grid import first_segment_index, tile_masks
from stencil_painting.engine.stencil import generate_stencil
from stencil_painting.errors import (
    EmptyMaskFolder,
    InconsistentMaskSize,
    UnsupportedMaskFormat,
)
from stencil_painting.io.images import load_masks
from stencil_painting.models.specs import MaskGrid
from tests.conftest import DIAGONAL_MASKS, write_mask


def _bool(bits):
    return np.array(bits, dtype=bool)


class TestTileMasks:
    def test_complementary_masks_start_at_zero(self):
        masks = [_bool(m) for m in DIAGONAL_MASKS]
        assert first_segment_index(masks) == 0
        assert tile_masks(4, 4, masks).tolist() == [
            [0, 4, 1, 5],
            [4, 0, 5, 1],
            [2, 6, 3, 7],
            [6, 2, 7, 3],
        ]

    def test_uncovered_position_reserves_zero(self):
        masks = [_bool([[1, 0], [0, 0]])]
        assert first_segment_index(masks) == 1
        assert tile_masks(3, 3, masks).tolist() == [
            [1, 0, 2],
            [0, 0, 0],
            [3, 0, 4],
        ]

    def test_wraps_on_mask_width_and_height(self):
        masks = [_bool([[1, 1, 0]])]
        # 3x1 mask on a 4x2 canvas: 2 tiles per row, 2 rows of tiles, start 1
        assert tile_masks(4, 2, masks).tolist() == [
            [1, 1, 0, 2],
            [3, 3, 0, 4],
        ]

    def test_mask_ranges_do_not_overlap(self):
        masks = [_bool([[1, 0]]), _bool([[0, 1]])]
        idx = tile_masks(6, 1, masks)
        first = set(idx[0, ::2].tolist())
        second = set(idx[0, 1::2].tolist())
        assert first == {0, 1, 2}
        assert second == {3, 4, 5}

    def test_later_mask_overwrites_overlap(self):
        masks = [_bool([[1]]), _bool([[1]])]
        assert tile_masks(2, 1, masks).tolist() == [[2, 3]]

    def test_shape_mismatch(self):
        with pytest.raises(InconsistentMaskSize):
            tile_masks(4, 4, [_bool([[1, 0]]), _bool([[1], [0]])])

    def test_no_masks(self):
        with pytest.raises(EmptyMaskFolder):
            tile_masks(4, 4, [])


class TestLoadMasks:
    def test_loads_in_file_name_order(self, mask_folder):
        masks = load_masks(mask_folder)
        assert len(masks) == 2
        assert masks[0].tolist() == _bool(DIAGONAL_MASKS[0]).tolist()
        assert masks[1].dtype == bool

    def test_generator_uses_folder(self, mask_folder):
        idx = stencil_indices(generate_stencil(4, 4, MaskGrid(mask_folder)))
        assert idx[0].tolist() == [0, 4, 1, 5]

    def test_inconsistent_sizes(self, tmp_path):
        write_mask(tmp_path / "a.png", [[1, 0], [0, 1]])
        write_mask(tmp_path / "b.png", [[1, 0, 1]])
        with pytest.raises(InconsistentMaskSize):
            load_masks(tmp_path)

    def test_rgb_mask_rejected(self, tmp_path):
        write_mask(tmp_path / "a.png", [[1, 0], [0, 1]], mode="RGB")
        with pytest.raises(UnsupportedMaskFormat):
            load_masks(tmp_path)

    def test_greyscale_alpha_rejected(self, tmp_path):
        write_mask(tmp_path / "a.png", [[1, 0], [0, 1]], mode="LA")
        with pytest.raises(UnsupportedMaskFormat):
            load_masks(tmp_path)

    def test_empty_folder(self, tmp_path):
        (tmp_path / "notes.txt").write_text("not an image")
        with pytest.raises(EmptyMaskFolder):
            load_masks(tmp_path)

"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from stencil_painting.models.raw_image import RawImage

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)


def make_rgba(rows: list[list[tuple[int, ...]]]) -> RawImage:
    """Build an RGBA RawImage from rows of (r, g, b, a) tuples."""
    return RawImage.from_array(np.array(rows, dtype=np.uint8))


def solid(width: int, height: int, color: tuple[int, ...]) -> RawImage:
    arr = np.empty((height, width, len(color)), dtype=np.uint8)
    arr[:] = color
    return RawImage.from_array(arr)


def quadrants(size: int, colors: tuple[tuple[int, ...], ...]) -> RawImage:
    """size x size image split into TL, TR, BL, BR quadrants of the given colors."""
    half = size // 2
    arr = np.empty((size, size, 4), dtype=np.uint8)
    arr[:half, :half] = colors[0]
    arr[:half, half:] = colors[1]
    arr[half:, :half] = colors[2]
    arr[half:, half:] = colors[3]
    return RawImage.from_array(arr)


def write_mask(path: Path, bits: list[list[int]], mode: str = "L") -> Path:
    arr = np.array(bits, dtype=np.uint8) * 255
    img = Image.fromarray(arr)
    if mode != "L":
        img = img.convert(mode)
    img.save(path)
    return path


# Two 2x2 masks: the diagonal pair covers every position between them.
DIAGONAL_MASKS = [
    [[1, 0], [0, 1]],
    [[0, 1], [1, 0]],
]


@pytest.fixture
def quadrant_image() -> RawImage:
    return quadrants(4, (RED, GREEN, BLUE, WHITE))


@pytest.fixture
def mask_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "masks"
    folder.mkdir()
    for i, bits in enumerate(DIAGONAL_MASKS):
        write_mask(folder / f"mask_{i}.png", bits)
    return folder


@pytest.fixture
def content_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "content"
    folder.mkdir()
    arr = np.zeros((4, 4, 4), dtype=np.uint8)
    arr[..., 3] = 255
    arr[:, :, 0] = np.arange(16, dtype=np.uint8).reshape(4, 4) * 10
    Image.fromarray(arr).save(folder / "a.png")
    Image.fromarray(arr[:2, :3].copy()).save(folder / "b.png")
    Image.fromarray(arr).save(folder / "c.png")
    return folder

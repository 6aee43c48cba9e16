"""Tests for Pillow-backed image loading and saving."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from stencil_painting.errors import ImageFormatError
from stencil_painting.io.images import (
    list_image_files,
    load_raw_image,
    raw_image_from_pil,
    save_raw_image,
)
from stencil_painting.models.raw_image import RawImage


def test_png_round_trip(tmp_path, quadrant_image):
    path = save_raw_image(quadrant_image, tmp_path / "nested" / "q.png")
    assert path.exists()
    loaded = load_raw_image(path)
    assert loaded.dimensions == (4, 4)
    assert np.array_equal(loaded.pixels(), quadrant_image.pixels())


def test_jpeg_drops_alpha(tmp_path, quadrant_image):
    path = save_raw_image(quadrant_image, tmp_path / "q.jpg")
    with Image.open(path) as img:
        assert img.mode == "RGB"
    # loaded images are always RGBA
    assert load_raw_image(path).has_alpha


def test_greyscale_loads_as_opaque_rgba():
    img = Image.fromarray(np.array([[0, 128]], dtype=np.uint8))
    raw = raw_image_from_pil(img)
    assert raw.pixel(1, 0) == (128, 128, 128, 255)


def test_rgb_raw_image_saves(tmp_path):
    raw = RawImage.from_array(np.full((2, 3, 3), 40, dtype=np.uint8))
    loaded = load_raw_image(save_raw_image(raw, tmp_path / "rgb.png"))
    assert loaded.pixel(2, 1) == (40, 40, 40, 255)


def test_list_image_files_sorted_and_filtered(tmp_path, quadrant_image):
    for name in ["b.png", "a.PNG", "c.jpg"]:
        save_raw_image(quadrant_image, tmp_path / name)
    (tmp_path / "readme.txt").write_text("skip")
    (tmp_path / "sub.png").mkdir()
    assert [p.name for p in list_image_files(tmp_path)] == ["a.PNG", "b.png", "c.jpg"]


def test_list_requires_folder(tmp_path):
    with pytest.raises(ImageFormatError):
        list_image_files(tmp_path / "missing")


def test_missing_file(tmp_path):
    with pytest.raises(ImageFormatError, match="not found"):
        load_raw_image(tmp_path / "nope.png")


def test_undecodable_file(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not a png")
    with pytest.raises(ImageFormatError):
        load_raw_image(path)

"""Image I/O — Pillow decode/encode and folder iteration.

The engine only ever sees RawImage buffers; this module is the boundary where
files become buffers and back. Decoded images are always converted to RGBA.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from stencil_painting.config import settings
from stencil_painting.errors import (
    EmptyMaskFolder,
    ImageFormatError,
    InconsistentMaskSize,
    UnsupportedMaskFormat,
)
from stencil_painting.models.raw_image import RawImage

logger = logging.getLogger(__name__)

# Pillow mode for 8-bit greyscale without alpha.
_MASK_MODE = "L"

# Formats Pillow cannot write with an alpha channel.
_NO_ALPHA_EXTENSIONS = {".jpg", ".jpeg"}


def raw_image_from_pil(image: Image.Image) -> RawImage:
    rgba = image.convert("RGBA")
    return RawImage(width=rgba.width, height=rgba.height, data=np.asarray(rgba, dtype=np.uint8), has_alpha=True)


def raw_image_to_pil(raw: RawImage) -> Image.Image:
    mode = "RGBA" if raw.has_alpha else "RGB"
    return Image.frombytes(mode, (raw.width, raw.height), raw.data.tobytes())


def _open_image(path: Path) -> Image.Image:
    try:
        with Image.open(path) as img:
            img.load()
            return img
    except FileNotFoundError:
        raise ImageFormatError(f"Image not found: {path}") from None
    except (UnidentifiedImageError, OSError) as e:
        raise ImageFormatError(f"Cannot decode {path}: {e}") from e


def load_raw_image(path: str | Path) -> RawImage:
    return raw_image_from_pil(_open_image(Path(path)))


def save_raw_image(raw: RawImage, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    image = raw_image_to_pil(raw)
    if image.mode == "RGBA" and out.suffix.lower() in _NO_ALPHA_EXTENSIONS:
        image = image.convert("RGB")
    try:
        image.save(out)
    except (KeyError, ValueError, OSError) as e:
        raise ImageFormatError(f"Cannot write {out}: {e}") from e
    logger.debug("Saved %dx%d image to %s", raw.width, raw.height, out)
    return out


def is_image_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in settings.stencil_image_extensions


def list_image_files(folder: str | Path) -> list[Path]:
    """Image files directly inside folder, sorted by file name."""
    root = Path(folder)
    if not root.is_dir():
        raise ImageFormatError(f"Not a folder: {root}")
    return sorted((p for p in root.iterdir() if is_image_file(p)), key=lambda p: p.name)


def iter_image_folder(folder: str | Path) -> Iterator[tuple[Path, Image.Image]]:
    for path in list_image_files(folder):
        yield path, _open_image(path)


def load_masks(folder: str | Path) -> list[NDArray[np.bool_]]:
    """Load 8-bit greyscale masks as (height, width) bool arrays (pixel != 0).

    Raises:
        EmptyMaskFolder: no image files in the folder.
        UnsupportedMaskFormat: a mask is not mode "L".
        InconsistentMaskSize: masks differ in size.
    """
    masks: list[NDArray[np.bool_]] = []
    for path, image in iter_image_folder(folder):
        if image.mode != _MASK_MODE:
            raise UnsupportedMaskFormat(
                f"Mask {path.name} has mode {image.mode!r}; masks must be 8-bit greyscale without alpha"
            )
        mask = np.asarray(image, dtype=np.uint8) != 0
        if masks and mask.shape != masks[0].shape:
            raise InconsistentMaskSize(
                f"Mask {path.name} is {mask.shape[1]}x{mask.shape[0]}, "
                f"expected {masks[0].shape[1]}x{masks[0].shape[0]}"
            )
        masks.append(mask)

    if not masks:
        raise EmptyMaskFolder(f"No mask images found in {folder}")

    logger.debug("Loaded %d masks of %dx%d from %s", len(masks), masks[0].shape[1], masks[0].shape[0], folder)
    return masks

"""RawImage — the decoded pixel buffer exchanged between the engine and I/O.

Layout: row-major, top-left origin, 3 (RGB) or 4 (RGBA) bytes per pixel.
Pixel (x, y) starts at byte offset (y * width + x) * bytes_per_pixel.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from stencil_painting.errors import ImageFormatError

RGB_CHANNELS = 3
RGBA_CHANNELS = 4


@dataclass
class RawImage:
    width: int
    height: int
    data: NDArray[np.uint8]
    has_alpha: bool = True

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ImageFormatError(f"Negative image size {self.width}x{self.height}")
        self.data = np.ascontiguousarray(self.data, dtype=np.uint8).reshape(-1)
        expected = self.width * self.height * self.bytes_per_pixel
        if self.data.size != expected:
            raise ImageFormatError(
                f"Buffer holds {self.data.size} bytes, expected {expected} "
                f"for {self.width}x{self.height}x{self.bytes_per_pixel}"
            )

    @property
    def bytes_per_pixel(self) -> int:
        return RGBA_CHANNELS if self.has_alpha else RGB_CHANNELS

    @property
    def dimensions(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def pixels(self) -> NDArray[np.uint8]:
        """(height, width, bytes_per_pixel) view sharing the flat buffer."""
        return self.data.reshape(self.height, self.width, self.bytes_per_pixel)

    def pixel(self, x: int, y: int) -> tuple[int, ...]:
        start = (y * self.width + x) * self.bytes_per_pixel
        return tuple(int(v) for v in self.data[start : start + self.bytes_per_pixel])

    @classmethod
    def from_array(cls, array: NDArray) -> RawImage:
        """Wrap an (H, W, 3) or (H, W, 4) uint8 array."""
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] not in (RGB_CHANNELS, RGBA_CHANNELS):
            raise ImageFormatError(f"Expected (H, W, 3|4) pixel array, got shape {arr.shape}")
        height, width, channels = arr.shape
        return cls(width=width, height=height, data=arr, has_alpha=channels == RGBA_CHANNELS)

    @classmethod
    def blank(cls, width: int, height: int, has_alpha: bool = True) -> RawImage:
        channels = RGBA_CHANNELS if has_alpha else RGB_CHANNELS
        return cls(
            width=width,
            height=height,
            data=np.zeros(width * height * channels, dtype=np.uint8),
            has_alpha=has_alpha,
        )

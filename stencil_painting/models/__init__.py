"""Data models shared by the engine and the I/O layer."""

from stencil_painting.models.raw_image import RawImage
from stencil_painting.models.specs import (
    CircleGrid,
    ConcentricCircleGrid,
    CrossGrid,
    FloodFill,
    GeneratorSpec,
    MaskGrid,
    SquareGrid,
)

__all__ = [
    "RawImage",
    "GeneratorSpec",
    "SquareGrid",
    "CircleGrid",
    "ConcentricCircleGrid",
    "CrossGrid",
    "MaskGrid",
    "FloodFill",
]

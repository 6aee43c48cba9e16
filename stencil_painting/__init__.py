"""Stencil painting — region-averaging posterization driven by segment stencils."""

from stencil_painting.engine import (
    composite,
    decode,
    encode,
    generate_stencil,
    segment_by_flood_fill,
)
from stencil_painting.errors import (
    DimensionMismatch,
    EmptyMaskFolder,
    ImageFormatError,
    InconsistentMaskSize,
    InvalidParameterError,
    StencilError,
    UnsupportedMaskFormat,
)
from stencil_painting.io.images import load_masks
from stencil_painting.models import (
    CircleGrid,
    ConcentricCircleGrid,
    CrossGrid,
    FloodFill,
    MaskGrid,
    RawImage,
    SquareGrid,
)

__all__ = [
    "composite",
    "decode",
    "encode",
    "generate_stencil",
    "segment_by_flood_fill",
    "load_masks",
    "RawImage",
    "SquareGrid",
    "CircleGrid",
    "ConcentricCircleGrid",
    "CrossGrid",
    "MaskGrid",
    "FloodFill",
    "StencilError",
    "InvalidParameterError",
    "DimensionMismatch",
    "InconsistentMaskSize",
    "UnsupportedMaskFormat",
    "EmptyMaskFolder",
    "ImageFormatError",
]

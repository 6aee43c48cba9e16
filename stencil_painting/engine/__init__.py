"""Stencil painting engine — generators, segment codec and averaging compositor."""

from stencil_painting.engine.codec import decode, encode
from stencil_painting.engine.compositor import composite
from stencil_painting.engine.generators.flood_fill import segment_by_flood_fill
from stencil_painting.engine.registry import generator, get_registry
from stencil_painting.engine.stencil import generate_stencil

__all__ = [
    "encode",
    "decode",
    "composite",
    "segment_by_flood_fill",
    "generator",
    "get_registry",
    "generate_stencil",
]

"""Stencil generation entry point — dispatch a spec to its registered generator."""

from __future__ import annotations

import logging
import time

from stencil_painting.engine.codec import MAX_SEGMENTS, indices_to_stencil
from stencil_painting.engine.generators import load_generators
from stencil_painting.engine.registry import GeneratorRegistry, get_registry
from stencil_painting.errors import InvalidParameterError
from stencil_painting.models.raw_image import RawImage
from stencil_painting.models.specs import GeneratorSpec

logger = logging.getLogger(__name__)

load_generators()


def generate_stencil(
    width: int,
    height: int,
    spec: GeneratorSpec,
    registry: GeneratorRegistry | None = None,
) -> RawImage:
    """Generate an RGBA stencil of width x height for the given spec.

    Raises:
        InvalidParameterError: zero-sized canvas or invalid spec parameters.
        UnknownGeneratorError: no generator registered for the spec type.
    """
    if width <= 0 or height <= 0:
        raise InvalidParameterError(f"Canvas must be non-empty, got {width}x{height}")

    entry = (registry or get_registry()).for_spec(spec)
    t0 = time.perf_counter()
    indices = entry.fn(width, height, spec)

    max_index = int(indices.max())
    if max_index >= MAX_SEGMENTS:
        logger.warning(
            "%s produced index %d >= %d; colors wrap and segments will merge",
            entry.name, max_index, MAX_SEGMENTS,
        )

    stencil = indices_to_stencil(indices)
    elapsed = (time.perf_counter() - t0) * 1000
    logger.debug(
        "Generated %s stencil %dx%d (max index %d) in %.1fms",
        entry.name, width, height, max_index, elapsed,
    )
    return stencil

"""Batch orchestration — apply stencils to one image or a folder of images.

Two modes:
  - dynamic: a stencil is generated from a spec for every distinct content
    size and cached for reuse across same-sized images.
  - static: one stencil file is applied to every content image.

A failing image is recorded and skipped; the rest of the batch still runs.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from stencil_painting.config import settings
from stencil_painting.engine.compositor import composite
from stencil_painting.engine.stencil import generate_stencil
from stencil_painting.errors import StencilError
from stencil_painting.io.images import list_image_files, load_raw_image, save_raw_image
from stencil_painting.models.raw_image import RawImage
from stencil_painting.models.specs import GeneratorSpec

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of one batch run."""

    processed: list[Path] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)  # file name -> error message
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.failed


class StencilCache:
    """Generates the stencil for a spec once per (width, height)."""

    def __init__(
        self,
        spec: GeneratorSpec,
        generate: Callable[[int, int, GeneratorSpec], RawImage] = generate_stencil,
    ) -> None:
        self.spec = spec
        self._generate = generate
        self._stencils: dict[tuple[int, int], RawImage] = {}
        self.hits = 0
        self.misses = 0

    def get(self, width: int, height: int) -> RawImage:
        key = (width, height)
        stencil = self._stencils.get(key)
        if stencil is None:
            self.misses += 1
            stencil = self._generate(width, height, self.spec)
            self._stencils[key] = stencil
        else:
            self.hits += 1
        return stencil

    def __len__(self) -> int:
        return len(self._stencils)


def generate_and_save_stencil(width: int, height: int, spec: GeneratorSpec, out_path: str | Path) -> Path:
    return save_raw_image(generate_stencil(width, height, spec), out_path)


def _plan_jobs(input_path: Path, output_path: Path) -> list[tuple[Path, Path]]:
    if input_path.is_dir():
        return [(src, output_path / src.name) for src in list_image_files(input_path)]
    if output_path.is_dir():
        return [(input_path, output_path / input_path.name)]
    return [(input_path, output_path)]


def _run_batch(
    jobs: list[tuple[Path, Path]],
    stencil_for: Callable[[RawImage], RawImage],
    alpha_averaging: bool,
) -> BatchResult:
    result = BatchResult()
    start = time.perf_counter()
    logger.info("Batch: %d images queued", len(jobs))

    for src, dst in jobs:
        t0 = time.perf_counter()
        try:
            content = load_raw_image(src)
            output = composite(stencil_for(content), content, alpha_averaging)
            save_raw_image(output, dst)
            result.processed.append(dst)
            logger.debug("  %s completed in %.1fms", src.name, (time.perf_counter() - t0) * 1000)
        except StencilError as e:
            result.failed[src.name] = str(e)
            logger.warning("  %s FAILED: %s", src.name, e)

    result.elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Batch complete: %d/%d images in %.0fms",
        len(result.processed),
        len(jobs),
        result.elapsed_ms,
    )
    return result


def run_dynamic(
    input_path: str | Path,
    output_path: str | Path,
    spec: GeneratorSpec,
    alpha_averaging: bool | None = None,
) -> BatchResult:
    """Generate a stencil per content size from spec and composite every input."""
    if alpha_averaging is None:
        alpha_averaging = settings.stencil_alpha_averaging
    cache = StencilCache(spec)
    result = _run_batch(
        _plan_jobs(Path(input_path), Path(output_path)),
        lambda content: cache.get(content.width, content.height),
        alpha_averaging,
    )
    logger.info("Stencil cache: %d sizes, %d hits, %d misses", len(cache), cache.hits, cache.misses)
    return result


def run_static(
    stencil_path: str | Path,
    input_path: str | Path,
    output_path: str | Path,
    alpha_averaging: bool | None = None,
) -> BatchResult:
    """Composite every input against one stencil image."""
    if alpha_averaging is None:
        alpha_averaging = settings.stencil_alpha_averaging
    stencil = load_raw_image(stencil_path)
    return _run_batch(
        _plan_jobs(Path(input_path), Path(output_path)),
        lambda content: stencil,
        alpha_averaging,
    )

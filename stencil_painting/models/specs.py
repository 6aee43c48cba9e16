"""Generator specifications — the closed set of stencil layouts.

Each spec validates its own parameters on construction, so a bad value is
rejected before any buffer is allocated.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from pathlib import Path
from typing import Union

from stencil_painting.errors import InvalidParameterError


def _require_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be > 0, got {value}")


@dataclass(frozen=True)
class SquareGrid:
    side_length: int
    start_at: int = 0

    def __post_init__(self) -> None:
        _require_positive("side_length", self.side_length)
        if self.start_at < 0:
            raise InvalidParameterError(f"start_at must be >= 0, got {self.start_at}")


@dataclass(frozen=True)
class CircleGrid:
    radius: int

    def __post_init__(self) -> None:
        _require_positive("radius", self.radius)


@dataclass(frozen=True)
class ConcentricCircleGrid:
    radius: int

    def __post_init__(self) -> None:
        _require_positive("radius", self.radius)


@dataclass(frozen=True)
class CrossGrid:
    cross_intersection_width: int

    def __post_init__(self) -> None:
        _require_positive("cross_intersection_width", self.cross_intersection_width)


@dataclass(frozen=True)
class MaskGrid:
    mask_folder: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "mask_folder", Path(self.mask_folder))


@dataclass(frozen=True)
class FloodFill:
    source_path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "source_path", Path(self.source_path))


GeneratorSpec = Union[SquareGrid, CircleGrid, ConcentricCircleGrid, CrossGrid, MaskGrid, FloodFill]

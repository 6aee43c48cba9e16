"""Generator registry — every stencil generator is a function registered via decorator.

Usage:
    @generator(SquareGrid, name="square_grid", description="Tile the canvas with squares")
    def square_grid(width: int, height: int, spec: SquareGrid) -> NDArray[np.int64]:
        ...

A generator returns an (height, width) array of segment indices; encoding the
indices as stencil colors is done once, by generate_stencil().

Adding a new layout = one spec dataclass + one file with the decorator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from stencil_painting.errors import UnknownGeneratorError

logger = logging.getLogger(__name__)

GeneratorFn = Callable[[int, int, Any], NDArray[np.int64]]


@dataclass
class GeneratorEntry:
    name: str
    spec_type: type
    fn: GeneratorFn
    description: str = ""


class GeneratorRegistry:
    """Maps spec types to generator functions."""

    def __init__(self) -> None:
        self._generators: dict[type, GeneratorEntry] = {}

    def register(self, entry: GeneratorEntry) -> None:
        if entry.spec_type in self._generators:
            raise ValueError(f"Duplicate generator for spec type: {entry.spec_type.__name__}")
        if any(e.name == entry.name for e in self._generators.values()):
            raise ValueError(f"Duplicate generator name: {entry.name}")
        self._generators[entry.spec_type] = entry
        logger.debug("Registered generator %s (%s)", entry.name, entry.spec_type.__name__)

    def get(self, spec_type: type) -> GeneratorEntry:
        try:
            return self._generators[spec_type]
        except KeyError:
            raise UnknownGeneratorError(f"No generator registered for {spec_type.__name__}") from None

    def for_spec(self, spec: Any) -> GeneratorEntry:
        return self.get(type(spec))

    def get_by_name(self, name: str) -> GeneratorEntry:
        for entry in self._generators.values():
            if entry.name == name:
                return entry
        raise UnknownGeneratorError(f"No generator named {name!r}")

    def all(self) -> list[GeneratorEntry]:
        return sorted(self._generators.values(), key=lambda e: e.name)

    @property
    def count(self) -> int:
        return len(self._generators)


# Module-level singleton
_registry = GeneratorRegistry()


def get_registry() -> GeneratorRegistry:
    return _registry


def generator(
    spec_type: type,
    name: str,
    description: str = "",
) -> Callable[[GeneratorFn], GeneratorFn]:
    """Decorator to register a generator function for a spec type."""

    def decorator(fn: GeneratorFn) -> GeneratorFn:
        _registry.register(GeneratorEntry(name=name, spec_type=spec_type, fn=fn, description=description))
        return fn

    return decorator

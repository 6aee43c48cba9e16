"""Stencil generators. Importing a module registers its generator."""

from __future__ import annotations

import importlib
import pkgutil


def load_generators() -> None:
    """Import all generator modules so @generator decorators fire."""
    for _, module_name, _ in pkgutil.iter_modules(__path__):
        importlib.import_module(f"{__name__}.{module_name}")

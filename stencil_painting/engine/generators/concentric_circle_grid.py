"""Concentric circle grid — rings of width `radius` around the canvas center."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from stencil_painting.engine.registry import generator
from stencil_painting.models.specs import ConcentricCircleGrid


@generator(
    ConcentricCircleGrid,
    name="concentric_circle_grid",
    description="Concentric rings centred on the canvas",
)
def concentric_circle_grid(width: int, height: int, spec: ConcentricCircleGrid) -> NDArray[np.int64]:
    dx = np.arange(width, dtype=np.float64) - width / 2.0
    dy = np.arange(height, dtype=np.float64) - height / 2.0
    dist = np.sqrt(dx[np.newaxis, :] ** 2 + dy[:, np.newaxis] ** 2)
    return np.floor(dist / spec.radius).astype(np.int64)

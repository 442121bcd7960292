"""
terrain - Land/water classification for the city map

Exposes the TerrainOracle used by emergency landings and slot generation,
and the classification surfaces it can be backed by.
"""

from .core import TerrainOracle
from .surfaces import RasterSurface, FunctionSurface, water_mask_from_rgb
from .exceptions import TerrainError, LandNotFoundError, SurfaceShapeError

__all__ = [
    "TerrainOracle",
    "RasterSurface",
    "FunctionSurface",
    "water_mask_from_rgb",
    "TerrainError",
    "LandNotFoundError",
    "SurfaceShapeError"
]

# jetpackatc/terrain/surfaces.py
"""
Classification surfaces that back the TerrainOracle. A surface answers one
question for a map coordinate: is this water? The map asset provider decides
which surface to hand over; the oracle treats it as a black box.
"""
from typing import Callable

import numpy as np

from .constants import TerrainConstants
from .exceptions import SurfaceShapeError

def water_mask_from_rgb(image: np.ndarray) -> np.ndarray:
    """
    Converts an RGB raster (H x W x 3 or 4, uint8) into a boolean water mask
    using the map colour rule. Vectorised over the whole image.
    """
    if image.ndim != 3 or image.shape[2] < 3:
        raise SurfaceShapeError(f"Expected an H x W x 3 image, got shape {image.shape}")

    rgb = image[:, :, :3].astype(np.int16)
    r, g, b = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
    rule = TerrainConstants.WATER_RGB

    blueish = (b > r + rule['BLUE_DOMINANCE']) & (b > g + rule['BLUE_DOMINANCE'])
    light_blue = (b > rule['LIGHT_BLUE_MIN']) & (b > r) & (b > g)
    dark_water = ((r < rule['DARK_RED_MAX']) & (g < rule['DARK_GREEN_MAX']) &
                  (b > rule['DARK_BLUE_MIN']) & (b - r > rule['DARK_BLUE_RED_GAP']))
    return blueish | light_blue | dark_water


class RasterSurface:
    """Water mask sampled per map pixel; indexed [y, x]."""

    def __init__(self, water_mask: np.ndarray):
        if water_mask.ndim != 2:
            raise SurfaceShapeError(f"Water mask must be 2-D, got shape {water_mask.shape}")
        self.water_mask = water_mask.astype(bool)
        self.height, self.width = self.water_mask.shape

    @classmethod
    def from_rgb(cls, image: np.ndarray) -> "RasterSurface":
        return cls(water_mask_from_rgb(image))

    def __call__(self, x: float, y: float) -> bool:
        col, row = int(x), int(y)
        if col < 0 or row < 0 or col >= self.width or row >= self.height:
            return True
        return bool(self.water_mask[row, col])

    def water_fraction(self) -> float:
        return float(self.water_mask.mean()) if self.water_mask.size else 0.0


class FunctionSurface:
    """Adapts any (x, y) -> is_water predicate, e.g. an analytic test map."""

    def __init__(self, predicate: Callable[[float, float], bool]):
        self.predicate = predicate

    def __call__(self, x: float, y: float) -> bool:
        return bool(self.predicate(x, y))

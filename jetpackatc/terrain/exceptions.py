# jetpackatc/terrain/exceptions.py
from ..exceptions import JetpackATCError

class TerrainError(JetpackATCError):
    """Base exception for terrain classification errors."""
    pass

class LandNotFoundError(TerrainError):
    """Raised when the spiral search exhausts its radius without finding land."""
    def __init__(self, x: float, y: float, max_radius: float):
        self.x = x
        self.y = y
        self.max_radius = max_radius
        super().__init__(f"No land within {max_radius:.0f} units of ({x:.1f}, {y:.1f})")

class SurfaceShapeError(TerrainError):
    """Raised when a raster surface is built from an array of the wrong shape."""
    pass

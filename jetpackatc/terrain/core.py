# jetpackatc/terrain/core.py
"""
The Terrain Oracle: classifies map points as water or land and locates the
nearest land from a water point with an expanding spiral search.
"""
import logging
import random
from typing import Callable, Optional

import numpy as np

from ..utils.geometry import Point
from .constants import TerrainConstants
from .exceptions import LandNotFoundError

logger = logging.getLogger(__name__)

class TerrainOracle:
    """Water/land classification over the playable map area."""

    def __init__(self, surface: Callable[[float, float], bool], width: float, height: float,
                 edge_margin: float = 0.0,
                 search_step: float = TerrainConstants.SEARCH_STEP,
                 angle_step_deg: float = TerrainConstants.SEARCH_ANGLE_STEP_DEG):
        """
        Args:
            surface: Black-box predicate (x, y) -> True when the point is water.
            width, height: Map extent in map units.
            edge_margin: Band along the map edges excluded from land searches.
            search_step: Radius increment of the spiral search.
            angle_step_deg: Angular increment on each spiral ring.
        """
        self.surface = surface
        self.width = width
        self.height = height
        self.edge_margin = edge_margin
        self.search_step = search_step
        self.angle_step_deg = angle_step_deg
        logger.info(f"TerrainOracle initialized: {width}x{height}, margin {edge_margin}, "
                    f"spiral step {search_step} / {angle_step_deg}°")

    @property
    def center(self) -> Point:
        return Point(self.width / 2.0, self.height / 2.0)

    def contains(self, point: Point) -> bool:
        """True when the point lies on the map at all."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def in_playable_area(self, point: Point) -> bool:
        """True when the point lies inside the map minus the edge margin."""
        m = self.edge_margin
        return m <= point.x < self.width - m and m <= point.y < self.height - m

    def is_water(self, point: Point) -> bool:
        # Off-map counts as water so nothing ever lands outside the city
        if not self.contains(point):
            return True
        return bool(self.surface(point.x, point.y))

    def find_nearest_land(self, point: Point, max_radius: Optional[float] = None) -> Point:
        """
        Expanding spiral search for land. Rings grow by `search_step` up to
        `max_radius`; each ring is swept from 0 to 2*pi in `angle_step_deg`
        increments. Candidates outside the playable area are skipped.

        Raises:
            LandNotFoundError: when no ring within max_radius contains land.
        """
        if not self.is_water(point):
            return point

        if max_radius is None:
            max_radius = float(max(self.width, self.height))

        angles = np.radians(np.arange(0.0, 360.0, self.angle_step_deg))
        cos_a, sin_a = np.cos(angles), np.sin(angles)

        radius = self.search_step
        rings = 0
        while radius <= max_radius:
            rings += 1
            xs = point.x + radius * cos_a
            ys = point.y + radius * sin_a
            for cx, cy in zip(xs, ys):
                candidate = Point(float(cx), float(cy))
                if not self.in_playable_area(candidate):
                    continue
                if not self.is_water(candidate):
                    logger.debug(f"Land found at ({candidate.x:.1f}, {candidate.y:.1f}) "
                                 f"after {rings} rings (r={radius:.0f})")
                    return candidate
            radius += self.search_step

        logger.warning(f"Spiral search from ({point.x:.1f}, {point.y:.1f}) exhausted at r={max_radius:.0f}")
        raise LandNotFoundError(point.x, point.y, max_radius)

    def random_land_point(self, rng: random.Random, margin: Optional[float] = None) -> Point:
        """Uniformly samples land inside the margin; the map centre if none turns up."""
        margin = self.edge_margin if margin is None else margin
        for _ in range(TerrainConstants.RANDOM_LAND_ATTEMPTS):
            candidate = Point(rng.uniform(margin, self.width - margin),
                              rng.uniform(margin, self.height - margin))
            if not self.is_water(candidate):
                return candidate
        logger.warning("No random land point found; using the map centre")
        return self.center

    def __repr__(self) -> str:
        return f"TerrainOracle(width={self.width}, height={self.height}, margin={self.edge_margin})"

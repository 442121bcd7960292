# jetpackatc/utils/geometry.py
"""
Planar geometry helpers for the city map. Coordinates are map units with the
origin in the top-left corner of the map raster. No logging here: these are
called for every agent on every tick.
"""
import math
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class Point:
    """An immutable position on the city map."""
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)

def angle_between(origin: Point, target: Point) -> float:
    """Heading from origin to target in radians, measured from the +x axis."""
    return math.atan2(target.y - origin.y, target.x - origin.x)

def move_toward(current: Point, target: Point, step: float) -> Point:
    """Advances `step` units along the straight line to target, never past it."""
    if step <= 0:
        return current
    remaining = distance(current, target)
    if remaining <= step:
        return target
    ratio = step / remaining
    return Point(current.x + (target.x - current.x) * ratio,
                 current.y + (target.y - current.y) * ratio)

def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)

def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))

def polar_offset(origin: Point, radius: float, theta: float) -> Point:
    return Point(origin.x + radius * math.cos(theta), origin.y + radius * math.sin(theta))

def is_within_range(a: Point, b: Point, limit: float) -> bool:
    return distance(a, b) <= limit

_COMPASS_LABELS = ("East", "Northeast", "North", "Northwest", "West", "Southwest", "South", "Southeast")

def compass_direction(origin: Point, target: Point) -> str:
    """8-point compass label for the heading from origin to target; +y counts as North."""
    degrees = math.degrees(angle_between(origin, target))
    sector = int(((degrees + 22.5) % 360) // 45)
    return _COMPASS_LABELS[sector]

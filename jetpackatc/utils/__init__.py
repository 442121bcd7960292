from .geometry import (
    Point,
    distance,
    angle_between,
    move_toward,
    midpoint,
    clamp,
    polar_offset,
    is_within_range,
    compass_direction
)

__all__ = [
    "Point",
    "distance",
    "angle_between",
    "move_toward",
    "midpoint",
    "clamp",
    "polar_offset",
    "is_within_range",
    "compass_direction"
]

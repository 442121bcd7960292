"""
detection - Collision and accident detection
"""

from .core import CollisionDetector, tier_for_distance
from .registry import AccidentRegistry
from .data_models import AccidentRecord, ProximityAlert
from .constants import DetectionConstants, ProximityTier
from .exceptions import DetectionError, AccidentNotFoundError

__all__ = [
    'CollisionDetector',
    'tier_for_distance',
    'AccidentRegistry',
    'AccidentRecord',
    'ProximityAlert',
    'DetectionConstants',
    'ProximityTier',
    'DetectionError',
    'AccidentNotFoundError'
]

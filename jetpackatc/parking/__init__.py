"""
parking - Parking slots, slot registry and the parking lifecycle
"""

from .core import ParkingRegistry
from .generator import generate_slots
from .lifecycle import ParkingLifecycle
from .data_models import ParkingSlot, OccupancySummary
from .constants import ParkingConstants
from .exceptions import ParkingError, SlotNotFoundError, SlotGenerationError

__all__ = [
    'ParkingRegistry',
    'generate_slots',
    'ParkingLifecycle',
    'ParkingSlot',
    'OccupancySummary',
    'ParkingConstants',
    'ParkingError',
    'SlotNotFoundError',
    'SlotGenerationError'
]

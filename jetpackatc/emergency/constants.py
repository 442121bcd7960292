# jetpackatc/emergency/constants.py
from enum import Enum

class LandFallbackPolicy(Enum):
    """Where an emergency landing goes when no land is found within the search bound."""
    MAP_CENTER = "MAP_CENTER"
    HOLD_POSITION = "HOLD_POSITION"

class EmergencyConstants:
    DEFAULT_FALLBACK = LandFallbackPolicy.MAP_CENTER
    EVASIVE_OFFSET = 100.0

# jetpackatc/detection/constants.py
from enum import Enum

class ProximityTier(Enum):
    ACCIDENT = "ACCIDENT"
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    CLEAR = "CLEAR"

class DetectionConstants:
    # Pairwise separation thresholds (map units)
    ACCIDENT_DISTANCE = 20.0
    CRITICAL_DISTANCE = 50.0
    WARNING_DISTANCE = 100.0

    ACCIDENT_SEVERITY = "SEVERE"
    ACCIDENT_TYPE = "COLLISION"

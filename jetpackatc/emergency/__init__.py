"""
emergency - Emergency landing handling with water avoidance
"""

from .core import EmergencyHandler
from .data_models import LandingPlan
from .constants import LandFallbackPolicy, EmergencyConstants

__all__ = [
    'EmergencyHandler',
    'LandingPlan',
    'LandFallbackPolicy',
    'EmergencyConstants'
]

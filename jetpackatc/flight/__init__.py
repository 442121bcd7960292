"""
flight - Flight agents, hazard/reroute arbitration and fleet generation
"""

from .core import FlightAgent
from .factory import FleetFactory
from .arbitration import resolve_target, resolve_speed, advance
from .data_models import (Jetpack, HazardFlags, FlightStatus, ParkingPhase, TargetSource,
                          TargetResolution, AgentSnapshot)
from .constants import FlightConstants, FleetConstants
from .exceptions import FlightError, InvalidFlightParametersError

__all__ = [
    'FlightAgent',
    'FleetFactory',
    'resolve_target',
    'resolve_speed',
    'advance',
    'Jetpack',
    'HazardFlags',
    'FlightStatus',
    'ParkingPhase',
    'TargetSource',
    'TargetResolution',
    'AgentSnapshot',
    'FlightConstants',
    'FleetConstants',
    'FlightError',
    'InvalidFlightParametersError'
]

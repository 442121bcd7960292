"""
simulation - Tick pipeline, configuration, clock and snapshots

The Simulation owns every component and runs them in a fixed order once per
tick; consumers only ever see immutable SimulationSnapshots and events.
"""

from .core import Simulation, CITY_HAZARDS
from .clock import SimulationClock
from .config import SimulationConfig
from .data_models import SimulationSnapshot
from .events import EventBus, EventKind, SimulationEvent
from .exceptions import SimulationError, ConfigurationError, UnknownHazardError

__all__ = [
    'Simulation',
    'CITY_HAZARDS',
    'SimulationClock',
    'SimulationConfig',
    'SimulationSnapshot',
    'EventBus',
    'EventKind',
    'SimulationEvent',
    'SimulationError',
    'ConfigurationError',
    'UnknownHazardError'
]

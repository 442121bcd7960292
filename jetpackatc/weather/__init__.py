"""
weather - City weather model

Maintains the current condition on a slower cadence than the flight loop
and exposes it as an immutable WeatherState.
"""

from .core import WeatherModel
from .data_models import WeatherState
from .constants import WeatherSeverity, WeatherConstants
from .exceptions import WeatherError, UnknownConditionError

__all__ = [
    'WeatherModel',
    'WeatherState',
    'WeatherSeverity',
    'WeatherConstants',
    'WeatherError',
    'UnknownConditionError'
]

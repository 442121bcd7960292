# jetpackatc/weather/data_models.py
from dataclasses import dataclass

from .constants import WeatherConstants

@dataclass(frozen=True)
class WeatherState:
    """An immutable reading of the city weather. Replaced, never mutated."""
    condition: str
    severity: int
    temperature_f: float
    wind_speed_mph: int
    visibility_miles: int
    updated_tick: int = 0

    @property
    def safe_to_fly(self) -> bool:
        return (self.severity <= WeatherConstants.MAX_SAFE_SEVERITY and
                self.visibility_miles >= WeatherConstants.MIN_SAFE_VISIBILITY_MILES and
                self.wind_speed_mph < WeatherConstants.MAX_SAFE_WIND_MPH)

# jetpackatc/weather/core.py
"""
City-wide weather model. The simulation advances it once per tick; it only
changes condition every `interval_ticks`. Readers always get the last
published WeatherState, which is immutable, so no lock is needed on reads.
"""
import logging
import random
from typing import Optional

from .constants import WeatherConstants, WeatherSeverity
from .data_models import WeatherState
from .exceptions import UnknownConditionError

logger = logging.getLogger(__name__)

class WeatherModel:
    def __init__(self, city: str = "New York", interval_ticks: int = 600,
                 rng: Optional[random.Random] = None):
        self.city = city
        self.interval_ticks = interval_ticks
        self.rng = rng or random.Random()
        self._state = WeatherState(
            condition=WeatherConstants.DEFAULT_CONDITION,
            severity=int(WeatherConstants.CONDITIONS[WeatherConstants.DEFAULT_CONDITION][0]),
            temperature_f=WeatherConstants.DEFAULT_TEMPERATURE_F,
            wind_speed_mph=WeatherConstants.DEFAULT_WIND_MPH,
            visibility_miles=WeatherConstants.DEFAULT_VISIBILITY_MILES,
        )
        logger.info(f"WeatherModel initialized for {city}: {self._state.condition}, "
                    f"changes every {interval_ticks} ticks")

    @property
    def current(self) -> WeatherState:
        return self._state

    @staticmethod
    def conditions():
        return list(WeatherConstants.CONDITIONS.keys())

    def _sample(self, span_spec) -> int:
        low, span = span_spec
        return low + (self.rng.randrange(span) if span > 0 else 0)

    def change_weather(self, condition: str, tick: int = 0) -> WeatherState:
        """Switches to `condition` and re-samples its temperature, wind and visibility."""
        if condition not in WeatherConstants.CONDITIONS:
            raise UnknownConditionError(condition)

        severity, temp_range, wind_range, vis_range = WeatherConstants.CONDITIONS[condition]
        previous = self._state
        self._state = WeatherState(
            condition=condition,
            severity=int(severity),
            temperature_f=float(self._sample(temp_range)),
            wind_speed_mph=self._sample(wind_range),
            visibility_miles=self._sample(vis_range),
            updated_tick=tick,
        )

        if not self._state.safe_to_fly and previous.safe_to_fly:
            logger.warning(f"{self.city} weather deteriorated to {condition} "
                           f"(severity {severity}): flying is no longer safe")
        else:
            logger.info(f"{self.city} weather changed to {condition} (severity {severity})")
        return self._state

    def change_randomly(self, tick: int = 0) -> WeatherState:
        return self.change_weather(self.rng.choice(self.conditions()), tick)

    def advance(self, tick: int) -> WeatherState:
        """Called every tick; rolls a new random condition on the interval boundary."""
        if self.interval_ticks > 0 and tick > 0 and tick % self.interval_ticks == 0:
            return self.change_randomly(tick)
        return self._state

    def broadcast(self) -> str:
        """Multi-line weather report for the radio collaborator."""
        state = self._state
        severity = WeatherSeverity(state.severity)
        lines = [
            f"WEATHER BROADCAST - {self.city.upper()}",
            f"Conditions: {state.condition}",
            f"Temperature: {state.temperature_f:.0f}°F",
            f"Wind: {state.wind_speed_mph} mph",
            f"Visibility: {state.visibility_miles} miles",
            f"Severity: Level {state.severity} - {WeatherConstants.SEVERITY_DESCRIPTIONS[severity]}",
            f"Flight Status: {WeatherConstants.FLIGHT_STATUS[severity]}",
            f"Recommendation: {WeatherConstants.RECOMMENDATIONS[severity]}",
        ]
        if not state.safe_to_fly:
            lines.append("WARNING: Conditions unsafe for jetpack operations")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"WeatherModel(city={self.city!r}, condition={self._state.condition!r})"

# jetpackatc/simulation/config.py
import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ..constants import CityDefaults, MapDefaults, SimulationConstants
from ..emergency.constants import LandFallbackPolicy
from ..flight.constants import FlightConstants
from ..parking.constants import ParkingConstants
from ..terrain.constants import TerrainConstants
from .exceptions import ConfigurationError

@dataclass
class SimulationConfig:
    """Run-time settings of one simulation. Static tunables live in the constants classes."""
    city: str = CityDefaults.DEFAULT_CITY
    map_width: int = MapDefaults.WIDTH
    map_height: int = MapDefaults.HEIGHT
    edge_margin: float = MapDefaults.EDGE_MARGIN
    fleet_size: int = SimulationConstants.DEFAULT_FLEET_SIZE
    parking_slots: int = ParkingConstants.DEFAULT_SLOT_COUNT
    base_speed: float = FlightConstants.DEFAULT_BASE_SPEED
    tick_interval_s: float = SimulationConstants.TICK_INTERVAL_S
    weather_interval_ticks: int = SimulationConstants.WEATHER_INTERVAL_TICKS
    radio_interval_ticks: int = 0
    dwell_ticks: Tuple[int, int] = ParkingConstants.DEFAULT_DWELL_TICKS
    land_search_step: float = TerrainConstants.SEARCH_STEP
    land_search_angle_deg: float = TerrainConstants.SEARCH_ANGLE_STEP_DEG
    land_search_max_radius: Optional[float] = None
    land_fallback: LandFallbackPolicy = LandFallbackPolicy.MAP_CENTER
    max_slot_distance: Optional[float] = None
    motion_workers: int = 1
    seed: Optional[int] = None

    def validate(self) -> "SimulationConfig":
        problems = []
        if self.map_width <= 0 or self.map_height <= 0:
            problems.append(f"map size must be positive, got {self.map_width}x{self.map_height}")
        if self.edge_margin < 0 or 2 * self.edge_margin >= min(self.map_width, self.map_height):
            problems.append(f"edge_margin {self.edge_margin} does not fit the map")
        if not 0 <= self.fleet_size <= SimulationConstants.MAX_FLEET_SIZE:
            problems.append(f"fleet_size must be in [0, {SimulationConstants.MAX_FLEET_SIZE}], got {self.fleet_size}")
        if self.parking_slots < 0:
            problems.append(f"parking_slots must be non-negative, got {self.parking_slots}")
        if self.base_speed < 0:
            problems.append(f"base_speed must be non-negative, got {self.base_speed}")
        if self.tick_interval_s < 0:
            problems.append(f"tick_interval_s must be non-negative, got {self.tick_interval_s}")
        if self.weather_interval_ticks < 0 or self.radio_interval_ticks < 0:
            problems.append("tick intervals must be non-negative")
        low, high = self.dwell_ticks
        if low < 1 or high < low:
            problems.append(f"dwell_ticks must satisfy 1 <= low <= high, got {self.dwell_ticks}")
        if self.land_search_step <= 0 or self.land_search_angle_deg <= 0:
            problems.append("land search step and angle must be positive")
        if self.land_search_max_radius is not None and self.land_search_max_radius <= 0:
            problems.append(f"land_search_max_radius must be positive, got {self.land_search_max_radius}")
        if self.max_slot_distance is not None and self.max_slot_distance <= 0:
            problems.append(f"max_slot_distance must be positive, got {self.max_slot_distance}")
        if self.motion_workers < 1:
            problems.append(f"motion_workers must be at least 1, got {self.motion_workers}")
        if not isinstance(self.land_fallback, LandFallbackPolicy):
            problems.append(f"land_fallback must be a LandFallbackPolicy, got {self.land_fallback!r}")

        if problems:
            raise ConfigurationError("Invalid simulation config: " + "; ".join(problems))
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        values = dict(data)
        if 'land_fallback' in values and not isinstance(values['land_fallback'], LandFallbackPolicy):
            try:
                values['land_fallback'] = LandFallbackPolicy(str(values['land_fallback']).upper())
            except ValueError:
                raise ConfigurationError(f"Unknown land_fallback policy: {values['land_fallback']!r}") from None
        if 'dwell_ticks' in values:
            values['dwell_ticks'] = tuple(values['dwell_ticks'])
        return cls(**values).validate()

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "SimulationConfig":
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not load config from {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['land_fallback'] = self.land_fallback.value
        data['dwell_ticks'] = list(self.dwell_ticks)
        return data

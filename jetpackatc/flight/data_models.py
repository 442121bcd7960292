# jetpackatc/flight/data_models.py
from dataclasses import dataclass, fields
from enum import Enum
from typing import List, Optional, Tuple

from ..utils.geometry import Point

class FlightStatus(Enum):
    ACTIVE = "ACTIVE"
    FOLLOWING_INSTRUCTION = "FOLLOWING_INSTRUCTION"
    DETOUR = "DETOUR"
    EMERGENCY_HALT = "EMERGENCY_HALT"
    EMERGENCY_LANDING = "EMERGENCY_LANDING"
    PARKED = "PARKED"

class ParkingPhase(Enum):
    EN_ROUTE = "EN_ROUTE"
    ARRIVING = "ARRIVING"
    PARKED = "PARKED"
    DEPARTING = "DEPARTING"

class TargetSource(Enum):
    RADIO = "RADIO"
    DETOUR = "DETOUR"
    WAYPOINT = "WAYPOINT"
    DESTINATION = "DESTINATION"
    HOLD = "HOLD"

@dataclass(frozen=True)
class Jetpack:
    """Registration data of a single jetpack."""
    serial_number: str
    callsign: str
    owner_name: str
    year: str
    model: str
    manufacturer: str

@dataclass
class HazardFlags:
    inclement_weather: bool = False
    building_collapse: bool = False
    accident_hazard: bool = False
    restricted_activity: bool = False
    emergency_halt: bool = False

    def active(self) -> List[str]:
        return [f.name for f in fields(self) if getattr(self, f.name)]

    def any(self) -> bool:
        return bool(self.active())

@dataclass(frozen=True)
class TargetResolution:
    point: Point
    source: TargetSource

@dataclass(frozen=True)
class AgentSnapshot:
    """Read-only view of one agent at the end of a tick."""
    agent_id: int
    callsign: str
    position: Point
    altitude: float
    status: FlightStatus
    parking_phase: ParkingPhase
    effective_speed: float
    destination: Point
    hazards: Tuple[str, ...]
    trail: Tuple[Point, ...]
    radio_destination: Optional[Point] = None
    slot_id: Optional[str] = None

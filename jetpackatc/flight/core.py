# jetpackatc/flight/core.py
import logging
import random
from collections import deque
from typing import Iterable, Optional

from ..constants import MapDefaults
from ..utils.geometry import Point, clamp
from . import arbitration
from .constants import FlightConstants
from .data_models import (AgentSnapshot, FlightStatus, HazardFlags, Jetpack, ParkingPhase,
                          TargetResolution)
from .exceptions import InvalidFlightParametersError

logger = logging.getLogger(__name__)

_EMERGENCY_STATES = (FlightStatus.EMERGENCY_HALT, FlightStatus.EMERGENCY_LANDING)

class FlightAgent:
    """
    A single simulated jetpack. Owns its position and is the only thing that
    moves it; everything else talks to it through the instruction sink methods
    or the lifecycle hooks below.
    """

    def __init__(self, agent_id: int, jetpack: Jetpack, position: Point, destination: Point,
                 base_speed: float = FlightConstants.DEFAULT_BASE_SPEED,
                 altitude: float = FlightConstants.DEFAULT_ALTITUDE,
                 rng: Optional[random.Random] = None):
        if base_speed < 0:
            raise InvalidFlightParametersError(f"base_speed must be non-negative, got {base_speed}")

        self.agent_id = agent_id
        self.jetpack = jetpack
        self.position = position
        self.destination = destination
        self.base_speed = float(base_speed)
        self.effective_speed = float(base_speed)
        self.altitude = clamp(float(altitude), MapDefaults.MIN_ALTITUDE, MapDefaults.MAX_ALTITUDE)
        self.rng = rng or random.Random()

        self.waypoint_queue = deque()
        self.detour_queue = deque()
        self.radio_destination: Optional[Point] = None
        self.radio_altitude: Optional[float] = None
        self.hazards = HazardFlags()
        self.status = FlightStatus.ACTIVE
        self.parking_phase = ParkingPhase.EN_ROUTE
        self.trail = deque(maxlen=FlightConstants.TRAIL_LENGTH)

        # Emergency / parking bookkeeping
        self.emergency_requested = False
        self.emergency_reason: Optional[str] = None
        self.landing_point: Optional[Point] = None
        self.landing_slot_id: Optional[str] = None
        self.parked_slot_id: Optional[str] = None
        self.dwell_remaining = 0

    @property
    def callsign(self) -> str:
        return self.jetpack.callsign

    @property
    def is_parked(self) -> bool:
        return self.status == FlightStatus.PARKED

    @property
    def in_emergency(self) -> bool:
        return (self.status in _EMERGENCY_STATES or self.hazards.emergency_halt or
                self.emergency_requested)

    # --- Instruction sink ---

    def set_radio_destination(self, point: Point, reason: str = "") -> None:
        self.radio_destination = point
        if not self.in_emergency:
            self.status = FlightStatus.FOLLOWING_INSTRUCTION
        logger.info(f"{self.callsign}: radio destination ({point.x:.0f}, {point.y:.0f}) - {reason}")

    def set_radio_altitude(self, value: float, reason: str = "") -> None:
        self.radio_altitude = clamp(float(value), MapDefaults.MIN_ALTITUDE, MapDefaults.MAX_ALTITUDE)
        if not self.in_emergency and self.status != FlightStatus.DETOUR:
            self.status = FlightStatus.FOLLOWING_INSTRUCTION
        logger.info(f"{self.callsign}: radio altitude {self.radio_altitude:.0f} - {reason}")

    def request_emergency_landing(self, reason: str = "") -> None:
        self.emergency_requested = True
        self.emergency_reason = reason
        logger.warning(f"{self.callsign}: emergency landing requested - {reason}")

    # --- Route control ---

    def set_destination(self, point: Point) -> None:
        self.destination = point

    def add_waypoint(self, point: Point) -> None:
        self.waypoint_queue.append(point)

    def set_waypoints(self, points: Iterable[Point]) -> None:
        self.waypoint_queue = deque(points)

    def set_detour(self, points: Iterable[Point], hazard: str = "") -> None:
        points = list(points)
        if not points:
            return
        self.detour_queue = deque(points)
        if not self.in_emergency:
            self.status = FlightStatus.DETOUR
        logger.info(f"{self.callsign}: detour of {len(points)} points, avoiding {hazard or 'hazard'}")

    # --- Emergency / parking hooks ---

    def halt(self, reason: str = "") -> None:
        self.hazards.emergency_halt = True
        self.status = FlightStatus.EMERGENCY_HALT
        logger.error(f"{self.callsign}: EMERGENCY HALT - {reason}")

    def begin_emergency_landing(self, route: Iterable[Point], landing_point: Point,
                                slot_id: Optional[str]) -> None:
        """Commits the agent to an emergency route. The halt is lifted so it can fly it."""
        self.detour_queue = deque(route)
        self.waypoint_queue.clear()
        self.radio_destination = None
        self.landing_point = landing_point
        self.landing_slot_id = slot_id
        self.emergency_requested = False
        self.hazards.emergency_halt = False
        self.status = FlightStatus.EMERGENCY_LANDING

    def park(self, slot_id: str, dwell_ticks: int, position: Optional[Point] = None) -> None:
        """Sets the agent down in slot_id, at the slot position when one is given."""
        if position is not None:
            self.position = position
        self.parked_slot_id = slot_id
        self.dwell_remaining = dwell_ticks
        self.status = FlightStatus.PARKED
        self.parking_phase = ParkingPhase.PARKED
        self.effective_speed = 0.0
        self.hazards.accident_hazard = False
        self.hazards.emergency_halt = False
        self.detour_queue.clear()
        self.radio_destination = None
        self.radio_altitude = None
        self.landing_point = None
        self.landing_slot_id = None
        self.emergency_reason = None

    def depart(self, destination: Point) -> None:
        self.parked_slot_id = None
        self.dwell_remaining = 0
        self.destination = destination
        self.waypoint_queue.clear()
        self.status = FlightStatus.ACTIVE
        self.parking_phase = ParkingPhase.EN_ROUTE

    # --- Per-tick update ---

    def advance(self) -> TargetResolution:
        """Arbitration + motion for one tick, then altitude and trail."""
        resolution = arbitration.advance(self)
        if not self.is_parked:
            self._update_altitude()
        self.trail.appendleft(self.position)
        return resolution

    def _update_altitude(self) -> None:
        if self.radio_altitude is not None:
            delta = self.radio_altitude - self.altitude
            if abs(delta) <= FlightConstants.ALTITUDE_TOLERANCE:
                self.altitude = self.radio_altitude
                self.radio_altitude = None
                if self.status == FlightStatus.FOLLOWING_INSTRUCTION and self.radio_destination is None:
                    self.status = FlightStatus.ACTIVE
            else:
                step = min(FlightConstants.ALTITUDE_STEP, abs(delta))
                self.altitude += step if delta > 0 else -step
        else:
            jitter = FlightConstants.ALTITUDE_JITTER
            self.altitude += self.rng.uniform(-jitter, jitter)
        self.altitude = clamp(self.altitude, MapDefaults.MIN_ALTITUDE, MapDefaults.MAX_ALTITUDE)

    def snapshot(self) -> AgentSnapshot:
        return AgentSnapshot(
            agent_id=self.agent_id,
            callsign=self.callsign,
            position=self.position,
            altitude=self.altitude,
            status=self.status,
            parking_phase=self.parking_phase,
            effective_speed=self.effective_speed,
            destination=self.destination,
            hazards=tuple(self.hazards.active()),
            trail=tuple(self.trail),
            radio_destination=self.radio_destination,
            slot_id=self.parked_slot_id,
        )

    def __repr__(self) -> str:
        return (f"FlightAgent({self.agent_id}, {self.callsign!r}, "
                f"({self.position.x:.1f}, {self.position.y:.1f}), {self.status.value})")

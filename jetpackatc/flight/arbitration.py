# jetpackatc/flight/arbitration.py
"""
Hazard/reroute arbitration. Once per agent per tick it decides which authority
the agent obeys (radio, detour, waypoint or destination), how fast it may fly
under its hazard flags, and moves it one step along the straight line.

Exactly one authority wins per tick, in this order:
    1. radio_destination
    2. head of detour_queue
    3. head of waypoint_queue
    4. destination
Parked agents, and emergency-landing agents with nothing left on their
detour, hold position.
"""
import logging

from ..utils.geometry import distance, move_toward
from .constants import FlightConstants
from .data_models import FlightStatus, ParkingPhase, TargetResolution, TargetSource

logger = logging.getLogger(__name__)

_HOLDING_PHASES = (ParkingPhase.PARKED, ParkingPhase.DEPARTING)

def resolve_target(agent) -> TargetResolution:
    if agent.status == FlightStatus.PARKED or agent.parking_phase in _HOLDING_PHASES:
        return TargetResolution(agent.position, TargetSource.HOLD)
    if agent.status == FlightStatus.EMERGENCY_LANDING and not agent.detour_queue:
        return TargetResolution(agent.position, TargetSource.HOLD)

    if agent.radio_destination is not None:
        return TargetResolution(agent.radio_destination, TargetSource.RADIO)
    if agent.detour_queue:
        return TargetResolution(agent.detour_queue[0], TargetSource.DETOUR)
    if agent.waypoint_queue:
        return TargetResolution(agent.waypoint_queue[0], TargetSource.WAYPOINT)
    return TargetResolution(agent.destination, TargetSource.DESTINATION)

def resolve_speed(agent) -> float:
    """base_speed scaled by the most restrictive hazard; halt and parking pin it to zero."""
    if agent.hazards.emergency_halt or agent.status == FlightStatus.PARKED:
        return 0.0
    multipliers = [FlightConstants.HAZARD_SPEED_MULTIPLIERS.get(name, 1.0)
                   for name in agent.hazards.active()]
    return agent.base_speed * min(multipliers, default=1.0)

def advance(agent) -> TargetResolution:
    """Moves the agent one tick toward its resolved target and consumes it when reached."""
    resolution = resolve_target(agent)
    agent.effective_speed = resolve_speed(agent)
    if resolution.source is TargetSource.HOLD:
        return resolution

    agent.position = move_toward(agent.position, resolution.point, agent.effective_speed)
    if distance(agent.position, resolution.point) < FlightConstants.ARRIVAL_EPSILON:
        _consume(agent, resolution.source)
    return resolution

def _consume(agent, source: TargetSource) -> None:
    if source is TargetSource.RADIO:
        agent.radio_destination = None
        logger.info(f"{agent.callsign}: radio destination reached")
        if agent.status == FlightStatus.FOLLOWING_INSTRUCTION and agent.radio_altitude is None:
            agent.status = FlightStatus.DETOUR if agent.detour_queue else FlightStatus.ACTIVE

    elif source is TargetSource.DETOUR:
        agent.detour_queue.popleft()
        if not agent.detour_queue and agent.status == FlightStatus.DETOUR:
            agent.status = FlightStatus.ACTIVE
            logger.info(f"{agent.callsign}: detour complete, resuming normal flight path")

    elif source is TargetSource.WAYPOINT:
        agent.waypoint_queue.popleft()

    elif source is TargetSource.DESTINATION and agent.parking_phase == ParkingPhase.EN_ROUTE:
        agent.parking_phase = ParkingPhase.ARRIVING
        logger.debug(f"{agent.callsign}: destination reached, arriving")

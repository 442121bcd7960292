# jetpackatc/parking/lifecycle.py
"""
Parking lifecycle: EN_ROUTE -> ARRIVING -> PARKED -> DEPARTING -> EN_ROUTE.

Evaluated once per agent per tick after the emergency handler, so it also
completes emergency landings: an agent that has flown its emergency route
claims the slot it was routed to.
"""
import logging
from typing import Optional, Tuple

from ..flight.constants import FlightConstants
from ..flight.data_models import FlightStatus, ParkingPhase
from ..utils.geometry import compass_direction, distance
from .constants import ParkingConstants
from .core import ParkingRegistry
from .data_models import ParkingSlot

logger = logging.getLogger(__name__)

class ParkingLifecycle:
    def __init__(self, registry: ParkingRegistry, terrain,
                 dwell_ticks: Tuple[int, int] = ParkingConstants.DEFAULT_DWELL_TICKS):
        self.registry = registry
        self.terrain = terrain
        self.dwell_ticks = dwell_ticks

    def update(self, agent) -> Optional[ParkingPhase]:
        """Advances the agent's parking state; returns the phase entered this tick, if any."""
        if agent.status == FlightStatus.EMERGENCY_LANDING:
            return self._complete_emergency_landing(agent)
        if agent.status == FlightStatus.EMERGENCY_HALT:
            return None

        phase = agent.parking_phase
        if phase is ParkingPhase.ARRIVING:
            slot = self.registry.claim_random(agent.agent_id, agent.rng)
            if slot is None:
                logger.debug(f"{agent.callsign}: no free parking slot, waiting")
                return None
            self._park(agent, slot)
            return ParkingPhase.PARKED

        if phase is ParkingPhase.PARKED:
            agent.dwell_remaining -= 1
            if agent.dwell_remaining <= 0:
                agent.parking_phase = ParkingPhase.DEPARTING
                return ParkingPhase.DEPARTING
            return None

        if phase is ParkingPhase.DEPARTING:
            self._depart(agent)
            return ParkingPhase.EN_ROUTE
        return None

    def _park(self, agent, slot: ParkingSlot) -> None:
        dwell = agent.rng.randint(*self.dwell_ticks)
        agent.park(slot.slot_id, dwell, slot.position)
        logger.info(f"{agent.callsign} parked at {slot.slot_id} for {dwell} ticks")

    def _depart(self, agent) -> None:
        slot_id = agent.parked_slot_id
        if slot_id is not None:
            self.registry.release(slot_id, agent.agent_id)
        destination = self.terrain.random_land_point(agent.rng)
        heading = compass_direction(agent.position, destination)
        agent.depart(destination)
        logger.info(f"{agent.callsign} departing {slot_id}, heading {heading} to "
                    f"({destination.x:.0f}, {destination.y:.0f})")

    def _complete_emergency_landing(self, agent) -> Optional[ParkingPhase]:
        slot_id = agent.landing_slot_id
        if slot_id is None or agent.detour_queue:
            return None

        slot = self.registry.get(slot_id)
        if distance(agent.position, slot.position) >= FlightConstants.ARRIVAL_EPSILON:
            return None

        if not self.registry.claim(slot_id, agent.agent_id):
            # Lost the race; the emergency handler reassigns next tick
            logger.warning(f"{agent.callsign}: slot {slot_id} taken before landing, reassigning")
            agent.landing_slot_id = None
            return None

        self._park(agent, slot)
        logger.info(f"{agent.callsign} emergency landing complete at {slot_id}")
        return ParkingPhase.PARKED

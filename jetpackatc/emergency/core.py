# jetpackatc/emergency/core.py
"""
Emergency landing handler. Runs after the collision sweep each tick and takes
over agents that were halted by an accident, asked to land by radio, or are
still waiting for a free slot.

Procedure:
    1. Provisional landing point: the agent's position, or the nearest land
       from the terrain spiral search if it is over water. Search exhaustion
       falls back per LandFallbackPolicy.
    2. Nearest unoccupied slot to the provisional point.
    3. Route = [provisional point (if not already there), slot] on the detour
       queue, status EMERGENCY_LANDING. The parking lifecycle claims the slot
       on arrival.
With no slot available the agent flies to (or holds at) the provisional point
and is re-evaluated every tick.
"""
import logging
import random
from typing import List, Optional, Tuple

from ..flight.constants import FlightConstants
from ..flight.data_models import FlightStatus
from ..terrain.exceptions import LandNotFoundError
from ..utils.geometry import Point, clamp, distance
from .constants import EmergencyConstants, LandFallbackPolicy
from .data_models import LandingPlan

logger = logging.getLogger(__name__)

class EmergencyHandler:
    def __init__(self, terrain, registry,
                 fallback: LandFallbackPolicy = EmergencyConstants.DEFAULT_FALLBACK,
                 max_search_radius: Optional[float] = None,
                 max_slot_distance: Optional[float] = None):
        self.terrain = terrain
        self.registry = registry
        self.fallback = fallback
        self.max_search_radius = max_search_radius
        self.max_slot_distance = max_slot_distance
        logger.info(f"EmergencyHandler initialized (land fallback: {fallback.value})")

    @staticmethod
    def needs_attention(agent) -> bool:
        if agent.is_parked:
            return False
        if agent.status == FlightStatus.EMERGENCY_HALT or agent.emergency_requested:
            return True
        return agent.status == FlightStatus.EMERGENCY_LANDING and agent.landing_slot_id is None

    def process(self, agents) -> List[LandingPlan]:
        plans = []
        for agent in agents:
            if agent.is_parked and agent.emergency_requested:
                # Already on the ground
                agent.emergency_requested = False
                continue
            if self.needs_attention(agent):
                plans.append(self.handle(agent))
        return plans

    def provisional_landing_point(self, position: Point) -> Tuple[Point, bool]:
        """Returns (point, used_fallback)."""
        if not self.terrain.is_water(position):
            return position, False
        try:
            return self.terrain.find_nearest_land(position, self.max_search_radius), False
        except LandNotFoundError as e:
            point = self.terrain.center if self.fallback is LandFallbackPolicy.MAP_CENTER else position
            logger.warning(f"{e}; applying {self.fallback.value} fallback, "
                           f"landing at ({point.x:.0f}, {point.y:.0f})")
            return point, True

    def handle(self, agent) -> LandingPlan:
        retry = (agent.status == FlightStatus.EMERGENCY_LANDING and not agent.emergency_requested
                 and agent.landing_point is not None)
        at_landing_point = (agent.landing_point is not None and
                            distance(agent.position, agent.landing_point) < FlightConstants.ARRIVAL_EPSILON)

        if retry and (agent.detour_queue or at_landing_point):
            provisional, used_fallback = agent.landing_point, False
        else:
            provisional, used_fallback = self.provisional_landing_point(agent.position)

        slot = self.registry.nearest_unoccupied(provisional, self.max_slot_distance)

        route = []
        if distance(agent.position, provisional) >= FlightConstants.ARRIVAL_EPSILON:
            route.append(provisional)
        if slot is not None:
            route.append(slot.position)

        reason = agent.emergency_reason or "collision"
        agent.begin_emergency_landing(route, provisional, slot.slot_id if slot else None)

        if slot is not None:
            logger.warning(f"{agent.callsign}: EMERGENCY LANDING ({reason}) at {slot.slot_id} "
                           f"via ({provisional.x:.0f}, {provisional.y:.0f})")
        elif not retry:
            logger.warning(f"{agent.callsign}: EMERGENCY LANDING ({reason}), no free slot, "
                           f"holding at ({provisional.x:.0f}, {provisional.y:.0f})")

        return LandingPlan(
            agent_id=agent.agent_id,
            provisional_point=provisional,
            route=tuple(route),
            slot_id=slot.slot_id if slot else None,
            used_fallback=used_fallback,
            retry=retry,
        )

    def generate_evasive_detour(self, agent, rng: Optional[random.Random] = None) -> List[Point]:
        """A random sidestep of up to EVASIVE_OFFSET on each axis, then back to the destination."""
        rng = rng or agent.rng
        offset = EmergencyConstants.EVASIVE_OFFSET
        margin = self.terrain.edge_margin
        sidestep = Point(
            clamp(agent.position.x + rng.uniform(-offset, offset), margin, self.terrain.width - margin - 1),
            clamp(agent.position.y + rng.uniform(-offset, offset), margin, self.terrain.height - margin - 1),
        )
        return [sidestep, agent.destination]

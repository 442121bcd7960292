# jetpackatc/detection/core.py
"""
Pairwise collision sweep. Runs once per tick after all agents have moved and
classifies every unordered pair of airborne agents into a proximity tier.
Accident-tier pairs produce an AccidentRecord and halt both agents; the other
tiers are only reported.
"""
import logging
import time
from typing import Callable, FrozenSet, List, Optional, Set

from ..flight.data_models import FlightStatus
from ..utils.geometry import distance, midpoint
from .constants import DetectionConstants, ProximityTier
from .data_models import AccidentRecord, ProximityAlert
from .registry import AccidentRegistry

logger = logging.getLogger(__name__)

def tier_for_distance(d: float) -> ProximityTier:
    if d < DetectionConstants.ACCIDENT_DISTANCE:
        return ProximityTier.ACCIDENT
    if d < DetectionConstants.CRITICAL_DISTANCE:
        return ProximityTier.CRITICAL
    if d < DetectionConstants.WARNING_DISTANCE:
        return ProximityTier.WARNING
    return ProximityTier.CLEAR


class CollisionDetector:
    def __init__(self, registry: Optional[AccidentRegistry] = None,
                 event_sink: Optional[Callable[[ProximityAlert], None]] = None,
                 clock: Callable[[], float] = time.time):
        self.registry = registry if registry is not None else AccidentRegistry()
        self.event_sink = event_sink
        self.clock = clock
        self.last_alerts: List[ProximityAlert] = []
        self._accident_counter = 0

    @staticmethod
    def classify(a, b) -> ProximityTier:
        """Tier of a pair from separation alone; symmetric in (a, b)."""
        return tier_for_distance(distance(a.position, b.position))

    def sweep(self, agents, tick: int = 0) -> List[AccidentRecord]:
        """
        O(n^2) sweep over non-parked agents in ascending id order.

        An agent halted earlier in this sweep is never part of a second accident
        in it, and a pair still in the aftermath of its own active record (both
        carrying accident_hazard) is not recorded again. Such pairs are reported
        at the critical tier instead. Any other pair under the accident distance
        is a new accident, even if one side is already making an emergency landing.
        """
        participants = sorted((a for a in agents if a.status != FlightStatus.PARKED),
                              key=lambda a: a.agent_id)
        recorded_pairs = self._active_pairs()
        halted_ids = set()
        records: List[AccidentRecord] = []
        alerts: List[ProximityAlert] = []

        for i, a in enumerate(participants):
            for b in participants[i + 1:]:
                d = distance(a.position, b.position)
                tier = tier_for_distance(d)
                if tier is ProximityTier.CLEAR:
                    continue

                if tier is ProximityTier.ACCIDENT:
                    pair = frozenset((a.agent_id, b.agent_id))
                    already_involved = (a.agent_id in halted_ids or b.agent_id in halted_ids or
                                        (pair in recorded_pairs and
                                         a.hazards.accident_hazard and b.hazards.accident_hazard))
                    if not already_involved:
                        records.append(self._record_accident(a, b, d, tick))
                        halted_ids.update((a.agent_id, b.agent_id))
                        continue
                    tier = ProximityTier.CRITICAL

                alerts.append(self._report_proximity(tier, a, b, d))

        self.last_alerts = alerts
        return records

    def _active_pairs(self) -> Set[FrozenSet[int]]:
        return {frozenset(record.agent_ids) for record in self.registry.active()}

    def _record_accident(self, a, b, d: float, tick: int) -> AccidentRecord:
        self._accident_counter += 1
        record = AccidentRecord(
            accident_id=f"ACC-{tick}-{self._accident_counter}",
            position=midpoint(a.position, b.position),
            severity=DetectionConstants.ACCIDENT_SEVERITY,
            timestamp=self.clock(),
            tick=tick,
            agent_ids=(a.agent_id, b.agent_id),
            description=f"Mid-air collision between {a.callsign} and {b.callsign}",
            accident_type=DetectionConstants.ACCIDENT_TYPE,
        )
        for agent in (a, b):
            agent.hazards.accident_hazard = True
            agent.halt(f"collision ({record.accident_id})")
        self.registry.report(record)
        logger.error(f"ACCIDENT {record.accident_id}: {a.callsign} and {b.callsign} at "
                     f"({record.position.x:.0f}, {record.position.y:.0f}), separation {d:.1f}")
        return record

    def _report_proximity(self, tier: ProximityTier, a, b, d: float) -> ProximityAlert:
        alert = ProximityAlert(tier, (a.agent_id, b.agent_id), (a.callsign, b.callsign), d)
        if tier is ProximityTier.CRITICAL:
            logger.warning(f"CRITICAL proximity: {a.callsign} and {b.callsign} at {d:.1f} units")
        else:
            logger.debug(f"Proximity warning: {a.callsign} and {b.callsign} at {d:.1f} units")
        if self.event_sink is not None:
            self.event_sink(alert)
        return alert

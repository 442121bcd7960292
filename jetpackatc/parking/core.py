# jetpackatc/parking/core.py
"""
Parking slot registry. All occupancy changes go through claim/claim_random/
release, which are serialised by a single lock so two agents can never hold
the same slot.
"""
import logging
import random
import threading
from dataclasses import replace
from typing import Iterable, List, Optional

from ..utils.geometry import Point, distance
from .constants import ParkingConstants
from .data_models import OccupancySummary, ParkingSlot
from .exceptions import SlotNotFoundError

logger = logging.getLogger(__name__)

class ParkingRegistry:
    def __init__(self, slots: Iterable[ParkingSlot]):
        self._slots = {slot.slot_id: slot for slot in slots}
        self._lock = threading.Lock()
        logger.info(f"ParkingRegistry initialized with {len(self._slots)} slots")

    def _lookup(self, slot_id: str) -> ParkingSlot:
        try:
            return self._slots[slot_id]
        except KeyError:
            raise SlotNotFoundError(slot_id) from None

    def slots(self) -> List[ParkingSlot]:
        """Copies of every slot; mutating them does not touch the registry."""
        with self._lock:
            return [replace(slot) for slot in self._slots.values()]

    def get(self, slot_id: str) -> ParkingSlot:
        with self._lock:
            return replace(self._lookup(slot_id))

    def claim(self, slot_id: str, agent_id: int) -> bool:
        """Claims a specific slot. False when someone else holds it."""
        with self._lock:
            slot = self._lookup(slot_id)
            if slot.occupied:
                return slot.occupant == agent_id
            slot.occupant = agent_id
            return True

    def claim_random(self, agent_id: int, rng: random.Random) -> Optional[ParkingSlot]:
        """Claims a uniformly random free slot, or returns None when the lot is full."""
        with self._lock:
            free = [slot for slot in self._slots.values() if not slot.occupied]
            if not free:
                return None
            slot = rng.choice(free)
            slot.occupant = agent_id
            return replace(slot)

    def release(self, slot_id: str, agent_id: int) -> bool:
        with self._lock:
            slot = self._lookup(slot_id)
            if slot.occupant != agent_id:
                logger.warning(f"Agent {agent_id} tried to release {slot_id} held by {slot.occupant}")
                return False
            slot.occupant = None
            return True

    def nearest_unoccupied(self, point: Point, max_distance: Optional[float] = None) -> Optional[ParkingSlot]:
        """Linear nearest-neighbour scan over free slots, optionally bounded by max_distance."""
        best, best_distance = None, float('inf')
        with self._lock:
            for slot in self._slots.values():
                if slot.occupied:
                    continue
                d = distance(point, slot.position)
                if d < best_distance and (max_distance is None or d <= max_distance):
                    best, best_distance = slot, d
            return replace(best) if best is not None else None

    def available_count(self) -> int:
        with self._lock:
            return sum(1 for slot in self._slots.values() if not slot.occupied)

    def occupancy(self) -> OccupancySummary:
        total = len(self._slots)
        available = self.available_count()
        occupied = total - available
        percent = (occupied / total * 100.0) if total else 0.0

        status = ParkingConstants.OCCUPANCY_FULL_LABEL
        for limit, label in ParkingConstants.OCCUPANCY_LEVELS:
            if percent < limit:
                status = label
                break
        return OccupancySummary(total, occupied, available, percent, status)

    def __len__(self) -> int:
        return len(self._slots)

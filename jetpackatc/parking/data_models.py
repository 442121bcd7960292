# jetpackatc/parking/data_models.py
from dataclasses import dataclass
from typing import Optional

from ..utils.geometry import Point

@dataclass
class ParkingSlot:
    slot_id: str
    position: Point
    occupant: Optional[int] = None

    @property
    def occupied(self) -> bool:
        return self.occupant is not None

@dataclass(frozen=True)
class OccupancySummary:
    total: int
    occupied: int
    available: int
    percent_occupied: float
    status: str

# jetpackatc/emergency/data_models.py
from dataclasses import dataclass
from typing import Optional, Tuple

from ..utils.geometry import Point

@dataclass(frozen=True)
class LandingPlan:
    """Outcome of one emergency-handler evaluation for an agent."""
    agent_id: int
    provisional_point: Point
    route: Tuple[Point, ...]
    slot_id: Optional[str] = None
    used_fallback: bool = False
    retry: bool = False

    @property
    def waiting(self) -> bool:
        return self.slot_id is None

# jetpackatc/detection/data_models.py
from dataclasses import dataclass
from typing import Tuple

from ..utils.geometry import Point
from .constants import ProximityTier

@dataclass(frozen=True)
class AccidentRecord:
    """
    An accident created by the collision sweep. Records are never edited in
    place: deactivation swaps in a copy with `active` cleared.
    """
    accident_id: str
    position: Point
    severity: str
    timestamp: float
    tick: int
    agent_ids: Tuple[int, int]
    description: str
    accident_type: str = "COLLISION"
    active: bool = True

@dataclass(frozen=True)
class ProximityAlert:
    tier: ProximityTier
    agent_ids: Tuple[int, int]
    callsigns: Tuple[str, str]
    distance: float

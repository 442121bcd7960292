# jetpackatc/parking/generator.py
import logging
import random
from typing import List, Optional

from ..constants import CityDefaults
from ..utils.geometry import Point
from .constants import ParkingConstants
from .data_models import ParkingSlot
from .exceptions import SlotGenerationError

logger = logging.getLogger(__name__)

def generate_slots(terrain, count: int = ParkingConstants.DEFAULT_SLOT_COUNT,
                   city: str = CityDefaults.DEFAULT_CITY, rng: Optional[random.Random] = None,
                   margin: float = ParkingConstants.SLOT_MARGIN) -> List[ParkingSlot]:
    """
    Samples up to `count` slots uniformly on land inside `margin`. Gives up
    after count * MAX_ATTEMPTS_FACTOR draws, so a mostly-water map may yield
    fewer slots than asked for.
    """
    if count < 0:
        raise SlotGenerationError(f"Slot count must be non-negative, got {count}")
    if 2 * margin >= min(terrain.width, terrain.height):
        raise SlotGenerationError(f"Margin {margin} leaves no room on a {terrain.width}x{terrain.height} map")

    rng = rng or random.Random()
    code = CityDefaults.code_for(city)
    slots: List[ParkingSlot] = []
    attempts = 0
    max_attempts = count * ParkingConstants.MAX_ATTEMPTS_FACTOR

    while len(slots) < count and attempts < max_attempts:
        attempts += 1
        candidate = Point(rng.uniform(margin, terrain.width - margin),
                          rng.uniform(margin, terrain.height - margin))
        if terrain.is_water(candidate):
            continue
        slots.append(ParkingSlot(f"{code}-P{len(slots) + 1:03d}", candidate))

    if len(slots) < count:
        logger.warning(f"Only placed {len(slots)}/{count} parking slots for {city} after {attempts} attempts")
    else:
        logger.info(f"Generated {len(slots)} parking slots for {city}")
    return slots

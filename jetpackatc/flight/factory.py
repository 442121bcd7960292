# jetpackatc/flight/factory.py
"""
Fleet generation. Jetpack registrations cycle through per-city naming tables;
agents are spawned on random land with a random land destination.
"""
import logging
import random
from typing import List, Optional

from ..constants import CityDefaults, SimulationConstants
from .constants import FleetConstants, FlightConstants
from .core import FlightAgent
from .data_models import Jetpack
from .exceptions import InvalidFlightParametersError

logger = logging.getLogger(__name__)

class FleetFactory:
    def __init__(self, city: str = CityDefaults.DEFAULT_CITY):
        self.city = city
        self.prefix = CityDefaults.code_for(city)
        self.callsigns = FleetConstants.CALLSIGNS.get(city, FleetConstants.DEFAULT_CALLSIGNS)
        self.models = FleetConstants.MODELS.get(city, FleetConstants.DEFAULT_MODELS)
        self.manufacturers = FleetConstants.MANUFACTURERS.get(city, FleetConstants.DEFAULT_MANUFACTURERS)

    def generate_jetpacks(self, count: int) -> List[Jetpack]:
        if count < 0 or count > SimulationConstants.MAX_FLEET_SIZE:
            raise InvalidFlightParametersError(
                f"Fleet size must be between 0 and {SimulationConstants.MAX_FLEET_SIZE}, got {count}")

        owners = FleetConstants.OWNERS
        years = FleetConstants.YEARS
        jetpacks = []
        for i in range(count):
            number = i + 1
            jetpacks.append(Jetpack(
                serial_number=f"{self.prefix}-{number:03d}",
                callsign=f"{self.callsigns[i % len(self.callsigns)]}-{number:02d}",
                owner_name=f"{owners[i % len(owners)]} #{i // len(owners) + 1}",
                year=years[i % len(years)],
                model=self.models[i % len(self.models)],
                manufacturer=self.manufacturers[i % len(self.manufacturers)],
            ))
        return jetpacks

    def create_fleet(self, count: int, terrain, base_speed: float = FlightConstants.DEFAULT_BASE_SPEED,
                     seed: Optional[int] = None) -> List[FlightAgent]:
        """
        Builds `count` agents with ids 1..count. Each agent gets its own RNG,
        seeded from `seed` and its id when a seed is given.
        """
        placement_rng = random.Random(seed)
        agents = []
        for agent_id, jetpack in enumerate(self.generate_jetpacks(count), start=1):
            rng = random.Random(seed + agent_id) if seed is not None else random.Random()
            agents.append(FlightAgent(
                agent_id=agent_id,
                jetpack=jetpack,
                position=terrain.random_land_point(placement_rng),
                destination=terrain.random_land_point(placement_rng),
                base_speed=base_speed,
                altitude=rng.uniform(*FlightConstants.INITIAL_ALTITUDE_RANGE),
                rng=rng,
            ))
        logger.info(f"Created fleet of {len(agents)} jetpacks for {self.city}")
        return agents

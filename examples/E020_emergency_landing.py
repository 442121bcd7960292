#!/usr/bin/env python3
"""
Emergency landing demonstration over water: a jetpack over a river is told to
land, and the handler routes it to the nearest bank before the parking slot.
"""
import sys
import logging
import random
from pathlib import Path

import numpy as np

# Ensure the root of the project is in the Python path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from jetpackatc.flight import FlightAgent, FleetFactory
from jetpackatc.parking import ParkingSlot
from jetpackatc.simulation import Simulation, SimulationConfig
from jetpackatc.terrain import RasterSurface
from jetpackatc.utils.geometry import Point

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

def build_river_map(width: int = 1000, height: int = 800) -> np.ndarray:
    """RGB raster with a 200-unit river running north-south through the middle."""
    image = np.full((height, width, 3), (90, 160, 90), dtype=np.uint8)
    image[:, 400:600] = (30, 80, 200)
    return image

def run_emergency_demo():
    config = SimulationConfig(city="Boston", fleet_size=1, seed=21)
    jetpack = FleetFactory("Boston").generate_jetpacks(1)[0]
    agent = FlightAgent(1, jetpack, Point(450, 400), Point(900, 400), base_speed=4.0,
                        rng=random.Random(21))
    slots = [ParkingSlot("BOS-P001", Point(300, 420)), ParkingSlot("BOS-P002", Point(700, 100))]

    surface = RasterSurface.from_rgb(build_river_map())
    print(f"Water coverage: {surface.water_fraction():.0%}")

    with Simulation(config, surface=surface, agents=[agent], slots=slots) as sim:
        sim.gateway.issue_emergency_landing(1, "Engine failure over the river")
        for _ in range(100):
            snapshot = sim.step()
            view = snapshot.agent(1)
            if snapshot.tick % 10 == 0 or view.slot_id:
                print(f"tick {snapshot.tick:>3}  ({view.position.x:6.1f}, {view.position.y:6.1f})  "
                      f"{view.status.value:<18} slot={view.slot_id}")
            if view.slot_id:
                break

if __name__ == "__main__":
    run_emergency_demo()

#!/usr/bin/env python3
"""
City simulation demonstration: a seeded New York fleet flying for one minute
of simulated time with random radio traffic and a mid-run storm.
"""
import sys
import logging
from collections import Counter
from pathlib import Path

# Ensure the root of the project is in the Python path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from jetpackatc.simulation import Simulation, SimulationConfig, EventKind

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

CONFIG_PATH = Path(__file__).parent / "city_config.json"
TOTAL_TICKS = 1200   # 60 s at 20 Hz
STORM_TICK = 400

def run_city_demo():
    config = SimulationConfig.from_json(CONFIG_PATH)
    event_counts = Counter()

    with Simulation(config) as sim:
        sim.subscribe_events(lambda event: event_counts.update([event.kind]))

        print(sim.weather.broadcast())
        for _ in range(TOTAL_TICKS):
            if sim.tick == STORM_TICK:
                sim.weather.change_weather("Severe Thunderstorm", sim.tick)
                print("\n" + sim.weather.broadcast())
            sim.step()

        snapshot = sim.latest_snapshot

    print(f"\n{'='*15} Summary after {snapshot.tick} ticks {'='*15}")
    statuses = Counter(view.status.value for view in snapshot.agents.values())
    for status, count in sorted(statuses.items()):
        print(f"  {status:<22} {count}")
    parking = snapshot.parking
    print(f"  Parking: {parking.occupied}/{parking.total} occupied ({parking.status})")
    print(f"  Accidents: {len(snapshot.accidents)} recorded, {len(snapshot.active_accidents)} active")
    for kind in EventKind:
        if event_counts[kind]:
            print(f"  {kind.value:<22} {event_counts[kind]} events")

if __name__ == "__main__":
    run_city_demo()

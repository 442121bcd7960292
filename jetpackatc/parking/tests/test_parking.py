# jetpackatc/parking/tests/test_parking.py
import random
import threading
import unittest
from unittest.mock import MagicMock

import pytest

from jetpackatc.flight import FlightAgent, Jetpack, FlightStatus, ParkingPhase
from jetpackatc.parking import (ParkingRegistry, ParkingSlot, ParkingLifecycle, generate_slots,
                                SlotNotFoundError, SlotGenerationError)
from jetpackatc.terrain import TerrainOracle, FunctionSurface
from jetpackatc.utils.geometry import Point

def make_agent(agent_id=1, position=Point(0, 0), destination=Point(100, 0), base_speed=5.0):
    jetpack = Jetpack(f"BOS-{agent_id:03d}", f"PATRIOT-{agent_id:02d}", "Sarah #1", "2022",
                      "FreedomFlyer", "LibertyCorp")
    return FlightAgent(agent_id, jetpack, position, destination, base_speed=base_speed,
                       rng=random.Random(agent_id))

def make_registry(n=3):
    return ParkingRegistry([ParkingSlot(f"BOS-P{i:03d}", Point(100.0 * i, 50.0)) for i in range(1, n + 1)])

# --- Registry ---

def test_claim_is_exclusive():
    registry = make_registry()
    assert registry.claim("BOS-P001", 1)
    assert not registry.claim("BOS-P001", 2)
    assert registry.get("BOS-P001").occupant == 1

def test_release_only_by_occupant():
    registry = make_registry()
    registry.claim("BOS-P002", 1)
    assert not registry.release("BOS-P002", 2)
    assert registry.release("BOS-P002", 1)
    assert not registry.get("BOS-P002").occupied

def test_unknown_slot_raises():
    with pytest.raises(SlotNotFoundError):
        make_registry().claim("NYC-P999", 1)

def test_claim_random_until_full():
    registry = make_registry(3)
    rng = random.Random(5)
    claimed = {registry.claim_random(agent_id, rng).slot_id for agent_id in (1, 2, 3)}
    assert claimed == {"BOS-P001", "BOS-P002", "BOS-P003"}
    assert registry.claim_random(4, rng) is None

def test_nearest_unoccupied_skips_taken_and_respects_bound():
    registry = make_registry(3)
    registry.claim("BOS-P001", 9)
    assert registry.nearest_unoccupied(Point(90, 50)).slot_id == "BOS-P002"
    assert registry.nearest_unoccupied(Point(90, 50), max_distance=50) is None

def test_returned_slots_are_copies():
    registry = make_registry()
    registry.slots()[0].occupant = 42
    assert not registry.get("BOS-P001").occupied

@pytest.mark.parametrize("taken, label", [(0, "AVAILABLE"), (9, "AVAILABLE"), (10, "FILLING_UP"),
                                          (15, "FILLING_UP"), (16, "NEARLY_FULL"), (19, "CRITICAL"),
                                          (20, "CRITICAL")])
def test_occupancy_labels(taken, label):
    registry = make_registry(20)
    for i in range(1, taken + 1):
        registry.claim(f"BOS-P{i:03d}", i)
    summary = registry.occupancy()
    assert summary.status == label
    assert summary.available == 20 - taken

def test_concurrent_claims_have_one_winner():
    for _ in range(50):
        registry = make_registry(1)
        barrier = threading.Barrier(2)
        results = {}

        def attempt(agent_id):
            barrier.wait()
            results[agent_id] = registry.claim("BOS-P001", agent_id)

        threads = [threading.Thread(target=attempt, args=(agent_id,)) for agent_id in (1, 2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert sorted(results.values()) == [False, True]

# --- Generator ---

def test_generated_slots_avoid_water():
    # Left half of the map is water
    terrain = TerrainOracle(FunctionSurface(lambda x, y: x < 500), 1000, 800, edge_margin=10)
    slots = generate_slots(terrain, count=50, city="Houston", rng=random.Random(2))
    assert len(slots) == 50
    assert slots[0].slot_id == "HOU-P001"
    assert all(slot.position.x >= 500 for slot in slots)
    assert all(10 <= slot.position.y <= 790 for slot in slots)

def test_generator_gives_up_on_all_water():
    terrain = TerrainOracle(FunctionSurface(lambda x, y: True), 1000, 800)
    assert generate_slots(terrain, count=10, rng=random.Random(1)) == []

def test_generator_rejects_oversized_margin():
    terrain = TerrainOracle(FunctionSurface(lambda x, y: False), 100, 100)
    with pytest.raises(SlotGenerationError):
        generate_slots(terrain, count=5, margin=60)

# --- Lifecycle ---

class TestParkingLifecycle(unittest.TestCase):
    def setUp(self):
        self.registry = make_registry(2)
        self.terrain = MagicMock()
        self.terrain.random_land_point.return_value = Point(400, 300)
        self.lifecycle = ParkingLifecycle(self.registry, self.terrain, dwell_ticks=(3, 3))

    def test_routine_flight_parks_after_twenty_ticks(self):
        agent = make_agent()
        for _ in range(20):
            agent.advance()
            self.lifecycle.update(agent)
        self.assertEqual(agent.status, FlightStatus.PARKED)
        self.assertEqual(agent.parking_phase, ParkingPhase.PARKED)
        self.assertEqual(self.registry.occupancy().occupied, 1)

    def test_parked_agent_sits_on_its_slot(self):
        registry = ParkingRegistry([ParkingSlot("NYC-P001", Point(900, 700))])
        lifecycle = ParkingLifecycle(registry, self.terrain, dwell_ticks=(3, 3))
        agent = make_agent()
        for _ in range(20):
            agent.advance()
            lifecycle.update(agent)
        self.assertEqual(agent.parked_slot_id, "NYC-P001")
        self.assertEqual(agent.position, Point(900, 700))
        self.assertEqual(agent.snapshot().position, registry.get("NYC-P001").position)

        agent.advance()
        self.assertEqual(agent.position, Point(900, 700))

    def test_full_cycle_returns_to_en_route(self):
        agent = make_agent()
        agent.parking_phase = ParkingPhase.ARRIVING
        self.assertEqual(self.lifecycle.update(agent), ParkingPhase.PARKED)
        slot_id = agent.parked_slot_id

        phases = [self.lifecycle.update(agent) for _ in range(3)]
        self.assertEqual(phases, [None, None, ParkingPhase.DEPARTING])
        self.assertEqual(self.lifecycle.update(agent), ParkingPhase.EN_ROUTE)

        self.assertEqual(agent.status, FlightStatus.ACTIVE)
        self.assertEqual(agent.destination, Point(400, 300))
        self.assertFalse(self.registry.get(slot_id).occupied)

    def test_arriving_waits_when_lot_is_full(self):
        self.registry.claim("BOS-P001", 98)
        self.registry.claim("BOS-P002", 99)
        agent = make_agent()
        agent.parking_phase = ParkingPhase.ARRIVING
        self.assertIsNone(self.lifecycle.update(agent))
        self.assertEqual(agent.parking_phase, ParkingPhase.ARRIVING)
        self.registry.release("BOS-P002", 99)
        self.assertEqual(self.lifecycle.update(agent), ParkingPhase.PARKED)
        self.assertEqual(agent.parked_slot_id, "BOS-P002")

    def test_parked_agent_does_not_move(self):
        agent = make_agent()
        agent.parking_phase = ParkingPhase.ARRIVING
        self.lifecycle.update(agent)
        before = agent.position
        agent.advance()
        self.assertEqual(agent.position, before)
        self.assertEqual(agent.effective_speed, 0.0)

    def test_emergency_landing_claims_routed_slot(self):
        agent = make_agent(position=Point(100, 50))
        agent.hazards.accident_hazard = True
        agent.begin_emergency_landing([], Point(100, 50), "BOS-P001")
        self.assertEqual(self.lifecycle.update(agent), ParkingPhase.PARKED)
        self.assertEqual(agent.parked_slot_id, "BOS-P001")
        self.assertFalse(agent.hazards.accident_hazard)

    def test_emergency_landing_lost_race_clears_assignment(self):
        self.registry.claim("BOS-P001", 77)
        agent = make_agent(position=Point(100, 50))
        agent.begin_emergency_landing([], Point(100, 50), "BOS-P001")
        self.assertIsNone(self.lifecycle.update(agent))
        self.assertIsNone(agent.landing_slot_id)
        self.assertEqual(agent.status, FlightStatus.EMERGENCY_LANDING)

if __name__ == '__main__':
    unittest.main()

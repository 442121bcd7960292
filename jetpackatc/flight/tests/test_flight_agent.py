# jetpackatc/flight/tests/test_flight_agent.py
import random
import unittest
from unittest.mock import MagicMock

from jetpackatc.flight import (FlightAgent, FleetFactory, Jetpack, FlightStatus, ParkingPhase,
                               FlightConstants, InvalidFlightParametersError)
from jetpackatc.utils.geometry import Point

class TestFlightAgent(unittest.TestCase):
    def setUp(self):
        self.jetpack = Jetpack("NYC-001", "ALPHA-01", "John #1", "2022", "SkyRider X1", "AeroTech")
        self.agent = FlightAgent(1, self.jetpack, Point(100, 100), Point(300, 100),
                                 base_speed=2.0, altitude=100.0, rng=random.Random(1))

    def test_negative_speed_rejected(self):
        with self.assertRaises(InvalidFlightParametersError):
            FlightAgent(2, self.jetpack, Point(0, 0), Point(1, 1), base_speed=-1.0)

    def test_altitude_drifts_to_radio_altitude(self):
        self.agent.set_radio_altitude(110, "climb")
        for _ in range(3):
            self.agent.advance()
        self.assertAlmostEqual(self.agent.altitude, 109.0)
        self.agent.advance()
        self.assertEqual(self.agent.altitude, 110.0)
        self.assertIsNone(self.agent.radio_altitude)
        self.assertEqual(self.agent.status, FlightStatus.ACTIVE)

    def test_altitude_stays_clamped(self):
        self.agent.altitude = 199.5
        for _ in range(200):
            self.agent.advance()
            self.assertGreaterEqual(self.agent.altitude, 50.0)
            self.assertLessEqual(self.agent.altitude, 200.0)

    def test_trail_keeps_last_fifteen_newest_first(self):
        for _ in range(20):
            self.agent.advance()
        self.assertEqual(len(self.agent.trail), 15)
        self.assertEqual(self.agent.trail[0], self.agent.position)
        self.assertLess(self.agent.trail[-1].x, self.agent.trail[0].x)

    def test_emergency_request_is_pending_until_handled(self):
        self.agent.request_emergency_landing("engine trouble")
        self.assertTrue(self.agent.emergency_requested)
        self.assertEqual(self.agent.status, FlightStatus.ACTIVE)

    def test_begin_emergency_landing_lifts_halt_and_drops_radio(self):
        self.agent.set_radio_destination(Point(500, 500), "direct")
        self.agent.add_waypoint(Point(10, 10))
        self.agent.hazards.accident_hazard = True
        self.agent.halt("collision")
        self.agent.begin_emergency_landing([Point(120, 100), Point(150, 100)], Point(120, 100), "NYC-P3")
        self.assertEqual(self.agent.status, FlightStatus.EMERGENCY_LANDING)
        self.assertFalse(self.agent.hazards.emergency_halt)
        self.assertTrue(self.agent.hazards.accident_hazard)
        self.assertIsNone(self.agent.radio_destination)
        self.assertFalse(self.agent.waypoint_queue)
        self.assertEqual(self.agent.landing_slot_id, "NYC-P3")

    def test_park_clears_hazards(self):
        self.agent.hazards.accident_hazard = True
        self.agent.hazards.emergency_halt = True
        self.agent.park("NYC-P1", 20)
        self.assertTrue(self.agent.is_parked)
        self.assertEqual(self.agent.parking_phase, ParkingPhase.PARKED)
        self.assertFalse(self.agent.hazards.accident_hazard)
        self.assertFalse(self.agent.hazards.emergency_halt)

    def test_snapshot_does_not_alias_state(self):
        self.agent.advance()
        snap = self.agent.snapshot()
        self.agent.advance()
        self.assertNotEqual(snap.position, self.agent.position)
        self.assertIsInstance(snap.trail, tuple)
        self.assertEqual(snap.callsign, "ALPHA-01")


class TestFleetFactory(unittest.TestCase):
    def test_new_york_naming(self):
        jetpacks = FleetFactory("New York").generate_jetpacks(12)
        self.assertEqual(jetpacks[0].callsign, "ALPHA-01")
        self.assertEqual(jetpacks[0].serial_number, "NYC-001")
        self.assertEqual(jetpacks[10].callsign, "ALPHA-11")
        self.assertEqual(jetpacks[10].owner_name, "John #2")
        self.assertEqual(jetpacks[1].model, "MetroFlyer Pro")
        self.assertEqual(jetpacks[3].manufacturer, "AeroTech")
        self.assertEqual(jetpacks[2].year, "2024")

    def test_unknown_city_uses_generic_tables(self):
        jetpack = FleetFactory("Springfield").generate_jetpacks(1)[0]
        self.assertEqual(jetpack.model, "GenericJet Pro")
        self.assertEqual(jetpack.serial_number, "SPR-001")

    def test_fleet_size_bounds(self):
        with self.assertRaises(InvalidFlightParametersError):
            FleetFactory().generate_jetpacks(101)

    def test_create_fleet_places_agents_on_terrain(self):
        terrain = MagicMock()
        terrain.random_land_point.return_value = Point(50, 60)
        agents = FleetFactory("Boston").create_fleet(3, terrain, base_speed=3.0, seed=42)
        self.assertEqual([a.agent_id for a in agents], [1, 2, 3])
        self.assertEqual(agents[0].callsign, "PATRIOT-01")
        self.assertEqual(terrain.random_land_point.call_count, 6)
        self.assertTrue(all(a.base_speed == 3.0 for a in agents))
        low, high = FlightConstants.INITIAL_ALTITUDE_RANGE
        self.assertTrue(all(low <= a.altitude <= high for a in agents))

    def test_seeded_fleets_are_reproducible(self):
        terrain = MagicMock()
        terrain.random_land_point.return_value = Point(0, 0)
        first = FleetFactory().create_fleet(5, terrain, seed=9)
        second = FleetFactory().create_fleet(5, terrain, seed=9)
        self.assertEqual([a.altitude for a in first], [a.altitude for a in second])

if __name__ == '__main__':
    unittest.main()

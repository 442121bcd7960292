# jetpackatc/radio/tests/test_radio.py
import random
import unittest
from unittest.mock import MagicMock

from jetpackatc.flight import FlightAgent, Jetpack, FlightStatus
from jetpackatc.radio import (InstructionGateway, InstructionSink, RadioDispatcher,
                              InstructionRejectedError, InstructionKind)
from jetpackatc.utils.geometry import Point
from jetpackatc.weather import WeatherModel

def make_agent(agent_id, position=Point(500, 400)):
    jetpack = Jetpack(f"HOU-{agent_id:03d}", f"ROCKET-{agent_id:02d}", "Emily #1", "2024",
                      "SpaceJet X1", "TexasSky")
    return FlightAgent(agent_id, jetpack, position, Point(900, 700), rng=random.Random(agent_id))

class TestInstructionGateway(unittest.TestCase):
    def setUp(self):
        self.agent = make_agent(1)
        self.gateway = InstructionGateway({1: self.agent}, 1000, 800)

    def test_agent_implements_sink(self):
        self.assertIsInstance(self.agent, InstructionSink)

    def test_valid_destination_applied(self):
        self.gateway.set_radio_destination(1, Point(200, 300), "traffic")
        self.assertEqual(self.agent.radio_destination, Point(200, 300))
        self.assertEqual(self.agent.status, FlightStatus.FOLLOWING_INSTRUCTION)

    def test_unknown_agent_rejected(self):
        with self.assertRaises(InstructionRejectedError) as ctx:
            self.gateway.issue_emergency_landing(99, "test")
        self.assertEqual(ctx.exception.agent_id, 99)

    def test_off_map_destination_rejected_without_mutation(self):
        for point in (Point(-1, 10), Point(10, 800), Point(1000, 0), Point(float('nan'), 5)):
            with self.assertRaises(InstructionRejectedError):
                self.gateway.set_radio_destination(1, point, "bad")
        self.assertIsNone(self.agent.radio_destination)
        self.assertEqual(self.agent.status, FlightStatus.ACTIVE)

    def test_altitude_bounds(self):
        for value in (49.9, 200.1, float('inf')):
            with self.assertRaises(InstructionRejectedError):
                self.gateway.set_radio_altitude(1, value, "bad")
        self.gateway.set_radio_altitude(1, 200, "climb")
        self.assertEqual(self.agent.radio_altitude, 200.0)

    def test_parked_agent_rejects_destination_and_altitude(self):
        self.agent.park("HOU-P001", 10)
        with self.assertRaises(InstructionRejectedError):
            self.gateway.set_radio_destination(1, Point(10, 10), "go")
        with self.assertRaises(InstructionRejectedError):
            self.gateway.set_radio_altitude(1, 100, "climb")

    def test_emergency_agent_rejects_destination(self):
        self.agent.halt("collision")
        with self.assertRaises(InstructionRejectedError):
            self.gateway.set_radio_destination(1, Point(10, 10), "go")

    def test_emergency_landing_marks_request(self):
        self.gateway.issue_emergency_landing(1, "medical")
        self.assertTrue(self.agent.emergency_requested)
        self.assertEqual(self.agent.emergency_reason, "medical")


class TestRadioDispatcher(unittest.TestCase):
    def setUp(self):
        self.agents = [make_agent(i, Point(100.0 * i, 100.0)) for i in range(1, 4)]
        self.gateway = InstructionGateway({a.agent_id: a for a in self.agents}, 1000, 800)
        self.weather = WeatherModel(rng=random.Random(1))
        self.dispatcher = RadioDispatcher(self.gateway, self.weather, edge_margin=10, rng=random.Random(2))

    def test_all_parked_returns_none(self):
        for agent in self.agents:
            agent.park("HOU-P001", 5)
        self.assertIsNone(self.dispatcher.dispatch(self.agents))

    def test_parked_agents_never_addressed(self):
        self.agents[0].park("HOU-P001", 5)
        self.agents[1].park("HOU-P002", 5)
        for _ in range(30):
            response = self.dispatcher.dispatch(self.agents)
            self.assertEqual(response["data"]["agent_id"], 3)

    def test_routine_weather_uses_routine_mix(self):
        kinds = {self.dispatcher.dispatch(self.agents)["data"]["instruction"] for _ in range(200)}
        self.assertTrue(kinds <= {k.value for k in (InstructionKind.TRAFFIC_SEPARATION,
                                                    InstructionKind.ALTITUDE_CHANGE,
                                                    InstructionKind.DIRECT_ROUTING,
                                                    InstructionKind.POSITION_REPORT,
                                                    InstructionKind.WEATHER_UPDATE)})
        self.assertNotIn(InstructionKind.EMERGENCY_LANDING.value, kinds)

    def test_severe_weather_issues_emergency_landings(self):
        self.weather.change_weather("Hurricane")
        kinds = [self.dispatcher.dispatch(self.agents)["data"]["instruction"] for _ in range(200)]
        self.assertIn(InstructionKind.EMERGENCY_LANDING.value, kinds)
        self.assertNotIn(InstructionKind.POSITION_REPORT.value, kinds)

    def test_instructed_points_stay_on_map(self):
        edge_agent = make_agent(1, Point(12, 12))
        gateway = InstructionGateway({1: edge_agent}, 1000, 800)
        dispatcher = RadioDispatcher(gateway, self.weather, edge_margin=10, rng=random.Random(3))
        for _ in range(100):
            edge_agent.radio_destination = None
            edge_agent.status = FlightStatus.ACTIVE
            dispatcher.dispatch([edge_agent])
            if edge_agent.radio_destination is not None:
                self.assertGreaterEqual(edge_agent.radio_destination.x, 10)
                self.assertGreaterEqual(edge_agent.radio_destination.y, 10)

    def test_rejection_is_reported_not_raised(self):
        gateway = MagicMock()
        gateway.width, gateway.height = 1000, 800
        gateway.set_radio_destination.side_effect = InstructionRejectedError(1, "busy")
        gateway.set_radio_altitude.side_effect = InstructionRejectedError(1, "busy")
        gateway.issue_emergency_landing.side_effect = InstructionRejectedError(1, "busy")
        self.weather.change_weather("Tornado Warning")
        dispatcher = RadioDispatcher(gateway, self.weather, rng=random.Random(5))
        response = dispatcher.dispatch(self.agents[:1])
        self.assertFalse(response["success"])
        self.assertEqual(response["module"], "radio")

if __name__ == '__main__':
    unittest.main()

# jetpackatc/simulation/tests/test_clock.py
import time
import unittest
from unittest.mock import MagicMock

from jetpackatc.simulation import SimulationClock

class TestSimulationClock(unittest.TestCase):
    def setUp(self):
        self.simulation = MagicMock()
        self.simulation.config.tick_interval_s = 0.0

    def test_runs_bounded_ticks(self):
        clock = SimulationClock(self.simulation)
        self.assertEqual(clock.run(max_ticks=5), 5)
        self.assertEqual(self.simulation.step.call_count, 5)

    def test_failed_tick_does_not_stop_loop(self):
        self.simulation.step.side_effect = [RuntimeError("boom"), None, None]
        clock = SimulationClock(self.simulation)
        self.assertEqual(clock.run(max_ticks=3), 3)
        self.assertEqual(clock.failed_ticks, 1)

    def test_paces_ticks(self):
        clock = SimulationClock(self.simulation, tick_interval_s=0.02)
        started = time.monotonic()
        clock.run(max_ticks=5)
        self.assertGreaterEqual(time.monotonic() - started, 0.08)

    def test_stop_ends_background_run(self):
        clock = SimulationClock(self.simulation, tick_interval_s=0.001)
        clock.start()
        time.sleep(0.05)
        clock.stop(timeout=1.0)
        self.assertFalse(clock.running)
        self.assertGreater(self.simulation.step.call_count, 0)

    def test_double_start_rejected(self):
        clock = SimulationClock(self.simulation, tick_interval_s=0.01)
        clock.start()
        try:
            with self.assertRaises(RuntimeError):
                clock.start()
        finally:
            clock.stop(timeout=1.0)

if __name__ == '__main__':
    unittest.main()

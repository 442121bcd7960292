# jetpackatc/simulation/clock.py
import logging
import threading
import time
from typing import Optional

logger = logging.getLogger(__name__)

class SimulationClock:
    """
    Paces Simulation.step() at a fixed interval. stop() is the only way to
    cancel a run; a tick that raises is logged and the loop carries on.
    """

    def __init__(self, simulation, tick_interval_s: Optional[float] = None):
        self.simulation = simulation
        self.tick_interval_s = (simulation.config.tick_interval_s
                                if tick_interval_s is None else tick_interval_s)
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.failed_ticks = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Blocks until stop() or max_ticks; returns the number of ticks attempted."""
        self._stop.clear()
        ticks = 0
        logger.info(f"Simulation clock started ({self.tick_interval_s * 1000:.0f} ms per tick)")

        while not self._stop.is_set() and (max_ticks is None or ticks < max_ticks):
            started = time.monotonic()
            try:
                self.simulation.step()
            except Exception:
                self.failed_ticks += 1
                logger.exception(f"Tick {ticks + 1} failed; continuing")
            ticks += 1

            remaining = self.tick_interval_s - (time.monotonic() - started)
            if remaining > 0:
                self._stop.wait(remaining)

        logger.info(f"Simulation clock stopped after {ticks} ticks")
        return ticks

    def start(self, max_ticks: Optional[int] = None) -> threading.Thread:
        """Runs the clock on a daemon thread."""
        if self.running:
            raise RuntimeError("Simulation clock is already running")
        self._stop.clear()
        self._thread = threading.Thread(target=self.run, kwargs={"max_ticks": max_ticks},
                                        name="simulation-clock", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

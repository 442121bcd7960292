# jetpackatc/simulation/core.py
"""
The simulation tick pipeline. One call to step() runs, in order:

    1. weather advance, hazard push onto every agent
    2. radio dispatch (every radio_interval_ticks, if enabled)
    3. arbitration + motion for every agent (optionally on a thread pool;
       all agents finish before the sweep starts)
    4. collision sweep
    5. emergency handler
    6. parking lifecycle
    7. immutable snapshot published to subscribers
"""
import logging
import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Optional

from ..detection import CollisionDetector, AccidentRegistry, ProximityAlert, ProximityTier
from ..emergency import EmergencyHandler
from ..flight import FlightAgent, FleetFactory, ParkingPhase
from ..parking import ParkingRegistry, ParkingLifecycle, ParkingSlot, generate_slots
from ..radio import InstructionGateway, RadioDispatcher
from ..terrain import TerrainOracle, FunctionSurface
from ..weather import WeatherModel
from .config import SimulationConfig
from .data_models import SimulationSnapshot
from .events import EventBus, EventKind, SimulationEvent
from .exceptions import UnknownHazardError

logger = logging.getLogger(__name__)

CITY_HAZARDS = ('building_collapse', 'restricted_activity')

_PROXIMITY_EVENTS = {
    ProximityTier.CRITICAL: EventKind.PROXIMITY_CRITICAL,
    ProximityTier.WARNING: EventKind.PROXIMITY_WARNING,
}

_PHASE_EVENTS = {
    ParkingPhase.PARKED: EventKind.PARKED,
    ParkingPhase.EN_ROUTE: EventKind.DEPARTED,
}

class Simulation:
    def __init__(self, config: Optional[SimulationConfig] = None,
                 surface: Optional[Callable[[float, float], bool]] = None,
                 agents: Optional[Iterable[FlightAgent]] = None,
                 slots: Optional[Iterable[ParkingSlot]] = None):
        """
        Args:
            config: Run settings; validated here.
            surface: Water predicate (x, y) -> bool. An all-land city when omitted.
            agents: Pre-built agents; a fleet is generated from the config when omitted.
            slots: Pre-built parking slots; generated on land when omitted.
        """
        self.config = (config or SimulationConfig()).validate()
        cfg = self.config
        self.rng = random.Random(cfg.seed)

        self.terrain = TerrainOracle(surface or FunctionSurface(lambda x, y: False),
                                     cfg.map_width, cfg.map_height, cfg.edge_margin,
                                     search_step=cfg.land_search_step,
                                     angle_step_deg=cfg.land_search_angle_deg)
        self.weather = WeatherModel(cfg.city, cfg.weather_interval_ticks,
                                    rng=random.Random(self.rng.getrandbits(32)))

        if slots is None:
            slots = generate_slots(self.terrain, cfg.parking_slots, cfg.city,
                                   rng=random.Random(self.rng.getrandbits(32)), margin=cfg.edge_margin)
        self.parking = ParkingRegistry(slots)

        if agents is None:
            agents = FleetFactory(cfg.city).create_fleet(cfg.fleet_size, self.terrain, cfg.base_speed,
                                                         seed=cfg.seed)
        self.agents: Dict[int, FlightAgent] = {a.agent_id: a for a in agents}

        self.events = EventBus()
        self._snapshot_bus = EventBus()
        self._tick_events: List[SimulationEvent] = []

        self.accidents = AccidentRegistry()
        self.detector = CollisionDetector(self.accidents, event_sink=self._on_proximity)
        self.emergency = EmergencyHandler(self.terrain, self.parking, fallback=cfg.land_fallback,
                                          max_search_radius=cfg.land_search_max_radius,
                                          max_slot_distance=cfg.max_slot_distance)
        self.lifecycle = ParkingLifecycle(self.parking, self.terrain, cfg.dwell_ticks)

        # Held for a whole tick; radio instructions wait for the tick boundary
        self._lock = threading.RLock()
        self.gateway = InstructionGateway(self.agents, cfg.map_width, cfg.map_height, lock=self._lock)
        self.radio = RadioDispatcher(self.gateway, self.weather, cfg.edge_margin,
                                     rng=random.Random(self.rng.getrandbits(32)))

        self.city_hazards = {name: False for name in CITY_HAZARDS}
        self.tick = 0
        self._executor = (ThreadPoolExecutor(max_workers=cfg.motion_workers, thread_name_prefix="motion")
                          if cfg.motion_workers > 1 else None)
        self._latest = self._build_snapshot()

        logger.info(f"Simulation initialized for {cfg.city}: {len(self.agents)} jetpacks, "
                    f"{len(self.parking)} parking slots, {cfg.map_width}x{cfg.map_height} map")

    # --- Public interface ---

    @property
    def latest_snapshot(self) -> SimulationSnapshot:
        return self._latest

    def subscribe_snapshots(self, callback: Callable[[SimulationSnapshot], None]) -> Callable[[], None]:
        return self._snapshot_bus.subscribe(callback)

    def subscribe_events(self, callback: Callable[[SimulationEvent], None]) -> Callable[[], None]:
        return self.events.subscribe(callback)

    def set_city_hazard(self, hazard: str, active: bool) -> None:
        """Raises or clears a city-wide hazard; pushed onto agents at the next tick."""
        if hazard not in self.city_hazards:
            raise UnknownHazardError(hazard)
        with self._lock:
            if self.city_hazards[hazard] == active:
                return
            self.city_hazards[hazard] = active
        state = "raised" if active else "cleared"
        logger.warning(f"City hazard {hazard} {state}")
        self.events.publish(SimulationEvent(self.tick, EventKind.CITY_HAZARD, f"{hazard} {state}",
                                            data={"hazard": hazard, "active": active}))

    def step(self) -> SimulationSnapshot:
        with self._lock:
            self.tick += 1
            self._tick_events = []
            ordered = [self.agents[agent_id] for agent_id in sorted(self.agents)]

            self._apply_weather_and_hazards(ordered)
            self._dispatch_radio(ordered)
            self._advance_agents(ordered)
            self._sweep(ordered)
            self._handle_emergencies(ordered)
            self._update_parking(ordered)

            snapshot = self._build_snapshot(self._tick_events)
            self._latest = snapshot

        for event in snapshot.events:
            self.events.publish(event)
        self._snapshot_bus.publish(snapshot)
        return snapshot

    def run(self, ticks: int) -> SimulationSnapshot:
        """Runs `ticks` ticks back to back without pacing."""
        snapshot = self._latest
        for _ in range(ticks):
            snapshot = self.step()
        return snapshot

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # --- Tick phases ---

    def _emit(self, kind: EventKind, message: str, agent_ids=(), **data) -> None:
        self._tick_events.append(SimulationEvent(self.tick, kind, message, tuple(agent_ids), data))

    def _apply_weather_and_hazards(self, agents: List[FlightAgent]) -> None:
        previous = self.weather.current
        state = self.weather.advance(self.tick)
        if state is not previous:
            self._emit(EventKind.WEATHER_CHANGED, f"Weather now {state.condition}",
                       condition=state.condition, severity=state.severity, safe_to_fly=state.safe_to_fly)

        inclement = not state.safe_to_fly
        for agent in agents:
            agent.hazards.inclement_weather = inclement
            for hazard, active in self.city_hazards.items():
                newly_raised = active and not getattr(agent.hazards, hazard)
                setattr(agent.hazards, hazard, active)
                if newly_raised and hazard == 'building_collapse' and not (agent.is_parked or agent.in_emergency):
                    agent.set_detour(self.emergency.generate_evasive_detour(agent), hazard)

    def _dispatch_radio(self, agents: List[FlightAgent]) -> None:
        interval = self.config.radio_interval_ticks
        if interval <= 0 or self.tick % interval:
            return
        response = self.radio.dispatch(agents)
        if response is not None:
            self._emit(EventKind.RADIO, response["message"], (response["data"]["agent_id"],),
                       **response["data"], success=response["success"])

    def _advance_agents(self, agents: List[FlightAgent]) -> None:
        if self._executor is None:
            for agent in agents:
                agent.advance()
            return
        # Draining the iterator waits for every agent, so the sweep sees a consistent state
        list(self._executor.map(FlightAgent.advance, agents))

    def _sweep(self, agents: List[FlightAgent]) -> None:
        for record in self.detector.sweep(agents, self.tick):
            self._emit(EventKind.ACCIDENT, record.description, record.agent_ids,
                       accident_id=record.accident_id, position=record.position.as_tuple())

    def _on_proximity(self, alert: ProximityAlert) -> None:
        self._emit(_PROXIMITY_EVENTS[alert.tier],
                   f"{alert.callsigns[0]} and {alert.callsigns[1]} within {alert.distance:.1f} units",
                   alert.agent_ids, distance=alert.distance)

    def _handle_emergencies(self, agents: List[FlightAgent]) -> None:
        for plan in self.emergency.process(agents):
            if plan.retry and plan.waiting:
                continue
            callsign = self.agents[plan.agent_id].callsign
            target = plan.slot_id or "no free slot"
            self._emit(EventKind.EMERGENCY_LANDING, f"{callsign} emergency landing: {target}",
                       (plan.agent_id,), slot_id=plan.slot_id, used_fallback=plan.used_fallback)

    def _update_parking(self, agents: List[FlightAgent]) -> None:
        for agent in agents:
            slot_before = agent.parked_slot_id
            phase = self.lifecycle.update(agent)
            kind = _PHASE_EVENTS.get(phase)
            if kind is not None:
                self._emit(kind, f"{agent.callsign} {kind.value.lower()}", (agent.agent_id,),
                           slot_id=agent.parked_slot_id or slot_before)

    def _build_snapshot(self, events=()) -> SimulationSnapshot:
        return SimulationSnapshot(
            tick=self.tick,
            timestamp=time.time(),
            agents=MappingProxyType({agent_id: agent.snapshot() for agent_id, agent in self.agents.items()}),
            accidents=tuple(self.accidents.all()),
            weather=self.weather.current,
            parking=self.parking.occupancy(),
            events=tuple(events),
        )

    def __repr__(self) -> str:
        return f"Simulation(city={self.config.city!r}, tick={self.tick}, agents={len(self.agents)})"

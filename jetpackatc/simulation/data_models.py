# jetpackatc/simulation/data_models.py
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from ..detection.data_models import AccidentRecord
from ..flight.data_models import AgentSnapshot
from ..parking.data_models import OccupancySummary
from ..weather.data_models import WeatherState
from .events import SimulationEvent

@dataclass(frozen=True)
class SimulationSnapshot:
    """
    Everything a renderer or logger needs about one tick. Built from copies,
    so holding on to it never exposes live simulation state.
    """
    tick: int
    timestamp: float
    agents: Mapping[int, AgentSnapshot]
    accidents: Tuple[AccidentRecord, ...]
    weather: WeatherState
    parking: OccupancySummary
    events: Tuple[SimulationEvent, ...] = ()

    def agent(self, agent_id: int) -> Optional[AgentSnapshot]:
        return self.agents.get(agent_id)

    @property
    def active_accidents(self) -> Tuple[AccidentRecord, ...]:
        return tuple(a for a in self.accidents if a.active)

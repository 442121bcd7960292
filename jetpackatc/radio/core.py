# jetpackatc/radio/core.py
"""
Instruction boundary between the radio collaborator and the flight core.

Agents receive instructions through the typed InstructionSink methods; the
gateway looks agents up by id, validates every instruction and raises
InstructionRejectedError before any agent state is touched.
"""
import logging
import math
import threading
from typing import Dict, Optional, Protocol, runtime_checkable

from ..constants import MapDefaults
from ..utils.geometry import Point
from .exceptions import InstructionRejectedError

logger = logging.getLogger(__name__)

@runtime_checkable
class InstructionSink(Protocol):
    def set_radio_destination(self, point: Point, reason: str = "") -> None: ...

    def set_radio_altitude(self, value: float, reason: str = "") -> None: ...

    def request_emergency_landing(self, reason: str = "") -> None: ...


class InstructionGateway:
    def __init__(self, agents: Dict[int, InstructionSink], width: float, height: float,
                 lock: Optional[threading.RLock] = None):
        """
        Args:
            agents: Live id -> agent mapping owned by the simulation.
            width, height: Map extent; destinations must fall inside it.
            lock: Shared with the tick loop so instructions land between ticks.
        """
        self.agents = agents
        self.width = width
        self.height = height
        self._lock = lock or threading.RLock()

    def _agent(self, agent_id: int):
        agent = self.agents.get(agent_id)
        if agent is None:
            raise InstructionRejectedError(agent_id, "unknown agent")
        return agent

    def _check_point(self, agent_id: int, point: Point) -> None:
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise InstructionRejectedError(agent_id, f"non-finite coordinates {point}")
        if not (0 <= point.x < self.width and 0 <= point.y < self.height):
            raise InstructionRejectedError(
                agent_id, f"({point.x:.0f}, {point.y:.0f}) is outside the {self.width}x{self.height} map")

    def set_radio_destination(self, agent_id: int, point: Point, reason: str = "") -> None:
        with self._lock:
            agent = self._agent(agent_id)
            self._check_point(agent_id, point)
            if agent.is_parked:
                raise InstructionRejectedError(agent_id, "agent is parked")
            if agent.in_emergency:
                raise InstructionRejectedError(agent_id, f"agent is in {agent.status.value}")
            agent.set_radio_destination(point, reason)

    def set_radio_altitude(self, agent_id: int, value: float, reason: str = "") -> None:
        with self._lock:
            agent = self._agent(agent_id)
            if not (math.isfinite(value) and MapDefaults.MIN_ALTITUDE <= value <= MapDefaults.MAX_ALTITUDE):
                raise InstructionRejectedError(
                    agent_id, f"altitude {value} outside [{MapDefaults.MIN_ALTITUDE:.0f}, "
                              f"{MapDefaults.MAX_ALTITUDE:.0f}]")
            if agent.is_parked:
                raise InstructionRejectedError(agent_id, "agent is parked")
            agent.set_radio_altitude(value, reason)

    def issue_emergency_landing(self, agent_id: int, reason: str = "") -> None:
        with self._lock:
            self._agent(agent_id).request_emergency_landing(reason)

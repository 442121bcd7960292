# jetpackatc/simulation/events.py
import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Tuple

logger = logging.getLogger(__name__)

class EventKind(Enum):
    ACCIDENT = "ACCIDENT"
    PROXIMITY_CRITICAL = "PROXIMITY_CRITICAL"
    PROXIMITY_WARNING = "PROXIMITY_WARNING"
    EMERGENCY_LANDING = "EMERGENCY_LANDING"
    PARKED = "PARKED"
    DEPARTED = "DEPARTED"
    WEATHER_CHANGED = "WEATHER_CHANGED"
    CITY_HAZARD = "CITY_HAZARD"
    RADIO = "RADIO"

@dataclass(frozen=True)
class SimulationEvent:
    tick: int
    kind: EventKind
    message: str
    agent_ids: Tuple[int, ...] = ()
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'data', MappingProxyType(dict(self.data)))


class EventBus:
    """Fire-and-forget fan-out. A failing subscriber is logged and skipped."""

    def __init__(self):
        self._subscribers: List[Callable] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        """Registers a callback; returns a function that unsubscribes it."""
        with self._lock:
            self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Callable[[Any], None]) -> None:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    def publish(self, item: Any) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(item)
            except Exception:
                logger.exception(f"Subscriber {callback!r} failed; ignoring")

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)

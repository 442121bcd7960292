# jetpackatc/detection/registry.py
import logging
import threading
from dataclasses import replace
from typing import List

from ..utils.geometry import Point, distance
from .data_models import AccidentRecord
from .exceptions import AccidentNotFoundError

logger = logging.getLogger(__name__)

class AccidentRegistry:
    """Append-only store of accident records; only deactivation changes them."""

    def __init__(self):
        self._records: List[AccidentRecord] = []
        self._lock = threading.Lock()

    def report(self, record: AccidentRecord) -> None:
        with self._lock:
            self._records.append(record)

    def all(self) -> List[AccidentRecord]:
        with self._lock:
            return list(self._records)

    def active(self) -> List[AccidentRecord]:
        with self._lock:
            return [r for r in self._records if r.active]

    def active_count(self) -> int:
        return len(self.active())

    def near(self, point: Point, radius: float) -> List[AccidentRecord]:
        return [r for r in self.active() if distance(r.position, point) <= radius]

    def get(self, accident_id: str) -> AccidentRecord:
        with self._lock:
            for record in self._records:
                if record.accident_id == accident_id:
                    return record
        raise AccidentNotFoundError(accident_id)

    def deactivate(self, accident_id: str) -> bool:
        """
        Operator-facing clear. Returns False when the accident was already
        inactive.

        Raises:
            AccidentNotFoundError: for an id that was never reported.
        """
        with self._lock:
            for i, record in enumerate(self._records):
                if record.accident_id != accident_id:
                    continue
                if not record.active:
                    return False
                self._records[i] = replace(record, active=False)
                logger.info(f"Accident {accident_id} cleared")
                return True
        raise AccidentNotFoundError(accident_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

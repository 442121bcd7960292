# jetpackatc/parking/exceptions.py
from ..exceptions import JetpackATCError

class ParkingError(JetpackATCError):
    """Base exception for parking registry errors."""
    pass

class SlotNotFoundError(ParkingError):
    def __init__(self, slot_id: str):
        self.slot_id = slot_id
        super().__init__(f"No parking slot with id {slot_id!r}")

class SlotGenerationError(ParkingError):
    """Raised when slot generation is asked for an impossible layout."""
    pass

# jetpackatc/detection/exceptions.py
from ..exceptions import JetpackATCError

class DetectionError(JetpackATCError):
    """Base exception for collision detection errors."""
    pass

class AccidentNotFoundError(DetectionError):
    def __init__(self, accident_id: str):
        self.accident_id = accident_id
        super().__init__(f"No accident with id {accident_id!r}")

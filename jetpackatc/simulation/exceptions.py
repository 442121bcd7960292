# jetpackatc/simulation/exceptions.py
from ..exceptions import JetpackATCError

class SimulationError(JetpackATCError):
    """Base exception for simulation wiring errors."""
    pass

class ConfigurationError(SimulationError):
    """Raised when a SimulationConfig fails validation or cannot be loaded."""
    pass

class UnknownHazardError(SimulationError):
    def __init__(self, hazard: str):
        self.hazard = hazard
        super().__init__(f"Unknown city hazard: {hazard!r}")

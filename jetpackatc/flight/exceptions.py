# jetpackatc/flight/exceptions.py
from ..exceptions import JetpackATCError

class FlightError(JetpackATCError):
    """Base exception for flight agent errors."""
    pass

class InvalidFlightParametersError(FlightError):
    """Raised when an agent or fleet is built with impossible parameters."""
    pass

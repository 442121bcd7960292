# jetpackatc/weather/exceptions.py
from ..exceptions import JetpackATCError

class WeatherError(JetpackATCError):
    """Base exception for weather model errors."""
    pass

class UnknownConditionError(WeatherError):
    """Raised when asked to switch to a condition the model does not know."""
    def __init__(self, condition: str):
        self.condition = condition
        super().__init__(f"Unknown weather condition: {condition!r}")

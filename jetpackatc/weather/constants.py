# jetpackatc/weather/constants.py
"""
Weather condition table. Each condition carries its severity (1-5) and the
ranges its temperature (°F), wind speed (mph) and visibility (miles) are
re-sampled from whenever the condition takes effect.
"""
from enum import IntEnum

class WeatherSeverity(IntEnum):
    MINIMAL = 1
    MANAGEABLE = 2
    MODERATE = 3
    SEVERE = 4
    CRITICAL = 5

class WeatherConstants:
    DEFAULT_CONDITION = "Clear/Sunny"
    DEFAULT_TEMPERATURE_F = 72.0
    DEFAULT_WIND_MPH = 5
    DEFAULT_VISIBILITY_MILES = 10

    # Flight safety limits
    MAX_SAFE_SEVERITY = WeatherSeverity.MANAGEABLE
    MIN_SAFE_VISIBILITY_MILES = 3
    MAX_SAFE_WIND_MPH = 30

    # condition -> (severity, (temp_lo, temp_span), (wind_lo, wind_span), (vis_lo, vis_span))
    # Sampled as lo + randrange(span); a span of 0 means the fixed value lo.
    CONDITIONS = {
        "Clear/Sunny":        (WeatherSeverity.MINIMAL,    (70, 20), (3, 7),   (10, 0)),
        "Partly Cloudy":      (WeatherSeverity.MINIMAL,    (60, 15), (5, 10),  (8, 3)),
        "Overcast":           (WeatherSeverity.MINIMAL,    (60, 15), (5, 10),  (8, 3)),
        "Light Rain":         (WeatherSeverity.MINIMAL,    (50, 15), (8, 12),  (5, 4)),
        "Drizzle":            (WeatherSeverity.MINIMAL,    (50, 15), (8, 12),  (5, 4)),
        "Light Snow":         (WeatherSeverity.MINIMAL,    (25, 15), (10, 10), (4, 4)),
        "Flurries":           (WeatherSeverity.MINIMAL,    (25, 15), (10, 10), (4, 4)),
        "Fog":                (WeatherSeverity.MANAGEABLE, (45, 20), (2, 5),   (1, 3)),
        "Mist":               (WeatherSeverity.MANAGEABLE, (45, 20), (2, 5),   (1, 3)),
        "Steady Rain":        (WeatherSeverity.MANAGEABLE, (45, 20), (15, 15), (2, 4)),
        "Showers":            (WeatherSeverity.MANAGEABLE, (55, 20), (20, 20), (2, 3)),
        "Thunder Showers":    (WeatherSeverity.MANAGEABLE, (55, 20), (20, 20), (2, 3)),
        "Windy Conditions":   (WeatherSeverity.MANAGEABLE, (50, 25), (25, 25), (6, 5)),
        "Heavy Rain":         (WeatherSeverity.MODERATE,   (45, 20), (20, 15), (1, 3)),
        "Heavy Snow":         (WeatherSeverity.MODERATE,   (15, 15), (15, 15), (1, 2)),
        "Severe Thunderstorm": (WeatherSeverity.SEVERE,    (60, 20), (35, 25), (1, 2)),
        "Blizzard":           (WeatherSeverity.SEVERE,     (5, 20),  (35, 20), (0, 1)),
        "Hurricane":          (WeatherSeverity.CRITICAL,   (70, 15), (74, 40), (0, 1)),
        "Tornado Warning":    (WeatherSeverity.CRITICAL,   (60, 20), (50, 50), (1, 2)),
    }

    SEVERITY_DESCRIPTIONS = {
        WeatherSeverity.MINIMAL: "Everyday conditions, minimal risk",
        WeatherSeverity.MANAGEABLE: "Noticeable impact, manageable disruptions",
        WeatherSeverity.MODERATE: "Moderate risk, flight restrictions",
        WeatherSeverity.SEVERE: "Severe conditions, flight hazardous",
        WeatherSeverity.CRITICAL: "Critical conditions, no-fly zone",
    }

    FLIGHT_STATUS = {
        WeatherSeverity.MINIMAL: "Normal operations",
        WeatherSeverity.MANAGEABLE: "Caution advised",
        WeatherSeverity.MODERATE: "Flight restrictions in effect",
        WeatherSeverity.SEVERE: "Flight operations suspended",
        WeatherSeverity.CRITICAL: "No-fly zone declared",
    }

    RECOMMENDATIONS = {
        WeatherSeverity.MINIMAL: "Safe to fly. Standard precautions apply.",
        WeatherSeverity.MANAGEABLE: "Exercise increased caution. Monitor conditions closely.",
        WeatherSeverity.MODERATE: "Experienced pilots only. Avoid unnecessary flights.",
        WeatherSeverity.SEVERE: "Ground all aircraft. Emergency operations only.",
        WeatherSeverity.CRITICAL: "All flights prohibited. Seek immediate shelter.",
    }

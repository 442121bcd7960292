# jetpackatc/constants/simulation.py

class SimulationConstants:
    """Clock and cadence constants shared by the simulation core."""

    TICK_INTERVAL_S = 0.05      # 20 Hz flight loop
    WEATHER_INTERVAL_TICKS = 600  # 30 s at 20 Hz
    DEFAULT_FLEET_SIZE = 20
    MAX_FLEET_SIZE = 100        # callsign tables are sized for 100 jetpacks


class MapDefaults:
    """Default playable area, in map units (pixels of the source raster)."""

    WIDTH = 1000
    HEIGHT = 800
    EDGE_MARGIN = 10

    # Altitude band a jetpack may occupy
    MIN_ALTITUDE = 50.0
    MAX_ALTITUDE = 200.0


class CityDefaults:
    """Supported cities and the three-letter codes used in serials and slot ids."""

    DEFAULT_CITY = "New York"
    CITY_CODES = {
        "New York": "NYC",
        "Boston": "BOS",
        "Houston": "HOU",
        "Dallas": "DAL",
    }

    @classmethod
    def code_for(cls, city: str) -> str:
        return cls.CITY_CODES.get(city, city.replace(" ", "")[:3].upper() or "JET")

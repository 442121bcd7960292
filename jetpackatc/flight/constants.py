# jetpackatc/flight/constants.py

class FlightConstants:
    # Motion
    ARRIVAL_EPSILON = 1.0
    DEFAULT_BASE_SPEED = 2.0

    # Altitude (map units)
    DEFAULT_ALTITUDE = 100.0
    INITIAL_ALTITUDE_RANGE = (75.0, 175.0)
    ALTITUDE_STEP = 3.0
    ALTITUDE_TOLERANCE = 1.0
    ALTITUDE_JITTER = 1.0

    TRAIL_LENGTH = 15

    # Most restrictive multiplier of the active flags wins; emergency_halt is handled separately
    HAZARD_SPEED_MULTIPLIERS = {
        'inclement_weather': 0.5,
        'building_collapse': 1.0,
        'accident_hazard': 1.0,
        'restricted_activity': 1.0,
    }


class FleetConstants:
    """Per-city naming tables used by the fleet factory."""
    CALLSIGNS = {
        "New York": ["ALPHA", "BRAVO", "CHARLIE", "DELTA", "ECHO", "FOXTROT", "GOLF", "HOTEL", "INDIA", "JULIET"],
        "Boston": ["PATRIOT", "CELTICS", "REDSOX", "BRUINS", "BEACON", "HARBOR", "FENWAY", "LIBERTY", "REVERE", "QUINCY"],
        "Houston": ["ROCKET", "ASTRO", "TEXAN", "OILER", "SPACE", "NASA", "GALAXY", "COMET", "SATURN", "JUPITER"],
        "Dallas": ["COWBOY", "MAVS", "STARS", "RANGER", "MUSTANG", "BRONCO", "LONGHORN", "ARMADILLO", "PRAIRIE", "HORIZON"],
    }
    DEFAULT_CALLSIGNS = ["ALPHA", "BRAVO", "CHARLIE"]

    MODELS = {
        "New York": ["SkyRider X1", "MetroFlyer Pro", "CityJet Elite", "UrbanJet Max", "SkyGlider Pro"],
        "Boston": ["FreedomFlyer", "BayJet Pro", "HarborHopper", "IceRider X1", "SeaBreeze Elite"],
        "Houston": ["SpaceJet X1", "LoneStar Pro", "HeatSeeker 3000", "RocketRider Elite", "GalaxyFlyer Max"],
        "Dallas": ["PrairieFlyer", "StarJet Pro", "RangeRider 3000", "CowboyJet Elite", "MaverickFlyer Max"],
    }
    DEFAULT_MODELS = ["GenericJet Pro"]

    MANUFACTURERS = {
        "New York": ["AeroTech", "UrbanJet", "MetroAir"],
        "Boston": ["LibertyCorp", "CoastalAir", "SeaBreeze", "NorthTech"],
        "Houston": ["TexasSky", "GulfAero", "SunTech"],
        "Dallas": ["SouthernAir", "DFWAero", "WestTech"],
    }
    DEFAULT_MANUFACTURERS = ["GenericAir"]

    OWNERS = ["John", "Jane", "Michael", "Sarah", "David", "Emily", "Chris", "Amanda", "Robert", "Lisa"]
    YEARS = ["2022", "2023", "2024"]

# jetpackatc/radio/constants.py
from enum import Enum

class InstructionKind(Enum):
    EMERGENCY_LANDING = "EMERGENCY_LANDING"
    WEATHER_DETOUR = "WEATHER_DETOUR"
    RETURN_TO_DESTINATION = "RETURN_TO_DESTINATION"
    COURSE_ADJUSTMENT = "COURSE_ADJUSTMENT"
    TRAFFIC_SEPARATION = "TRAFFIC_SEPARATION"
    ALTITUDE_CHANGE = "ALTITUDE_CHANGE"
    DIRECT_ROUTING = "DIRECT_ROUTING"
    POSITION_REPORT = "POSITION_REPORT"
    WEATHER_UPDATE = "WEATHER_UPDATE"

class RadioConstants:
    # Cumulative percent thresholds per weather regime, checked against randrange(100)
    SEVERE_WEATHER_MIX = [
        (40, InstructionKind.EMERGENCY_LANDING),
        (70, InstructionKind.WEATHER_DETOUR),
        (100, InstructionKind.ALTITUDE_CHANGE),
    ]
    CAUTION_MIX = [
        (30, InstructionKind.RETURN_TO_DESTINATION),
        (60, InstructionKind.COURSE_ADJUSTMENT),
        (100, InstructionKind.ALTITUDE_CHANGE),
    ]
    ROUTINE_MIX = [
        (20, InstructionKind.TRAFFIC_SEPARATION),
        (40, InstructionKind.ALTITUDE_CHANGE),
        (60, InstructionKind.DIRECT_ROUTING),
        (80, InstructionKind.POSITION_REPORT),
        (100, InstructionKind.WEATHER_UPDATE),
    ]

    # Max offset of a lateral instruction from the agent's position, per kind
    LATERAL_OFFSETS = {
        InstructionKind.WEATHER_DETOUR: 100,
        InstructionKind.COURSE_ADJUSTMENT: 75,
        InstructionKind.TRAFFIC_SEPARATION: 50,
    }

    # Altitude band assigned per regime (map units)
    ALTITUDE_BANDS = {
        "severe": (50.0, 100.0),
        "caution": (75.0, 150.0),
        "routine": (50.0, 200.0),
    }

    SEVERE_WEATHER_SEVERITY = 3

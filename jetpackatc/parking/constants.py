# jetpackatc/parking/constants.py

class ParkingConstants:
    DEFAULT_SLOT_COUNT = 100
    SLOT_MARGIN = 10.0
    MAX_ATTEMPTS_FACTOR = 10

    DEFAULT_DWELL_TICKS = (15, 45)

    # (upper bound on occupied percentage, label); the last label applies above all bounds
    OCCUPANCY_LEVELS = [
        (50.0, "AVAILABLE"),
        (80.0, "FILLING_UP"),
        (95.0, "NEARLY_FULL"),
    ]
    OCCUPANCY_FULL_LABEL = "CRITICAL"

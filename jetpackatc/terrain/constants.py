# jetpackatc/terrain/constants.py

class TerrainConstants:
    """Spiral search and water colour-classification parameters."""

    SEARCH_STEP = 10.0           # radius increment between rings
    SEARCH_ANGLE_STEP_DEG = 15.0  # angular resolution on each ring
    RANDOM_LAND_ATTEMPTS = 1000

    # Colour rule for map rasters (channel values 0-255)
    WATER_RGB = {
        'BLUE_DOMINANCE': 20,       # b > r + 20 and b > g + 20
        'LIGHT_BLUE_MIN': 150,      # b > 150 and b is the strongest channel
        'DARK_RED_MAX': 100,        # r < 100 and g < 150 and b > 100 and b - r > 30
        'DARK_GREEN_MAX': 150,
        'DARK_BLUE_MIN': 100,
        'DARK_BLUE_RED_GAP': 30
    }

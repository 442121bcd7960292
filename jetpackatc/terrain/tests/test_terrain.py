# jetpackatc/terrain/tests/test_terrain.py
import math
import random

import numpy as np
import pytest

from jetpackatc.terrain import (TerrainOracle, RasterSurface, FunctionSurface, water_mask_from_rgb,
                                LandNotFoundError, SurfaceShapeError)
from jetpackatc.utils.geometry import Point, distance

def shoreline(x_land):
    """Water west of x_land, land east of it."""
    return TerrainOracle(FunctionSurface(lambda x, y: x < x_land), 1000, 800, edge_margin=10)

def test_off_map_is_water():
    terrain = TerrainOracle(FunctionSurface(lambda x, y: False), 1000, 800)
    assert terrain.is_water(Point(-1, 5))
    assert terrain.is_water(Point(1000, 5))
    assert not terrain.is_water(Point(999, 799))

def test_land_point_returned_unchanged():
    terrain = shoreline(300)
    assert terrain.find_nearest_land(Point(450, 200)) == Point(450, 200)

@pytest.mark.parametrize("d", [5.0, 37.0, 95.0, 150.5, 333.3])
def test_spiral_search_within_one_step_of_nearest_land(d):
    origin = Point(300, 400)
    terrain = shoreline(origin.x + d)
    found = terrain.find_nearest_land(origin)
    assert not terrain.is_water(found)
    assert d <= distance(origin, found) < d + terrain.search_step

def test_spiral_search_finds_small_island():
    # Island of radius 8 centred 200 units east
    island = Point(500, 300)
    terrain = TerrainOracle(FunctionSurface(lambda x, y: math.hypot(x - island.x, y - island.y) > 8),
                            1000, 800, edge_margin=10)
    found = terrain.find_nearest_land(Point(300, 300))
    assert not terrain.is_water(found)
    assert distance(found, island) <= 8

def test_search_exhaustion_raises():
    terrain = shoreline(900)
    with pytest.raises(LandNotFoundError) as ctx:
        terrain.find_nearest_land(Point(100, 400), max_radius=100)
    assert ctx.value.max_radius == 100

def test_candidates_in_edge_margin_are_skipped():
    # Only land is a strip inside the margin band
    terrain = TerrainOracle(FunctionSurface(lambda x, y: x >= 8), 1000, 800, edge_margin=10)
    with pytest.raises(LandNotFoundError):
        terrain.find_nearest_land(Point(50, 400), max_radius=100)

def test_random_land_point():
    terrain = shoreline(500)
    rng = random.Random(1)
    for _ in range(50):
        assert not terrain.is_water(terrain.random_land_point(rng))
    all_water = TerrainOracle(FunctionSurface(lambda x, y: True), 1000, 800)
    assert all_water.random_land_point(rng) == all_water.center

def test_rgb_colour_rule():
    image = np.array([[
        [0, 0, 255],        # deep blue
        [140, 160, 200],    # light blue
        [50, 100, 140],     # dark water
        [30, 200, 40],      # park
        [128, 128, 128],    # road
        [100, 100, 115],    # grey-blue roof
    ]], dtype=np.uint8)
    assert water_mask_from_rgb(image).tolist() == [[True, True, True, False, False, False]]

def test_rgb_rule_rejects_bad_shape():
    with pytest.raises(SurfaceShapeError):
        water_mask_from_rgb(np.zeros((4, 4), dtype=np.uint8))

def test_raster_surface_indexes_row_then_column():
    mask = np.zeros((4, 6), dtype=bool)
    mask[1, 4] = True
    surface = RasterSurface(mask)
    assert surface(4.7, 1.2)
    assert not surface(1, 4 - 1)
    assert surface(-1, 0)
    assert surface(6, 0)
    assert surface.water_fraction() == pytest.approx(1 / 24)

def test_oracle_over_raster():
    image = np.zeros((80, 100, 3), dtype=np.uint8)
    image[:, :50] = (0, 0, 255)
    image[:, 50:] = (40, 160, 40)
    terrain = TerrainOracle(RasterSurface.from_rgb(image), 100, 80)
    found = terrain.find_nearest_land(Point(20, 40))
    assert found.x >= 50

"""Tests for sprite placement."""

import pytest
import numpy as np
from py_posgen.core.geometry import Point
from py_posgen.core.position_generator import PositionGenerator, PositionOptions
from py_posgen.core.sprite_placement import (
    SpritePlacement, probe_points, count_inside, find_sprite_position
)
from py_posgen.core.terrain_shape import TerrainGrid, TerrainShape

NO_MARGINS = dict(margin_top=0, margin_right=0, margin_bottom=0, margin_left=0)


class TestProbePoints:

    def test_probe_layout(self):
        """Eight probes clockwise from the top-left corner."""
        probes = probe_points(Point(10, 20), 5, 3)
        assert probes == [
            Point(10, 20), Point(12, 20), Point(14, 20), Point(14, 21),
            Point(14, 22), Point(12, 22), Point(10, 22), Point(10, 21),
        ]

    def test_single_pixel_sprite(self):
        assert set(probe_points(Point(3, 4), 1, 1)) == {Point(3, 4)}


class TestCountInside:

    def test_off_grid_probes_are_outside(self):
        mask = TerrainGrid(np.full((5, 5), 255, dtype=np.uint8))
        probes = [Point(0, 0), Point(4, 4), Point(5, 0), Point(-1, 2)]
        assert count_inside(mask, probes) == 2

    def test_only_exact_inside_value_counts(self):
        data = np.full((3, 3), 255, dtype=np.uint8)
        data[0, 0] = 254
        assert count_inside(TerrainGrid(data), [Point(0, 0), Point(1, 1)]) == 1


class TestFindSpritePosition:
    """Test the rejection sampling loop."""

    @pytest.fixture
    def notched_mask(self):
        """Inside everywhere except the bottom-right corner of a 5x5 box at the origin."""
        data = np.full((10, 10), 255, dtype=np.uint8)
        data[4, 4] = 0
        return data

    def test_seven_of_eight_is_enough(self, notched_mask):
        result = find_sprite_position(
            TerrainGrid(notched_mask), lambda: Point(0, 0), 5, 5, max_try=3
        )
        assert result == SpritePlacement(position=Point(0, 0), attempts=1)
        assert result.found

    def test_six_of_eight_is_rejected(self, notched_mask):
        notched_mask[4, 0] = 0
        calls = []

        def draw():
            calls.append(1)
            return Point(0, 0)

        result = find_sprite_position(TerrainGrid(notched_mask), draw, 5, 5, max_try=3)

        assert not result.found
        assert result.position is None
        assert result.attempts == 3
        assert len(calls) == 3

    def test_invalid_size(self, notched_mask):
        with pytest.raises(ValueError):
            find_sprite_position(TerrainGrid(notched_mask), lambda: Point(0, 0), 0, 5, 3)


class TestGeneratorSpritePlacement:
    """Test sprite placement through the generator."""

    def make_generator(self, mask, max_try=80):
        edges = np.zeros_like(mask)
        terrain = TerrainShape.from_arrays(mask, edges)
        options = PositionOptions(seed=0.0, terrain_point_max_try=max_try, **NO_MARGINS)
        return PositionGenerator(terrain, options)

    def test_open_terrain(self):
        """A small sprite on solid terrain fits on the first draw."""
        generator = self.make_generator(np.full((10, 10), 255, dtype=np.uint8))
        result = generator.get_terrain_point_for_sprite(3, 3)
        assert result.position == Point(0, 0)
        assert result.attempts == 1

    def test_no_terrain(self):
        """With nothing inside, the try budget is spent and no position returned."""
        generator = self.make_generator(np.zeros((10, 10), dtype=np.uint8), max_try=25)
        result = generator.get_terrain_point_for_sprite(2, 2)

        assert not result.found
        assert result.attempts == 25
        assert generator.index_x == 25
        assert generator.index_y == 25

    def test_sprite_larger_than_terrain(self):
        generator = self.make_generator(np.full((10, 10), 255, dtype=np.uint8), max_try=10)
        result = generator.get_terrain_point_for_sprite(30, 30)
        assert result.position is None
        assert generator.index_x == 10

    def test_found_positions_fit(self):
        """Accepted positions have at least 7 of 8 probes inside."""
        mask = np.zeros((60, 60), dtype=np.uint8)
        mask[30:, :] = 255
        generator = self.make_generator(mask)
        grid = TerrainGrid(mask)

        found = 0
        for _ in range(20):
            result = generator.get_terrain_point_for_sprite(6, 4)
            assert result.attempts <= 80
            if result.found:
                found += 1
                assert count_inside(grid, probe_points(result.position, 6, 4)) >= 7
        assert found > 0

    def test_zero_tries(self):
        generator = self.make_generator(np.full((10, 10), 255, dtype=np.uint8), max_try=0)
        result = generator.get_terrain_point_for_sprite(2, 2)
        assert result == SpritePlacement(position=None, attempts=0)

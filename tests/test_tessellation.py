"""Tests for the bounded Voronoi tessellation."""

import random

import numpy as np
import pytest
from shapely.geometry import Polygon

from blob_glass.tessellation import compute_cells, get_boundary_points, unique_points


def areas(polygons):
    return [Polygon(p).area for p in polygons]


class TestUniquePoints:
    def test_keeps_first_occurrence_order(self):
        pts = unique_points([(5, 5), (1, 1), (5, 5), (3, 3), (1, 1)])
        np.testing.assert_array_equal(pts, [[5, 5], [1, 1], [3, 3]])

    def test_empty(self):
        assert unique_points([]).shape == (0, 2)


class TestBoundaryPoints:
    def test_ring_surrounds_seeds_outside_canvas(self):
        pts = np.array([[-40.0, 10.0], [120.0, 130.0]])
        ring = get_boundary_points(pts, 100, 100)
        assert ring[:, 0].min() < -40
        assert ring[:, 0].max() > 120
        assert ring[:, 1].min() < 0
        assert ring[:, 1].max() > 130

    def test_ring_has_no_duplicates(self):
        ring = get_boundary_points(np.zeros((0, 2)), 500, 500)
        assert len(unique_points(ring)) == len(ring)


class TestComputeCells:
    def test_quadrants(self):
        polygons = compute_cells([(25, 25), (75, 25), (25, 75), (75, 75)], 100, 100)
        assert len(polygons) == 4
        for area in areas(polygons):
            assert area == pytest.approx(2500)

    def test_collinear_seeds(self):
        polygons = compute_cells([(10, 50), (50, 50), (90, 50)], 100, 100)
        assert areas(polygons) == pytest.approx([3000, 4000, 3000])

    def test_single_seed_owns_canvas(self):
        polygons = compute_cells([(40, 60)], 200, 100)
        assert len(polygons) == 1
        assert areas(polygons)[0] == pytest.approx(20000)

    @pytest.mark.parametrize("seed", [(0, 0), (100, 100), (0, 100), (100, 0)])
    def test_corner_seed_owns_canvas(self, seed):
        polygons = compute_cells([seed], 100, 100)
        assert len(polygons) == 1
        assert areas(polygons)[0] == pytest.approx(10000)

    def test_clustered_seeds_tile_the_canvas(self):
        polygons = compute_cells([(5, 5), (10, 5), (5, 10), (10, 10)], 1000, 1000)
        assert len(polygons) == 4
        assert sum(areas(polygons)) == pytest.approx(1000 * 1000)

    def test_ring_is_farther_than_any_seed(self):
        pts = np.array([[0.0, 0.0]])
        ring = get_boundary_points(pts, 100, 100)
        # farthest canvas corner from the seed
        corner = np.array([100.0, 100.0])
        nearest_ring = np.hypot(*(ring - corner).T).min()
        assert nearest_ring > np.hypot(*(corner - pts[0]))

    def test_duplicate_seeds_give_one_cell(self):
        polygons = compute_cells([(10, 10), (10, 10), (90, 90)], 100, 100)
        assert len(polygons) == 2
        assert sum(areas(polygons)) == pytest.approx(10000)

    def test_no_seeds(self):
        assert compute_cells([], 100, 100) == []

    def test_far_seed_is_clipped_away(self):
        polygons = compute_cells([(50, 50), (-500, -500)], 100, 100)
        assert len(polygons) == 1
        assert areas(polygons)[0] == pytest.approx(10000)

    def test_cells_tile_the_canvas(self):
        rng = random.Random(4)
        pts = [(rng.randint(-20, 320), rng.randint(-20, 220)) for _ in range(150)]
        polygons = compute_cells(pts, 300, 200)

        assert sum(areas(polygons)) == pytest.approx(300 * 200)
        for polygon in polygons:
            assert len(polygon) >= 3
            for x, y in polygon:
                assert -1e-6 <= x <= 300 + 1e-6
                assert -1e-6 <= y <= 200 + 1e-6

    def test_debug_summary(self, capsys):
        compute_cells([(10, 10), (10, 10), (90, 90)], 100, 100, debug=True)
        out = capsys.readouterr().out
        assert "TESSELLATION SUMMARY" in out
        assert "3 (2 unique)" in out

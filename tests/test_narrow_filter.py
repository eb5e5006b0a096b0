"""Tests for narrow point filtering."""

import pytest
from py_posgen.core.geometry import Point, is_breaking
from py_posgen.core.narrow_filter import half_width, filter_narrow_points


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(item == other for other in it) for item in sub)


class TestHalfWidth:

    @pytest.mark.parametrize("min_width,expected", [(1, 0), (2, 1), (3, 1), (4, 2), (5, 2), (7, 3)])
    def test_values(self, min_width, expected):
        assert half_width(min_width) == expected


class TestFilterNarrowPoints:
    """Test neighbourhood continuity filtering."""

    @pytest.fixture
    def ledge(self):
        return [Point(x, 5) for x in range(2, 8)]

    @pytest.fixture
    def broken_walk(self):
        """Two ledges of 5 points separated by a gap."""
        return [Point(x, 10) for x in range(0, 5)] + [Point(x, 10) for x in range(10, 15)]

    def test_ledge_ends_are_rejected(self, ledge):
        """Only points with two walkable neighbours on each side remain."""
        assert filter_narrow_points(ledge, 4) == [Point(4, 5), Point(5, 5)]

    def test_width_one_keeps_everything(self, ledge):
        assert filter_narrow_points(ledge, 1) == ledge

    def test_width_two(self, ledge):
        assert filter_narrow_points(ledge, 2) == ledge[1:-1]

    def test_too_short_walk(self, ledge):
        assert filter_narrow_points(ledge[:3], 4) == []
        assert filter_narrow_points([], 4) == []

    def test_break_rejects_neighbourhood(self, broken_walk):
        """Points whose window spans the gap are rejected."""
        assert filter_narrow_points(broken_walk, 4) == [Point(2, 10), Point(12, 10)]

    def test_result_is_subsequence(self, broken_walk):
        for min_width in range(1, 8):
            ok_points = filter_narrow_points(broken_walk, min_width)
            assert len(ok_points) <= len(broken_walk)
            assert _is_subsequence(ok_points, broken_walk)

    def test_kept_points_have_walkable_neighbours(self, broken_walk):
        """Every kept point has half_width non-breaking steps on each side."""
        hw = half_width(4)
        for point in filter_narrow_points(broken_walk, 4):
            i = broken_walk.index(point)
            assert i - hw >= 0
            assert i + hw <= len(broken_walk) - 1
            for d in range(i - hw, i + hw):
                assert not is_breaking(broken_walk[d], broken_walk[d + 1])

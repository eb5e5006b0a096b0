"""Removal of surface points that have too few walkable neighbours."""

import math
from typing import List, Sequence

from .geometry import Point, is_breaking


def half_width(min_width: int) -> int:
    """Number of neighbours needed on each side for a given minimum width."""
    return math.ceil((min_width - 1) / 2)


def filter_narrow_points(visited: Sequence[Point], min_width: int) -> List[Point]:
    """
    Keep the points of an ordered walk whose neighbourhood is continuous.

    Point i is kept when every step visited[d] -> visited[d + 1] for d in
    [i - hw, i + hw - 1] exists and is not breaking, hw being
    half_width(min_width). Points too close to either end of the walk are
    therefore always dropped.
    """
    hw = half_width(min_width)
    n = len(visited)
    walkable = [not is_breaking(visited[d], visited[d + 1]) for d in range(n - 1)]

    ok_points = []
    for i in range(n):
        first = i - hw
        last = i + hw - 1
        if first < 0 or last + 1 > n - 1:
            continue
        if all(walkable[first:last + 1]):
            ok_points.append(visited[i])
    return ok_points

"""
Ordering of surface points into a walk along the terrain silhouette.

Simple march-through: start at a corner and repeatedly step to the closest
remaining point. When that step would need a jump (see is_breaking), the walk
restarts from the leftmost remaining point instead, so that disconnected
pieces of the silhouette are visited left to right.
"""

import numpy as np
from typing import List, Sequence
import structlog

from .geometry import Point, is_breaking

logger = structlog.get_logger()


def order_surface_points(points: Sequence, start: Point = Point(0, 0)) -> List[Point]:
    """
    Order points by marching through nearest neighbours.

    The remaining set is fully re-sorted at every step with a stable sort, so
    ties are broken by the order left behind by the previous step. Output
    order depends on that rule; do not replace the sort with a spatial index
    unless it reproduces it exactly.

    Args:
        points: Unordered surface points
        start: Position the walk starts from (not part of the output)

    Returns:
        All input points, each exactly once, in walk order
    """
    remaining = np.asarray(points, dtype=np.int64).reshape(-1, 2)
    curr = Point(int(start[0]), int(start[1]))
    visited = []
    breaks = 0

    while len(remaining) > 0:
        # Sort remaining points by descending distance: nearest ends up last
        d2 = (remaining[:, 0] - curr.x) ** 2 + (remaining[:, 1] - curr.y) ** 2
        remaining = remaining[np.argsort(-d2, kind="stable")]

        if is_breaking(curr, remaining[-1]):
            # Jump to the leftmost remaining point instead
            remaining = remaining[np.argsort(-remaining[:, 0], kind="stable")]
            breaks += 1

        x, y = remaining[-1]
        remaining = remaining[:-1]
        curr = Point(int(x), int(y))
        visited.append(curr)

    logger.debug("Ordered surface points", count=len(visited), breaks=breaks)
    return visited

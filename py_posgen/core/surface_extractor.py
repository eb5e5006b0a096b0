"""
Surface point extraction from the vertical edge map.

A surface point is the topmost pixel of a vertical run of edge pixels: its
edge value is above the high threshold while the pixel right above it is
below the low threshold.
"""

import numpy as np
from typing import List, NamedTuple
import structlog

from ..config.thresholds import EDGE_HIGH_THRESHOLD, EDGE_LOW_THRESHOLD
from .geometry import Point
from .terrain_shape import TerrainGrid

logger = structlog.get_logger()


class Margins(NamedTuple):
    """Pixels excluded from scanning on each side of the terrain."""
    top: int
    right: int
    bottom: int
    left: int


def extract_surface_points(edges_y: TerrainGrid, margins: Margins) -> List[Point]:
    """
    Scan the edge map inside the margins and collect surface points.

    Args:
        edges_y: Vertical edge intensity grid
        margins: Scan margins

    Returns:
        Surface points in row-major scan order
    """
    plane = edges_y.plane

    # Row 0 has no pixel above it and can never be a transition
    y_start = max(margins.top, 1)
    y_end = edges_y.height - margins.bottom
    x_start = margins.left
    x_end = edges_y.width - margins.right

    if y_start >= y_end or x_start >= x_end:
        logger.debug("Scan window is empty", margins=margins._asdict(),
                     width=edges_y.width, height=edges_y.height)
        return []

    current = plane[y_start:y_end, x_start:x_end]
    above = plane[y_start - 1:y_end - 1, x_start:x_end]
    is_surface = (current > EDGE_HIGH_THRESHOLD) & (above < EDGE_LOW_THRESHOLD)

    # np.nonzero walks the window row by row, matching the scan order
    ys, xs = np.nonzero(is_surface)
    points = [Point(int(x) + x_start, int(y) + y_start) for y, x in zip(ys, xs)]

    logger.debug("Extracted surface points", count=len(points))
    return points

"""
Rejection sampling of sprite positions against the terrain mask.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional
import structlog

from ..config.thresholds import INSIDE_VALUE, SPRITE_MIN_INSIDE_PROBES
from .geometry import Point
from .terrain_shape import TerrainGrid

logger = structlog.get_logger()


@dataclass(frozen=True)
class SpritePlacement:
    """Outcome of a sprite placement search."""

    position: Optional[Point]  # top-left corner, None when nothing fit
    attempts: int

    @property
    def found(self) -> bool:
        return self.position is not None


def probe_points(top_left: Point, width: int, height: int) -> List[Point]:
    """
    Eight points around the rectangle anchored at top_left.

    Clockwise from the top-left corner: top-left, top-mid, top-right,
    mid-right, bottom-right, bottom-mid, bottom-left, mid-left. Corners are
    the rectangle's own outermost pixels.
    """
    x1, y1 = top_left
    x2 = x1 + width - 1
    y2 = y1 + height - 1
    xm = (x1 + x2) // 2
    ym = (y1 + y2) // 2
    return [
        Point(x1, y1),
        Point(xm, y1),
        Point(x2, y1),
        Point(x2, ym),
        Point(x2, y2),
        Point(xm, y2),
        Point(x1, y2),
        Point(x1, ym),
    ]


def count_inside(mask: TerrainGrid, probes: List[Point]) -> int:
    """Count probes on an inside mask pixel; probes off the grid are outside."""
    return sum(
        1 for x, y in probes
        if mask.contains(x, y) and mask.channel_at(x, y) == INSIDE_VALUE
    )


def find_sprite_position(
    mask: TerrainGrid,
    draw_point: Callable[[], Point],
    width: int,
    height: int,
    max_try: int,
) -> SpritePlacement:
    """
    Draw candidate top-left corners until one fits inside the terrain.

    A candidate fits when at least SPRITE_MIN_INSIDE_PROBES of its probe
    points are inside the mask. At most max_try candidates are drawn.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Invalid sprite size {width}x{height}")

    for attempt in range(1, max_try + 1):
        candidate = draw_point()
        if count_inside(mask, probe_points(candidate, width, height)) >= SPRITE_MIN_INSIDE_PROBES:
            logger.debug("Sprite placed", x=candidate.x, y=candidate.y, attempts=attempt)
            return SpritePlacement(position=candidate, attempts=attempt)

    logger.debug("No position found for sprite", width=width, height=height, attempts=max_try)
    return SpritePlacement(position=None, attempts=max_try)

"""Point type and the walkability test shared by ordering and filtering."""

from typing import NamedTuple

from ..config.thresholds import BREAKING_DISTANCE


class Point(NamedTuple):
    """Pixel coordinate on the terrain grid."""
    x: int
    y: int


def dist2(a, b) -> int:
    """Square distance between 2 points."""
    return (b[0] - a[0]) ** 2 + (b[1] - a[1]) ** 2


def is_breaking(a, b) -> bool:
    """
    Check whether stepping from a to b needs a jump.

    A step breaks when it is steeper than one pixel of rise per pixel of run
    (with one pixel of slack) or longer than BREAKING_DISTANCE.
    """
    diff_x = abs(b[0] - a[0])
    diff_y = abs(b[1] - a[1])
    if diff_x < diff_y - 1:
        return True
    return dist2(a, b) > BREAKING_DISTANCE ** 2

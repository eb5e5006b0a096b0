"""
Halton low-discrepancy sequence used as a seedable pseudo-random source.

https://en.wikipedia.org/wiki/Halton_sequence

Each generator owns its own HaltonSampler so that several terrains (one per
level, say) never share or disturb each other's sequence.
"""

from ..config.thresholds import HALTON_BASE_X, HALTON_BASE_Y


def halton(index: int, base: int) -> float:
    """Return the index-th element of the Halton sequence for base, in [0, 1)."""
    result = 0.0
    f = 1 / base
    i = index
    while i > 0:
        result = result + f * (i % base)
        i = i // base
        f = f / base
    return result


class HaltonSampler:
    """
    Two independent Halton axes with monotonically increasing counters.

    Every draw is offset by the seed and wrapped back into [0, 1), so two
    samplers with different seeds walk the same sequence from different
    starting offsets.
    """

    def __init__(self, seed: float, base_x: int = HALTON_BASE_X, base_y: int = HALTON_BASE_Y):
        self.seed = seed
        self.base_x = base_x
        self.base_y = base_y
        self.index_x = 0
        self.index_y = 0

    def _offset(self, value: float) -> float:
        return (value + self.seed) % 1.0

    def peek_x(self) -> float:
        """Value the next call to next_x() will return, without consuming it."""
        return self._offset(halton(self.index_x, self.base_x))

    def next_x(self) -> float:
        """Consume one index on the X axis."""
        value = self.peek_x()
        self.index_x += 1
        return value

    def next_y(self) -> float:
        """Consume one index on the Y axis."""
        value = self._offset(halton(self.index_y, self.base_y))
        self.index_y += 1
        return value

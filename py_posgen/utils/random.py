"""
Seed helpers.

Sampling itself is driven by the Halton sequence (see core.halton); the only
true randomness is the default seed drawn when none is given.
"""

import numpy as np


def new_seed() -> float:
    """Draw a fresh seed in [0, 1)."""
    return float(np.random.default_rng().random())

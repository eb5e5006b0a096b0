"""
Tuned constants used by surface extraction, ordering and sprite placement.

These values were picked empirically against real terrain art and have no
derivation beyond that; change them together with the fixtures in tests/.
"""

# Edge hysteresis on the edges_y channel
EDGE_HIGH_THRESHOLD = 100  # strictly above: edge pixel
EDGE_LOW_THRESHOLD = 50  # strictly below: non-edge pixel

# Two consecutive surface points further apart than this cannot be walked
BREAKING_DISTANCE = 5

# Mask channel value meaning "inside terrain"
INSIDE_VALUE = 255

# Sprite placement
SPRITE_MIN_INSIDE_PROBES = 7

# Halton bases for each sampling axis
HALTON_BASE_X = 2
HALTON_BASE_Y = 3

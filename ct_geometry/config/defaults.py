"""Default configuration and constants for CT scan geometry generation."""

import math

# Upper bound (exclusive) of the rotation sweep
HALF_TURN = math.pi

# Radius of rotation used when a config omits it
DEFAULT_RADIUS = 1.0

# Baseline direction of every parallel beam
UPWARD_DIRECTION = (0.0, 1.0)

"""Default parameters for bounce curve generation.

Defined separately to avoid circular imports between the builder,
the generators and the registry.
"""

# Height retained from one apex to the next (0.5 matches the classic Penner bounce)
DEFAULT_DECAY_RATIO = 0.5

# Apex height below which the ball is considered at rest
DEFAULT_REST_THRESHOLD = 0.01

DEFAULT_BOUNCE_PARAMS = {
    "decay_ratio": DEFAULT_DECAY_RATIO,
    "rest_threshold": DEFAULT_REST_THRESHOLD,
}

# Sample count used when a definition does not override it
DEFAULT_SAMPLES = 64

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_GYM_CAPACITY = 50
GYM_CAPACITY_KEY = "gym_capacity"

# Crowd thresholds, in percent of capacity.
LOW_CROWD_MAX_RATE = 40
MODERATE_CROWD_MAX_RATE = 80
FULL_CROWD_MIN_RATE = 100

GENERATED_PASSWORD_BYTES = 16

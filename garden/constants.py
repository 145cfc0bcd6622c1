"""Simulation constants. Growth is a percentage; 100 is an inclusive ceiling."""

GRID_DEFAULT = 16
TICK_MS = 600

EMPTY_GROWTH = 0.0
MAX_GROWTH = 100.0
# Seed planted on an empty tile starts here.
SPROUT_GROWTH = 4.0
# Per-tick increment is TICK_MIN_STEP + U[0,1) * TICK_STEP_SPAN, i.e. [1, 7).
TICK_MIN_STEP = 1.0
TICK_STEP_SPAN = 6.0

# Bulk reseed: planted tiles get RANDOM_MIN_GROWTH + U * RANDOM_GROWTH_SPAN, i.e. [10, 90).
RANDOM_CHANCE = 0.18
RANDOM_MIN_GROWTH = 10.0
RANDOM_GROWTH_SPAN = 80.0

# Stage thresholds: growth < SPROUT_MAX sprout, < GROWING_MAX growing, else bloom.
SPROUT_MAX = 30.0
GROWING_MAX = 70.0

STATE_KEY = "pixelgarden_state"
SCHEMA_VERSION = 1
# Largest side length accepted from storage or settings.
MAX_GRID = 256

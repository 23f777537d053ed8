from __future__ import annotations

# Board geometry is fixed; nothing in the game resizes the grid at runtime.
ROWS = 24
COLUMNS = 10
ASPECT_RATIO = 4.0 / 3.0

# Falling speed in grid rows per second
BASE_SPEED = 1.0
SPEED_PER_LEVEL = 0.5

# Rate limits for held inputs (milliseconds since the last accepted action)
MOVEMENT_DELAY_MS = 75
INPUT_DELAY_MS = 200

DESIRED_FPS = 60
SPAWN_X = 4.0
SPAWN_Y = 1.0
# Longest stall the fixed-step loop catches up on; older time is dropped
MAX_CATCH_UP_TICKS = 5

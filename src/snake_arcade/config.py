from __future__ import annotations

GRID_SIZE = 20
CELL_SIZE = 20

# Milliseconds between ticks.
TICK_MS = 100
# Frame cap for the render loop; ticks are driven by the timer, not by this.
FPS = 60

FOOD_REWARD = 10
# Random draws before food placement falls back to a row-major scan.
FOOD_ATTEMPTS = 64

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
DARK_GREEN = (0, 170, 0)
OVERLAY = (0, 0, 0, 180)

from __future__ import annotations

# Grid defaults (classroom of 3x3 desks)
DEFAULT_ROWS = 3
DEFAULT_COLS = 3

# Attempt driver defaults
MAX_ATTEMPTS = 1000
RANDOM_SEED = None  # None -> seeded from OS entropy

# Placement also rejects seats next to someone who flagged the candidate
CHECK_OCCUPANT_FLAGS = True

# Text rendering
CELL_LABEL_WIDTH = 10

# Image rendering (RGB)
IMAGE_CELL_PX = 96
IMAGE_OCCUPIED_COLOR = (198, 219, 239)
IMAGE_EMPTY_COLOR = (255, 255, 255)
IMAGE_GRID_COLOR = (90, 90, 90)
IMAGE_TEXT_COLOR = (0, 0, 0)
IMAGE_VIOLATION_COLOR = (214, 39, 40)

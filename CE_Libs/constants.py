"""
Constants and configuration values for Coral Editor.

This module centralizes all constant values, magic numbers, and
default settings used throughout the application.
"""

# View constants
DEFAULT_FIT_MARGIN = 0.95
MIN_FIT_MARGIN = 0.0
MAX_FIT_MARGIN = 1.0

# Pixel rounding policies for clamped selection corners
ROUNDING_FLOOR = "floor"
ROUNDING_ROUND = "round"
ROUNDING_POLICIES = (ROUNDING_FLOOR, ROUNDING_ROUND)
DEFAULT_ROUNDING = ROUNDING_FLOOR

# Selection resolution outcomes
OUTCOME_CROP = "crop"
OUTCOME_NOOP = "noop"
OUTCOME_DEFERRED = "deferred"

# Button identities
BUTTON_LEFT = "left"
BUTTON_RIGHT = "right"
BUTTON_MIDDLE = "middle"
BUTTON_ESCAPE = "escape"

# UI constants
WINDOW_TITLE = "Coral Editor"
DEFAULT_WINDOW_WIDTH = 200
DEFAULT_WINDOW_HEIGHT = 200

# Render colors (Qt color strings)
BACKGROUND_COLOR = "#00ff00"
SELECTION_OUTLINE_COLOR = "#000000"
SELECTION_OUTLINE_WIDTH = 1.0

# File naming
DEFAULT_INPUT_PATH = "bladerunner.jpg"
DEFAULT_OUTPUT_PATH = "coral-editor-out.png"
DEFAULT_OUTPUT_FORMAT = "PNG"
STDIN_SOURCE = "-"
IMAGE_MODE = "RGBA"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

"""Shared default values for user-facing configuration settings."""

# Layout
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 800

# Output
DEFAULT_OUTPUT_PATH = "collage.png"
DEFAULT_BACKGROUND = "#00000000"
DEFAULT_SHOW = False

"""Shared default values for user-facing configuration settings."""

# Layout
DEFAULT_SPACING = 2
DEFAULT_MAX_WIDTH = 600
DEFAULT_MAX_HEIGHT = 450
# Discord dark theme background
DEFAULT_BACKGROUND_COLOR = "#2f3136"

# Loader
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_EDGE = 1024

# Output
DEFAULT_FILENAME = "grid.png"
DEFAULT_COMPRESS_LEVEL = 6

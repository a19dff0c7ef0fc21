"""
Constants used internally by the multi-image grid package.

These are layout policy values that should not be overridden via
config files or CLI arguments.
"""

from fractions import Fraction

# Accepted number of images per grid
MIN_IMAGES = 2
MAX_IMAGES = 4

# Canvas height / width per image count
RATIO_WIDE = Fraction(9, 16)
RATIO_STANDARD = Fraction(3, 4)

# Share of the canvas width given to the featured image of a triple
FEATURE_COLUMN_FRACTION = Fraction(3, 5)

# Internal color constants
COLOR_MODE_RGB = "RGB"

# Output encoding
PNG_FORMAT = "PNG"
PNG_SUFFIX = ".png"
ATTACHMENT_SCHEME = "attachment://"

# Stacked mode only forwards web links
HTTP_URL_PATTERN = r"^https?://"

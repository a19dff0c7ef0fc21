"""Input validation helpers applied before any loading or drawing."""

from __future__ import annotations

from multi_image_grid.constants import MAX_IMAGES, MIN_IMAGES
from multi_image_grid.errors import (
    InvalidConfigurationError,
    InvalidImageCountError,
)


def validate_image_count(count: int) -> None:
    """Ensure a grid request names between two and four images."""
    if count < MIN_IMAGES or count > MAX_IMAGES:
        msg = (
            f"Image count must be between {MIN_IMAGES} and {MAX_IMAGES}, "
            f"got {count}"
        )
        raise InvalidImageCountError(msg)


def validate_canvas_bounds(max_width: int, max_height: int) -> None:
    """Ensure the canvas budget is strictly positive."""
    if max_width <= 0 or max_height <= 0:
        msg = (
            "max_width and max_height must be positive, "
            f"got {max_width}x{max_height}"
        )
        raise InvalidConfigurationError(msg)


def validate_spacing(spacing: int) -> None:
    """Ensure the gap between tiles is not negative."""
    if spacing < 0:
        msg = f"spacing must not be negative, got {spacing}"
        raise InvalidConfigurationError(msg)

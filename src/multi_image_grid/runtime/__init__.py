"""Runtime utilities for request validation and version lookup."""

from .validation import (
    validate_canvas_bounds,
    validate_image_count,
    validate_spacing,
)
from .version import resolve_project_version

__all__ = [
    "resolve_project_version",
    "validate_canvas_bounds",
    "validate_image_count",
    "validate_spacing",
]

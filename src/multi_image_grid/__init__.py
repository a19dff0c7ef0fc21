"""Public package exports for the multi-image grid composer."""

from __future__ import annotations

from .api import create_multi_image_data, merge_images_in_grid
from .config import GridConfig, LayoutConfig, LoaderConfig, OutputConfig
from .errors import (
    ImageLoadError,
    InvalidConfigurationError,
    InvalidImageCountError,
    MultiImageError,
)
from .image_grid import GridAttachment, make_grid
from .stacked import StackedImageData, build_stacked_image_data

__all__ = [
    "GridAttachment",
    "GridConfig",
    "ImageLoadError",
    "InvalidConfigurationError",
    "InvalidImageCountError",
    "LayoutConfig",
    "LoaderConfig",
    "MultiImageError",
    "OutputConfig",
    "StackedImageData",
    "build_stacked_image_data",
    "create_multi_image_data",
    "make_grid",
    "merge_images_in_grid",
]

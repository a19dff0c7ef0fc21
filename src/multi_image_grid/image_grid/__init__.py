"""
Grid composition split into core geometry, layouts, and naming helpers.

The package exposes the most commonly used entry points directly so
callers rarely need to import the submodules.
"""

from __future__ import annotations

from . import core, layouts, naming
from .core import (
    CanvasPlan,
    Rect,
    SourceCrop,
    cover_crop,
    draw_cover,
    size_canvas,
    target_ratio,
    to_rgb,
)
from .layouts import (
    GridLayout,
    layout_rects,
    make_grid,
)
from .naming import (
    GridAttachment,
    attachment_url,
    default_grid_name,
    encode_png,
    ensure_png_name,
    save_grid,
)

__all__ = [
    "CanvasPlan",
    "GridAttachment",
    "GridLayout",
    "Rect",
    "SourceCrop",
    "attachment_url",
    "core",
    "cover_crop",
    "default_grid_name",
    "draw_cover",
    "encode_png",
    "ensure_png_name",
    "layout_rects",
    "layouts",
    "make_grid",
    "naming",
    "save_grid",
    "size_canvas",
    "target_ratio",
    "to_rgb",
]

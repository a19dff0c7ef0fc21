"""Layout templates and grid composition for two to four images."""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

from PIL import Image

from multi_image_grid.constants import COLOR_MODE_RGB, FEATURE_COLUMN_FRACTION
from multi_image_grid.errors import InvalidConfigurationError
from multi_image_grid.image_grid.core import (
    Rect,
    draw_cover,
    size_canvas,
    to_rgb,
)
from multi_image_grid.logging_utils import logger
from multi_image_grid.runtime.validation import (
    validate_image_count,
    validate_spacing,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from multi_image_grid.config import LayoutConfig


class GridLayout(Enum):
    """Closed set of templates, keyed by the number of images they hold."""

    PAIR = 2
    TRIPLE = 3
    QUAD = 4

    @classmethod
    def for_count(cls, count: int) -> GridLayout:
        """Return the template for ``count`` images."""
        validate_image_count(count)
        return cls(count)

    def rects(self, width: int, height: int, spacing: int) -> list[Rect]:
        """Return one tile per image, in input order."""
        return _TEMPLATES[self](width, height, spacing)


def _layout_pair(w: int, h: int, spacing: int) -> list[Rect]:
    """Return two equal full-height columns side by side."""
    tile_w = (w - spacing) // 2
    return [
        Rect.from_xywh(0, 0, tile_w, h),
        Rect.from_xywh(tile_w + spacing, 0, tile_w, h),
    ]


def _layout_triple(w: int, h: int, spacing: int) -> list[Rect]:
    """Return a featured left column plus two stacked right cells."""
    left_w = math.floor(w * FEATURE_COLUMN_FRACTION)
    right_w = w - left_w - spacing
    half_h = (h - spacing) // 2
    right_x = left_w + spacing
    return [
        Rect.from_xywh(0, 0, left_w, h),
        Rect.from_xywh(right_x, 0, right_w, half_h),
        Rect.from_xywh(right_x, half_h + spacing, right_w, half_h),
    ]


def _layout_quad(w: int, h: int, spacing: int) -> list[Rect]:
    """Return a 2x2 grid in row-major order."""
    tile_w = (w - spacing) // 2
    tile_h = (h - spacing) // 2
    positions = [
        (0, 0),
        (tile_w + spacing, 0),
        (0, tile_h + spacing),
        (tile_w + spacing, tile_h + spacing),
    ]
    return [Rect.from_xywh(x, y, tile_w, tile_h) for x, y in positions]


_TEMPLATES: dict[GridLayout, Callable[[int, int, int], list[Rect]]] = {
    GridLayout.PAIR: _layout_pair,
    GridLayout.TRIPLE: _layout_triple,
    GridLayout.QUAD: _layout_quad,
}


def layout_rects(
    count: int,
    canvas_w: int,
    canvas_h: int,
    spacing: int,
) -> list[Rect]:
    """
    Return the tiles for ``count`` images on the given canvas.

    Adjacent tiles are separated by ``spacing`` pixels. Raises
    InvalidConfigurationError when the spacing leaves no room for one
    of the tiles.
    """
    validate_spacing(spacing)
    rects = GridLayout.for_count(count).rects(canvas_w, canvas_h, spacing)
    for rect in rects:
        if rect.w <= 0 or rect.h <= 0:
            msg = (
                f"spacing {spacing} leaves no room for {count} tiles on a "
                f"{canvas_w}x{canvas_h} canvas"
            )
            raise InvalidConfigurationError(msg)
    return rects


def make_grid(
    images: Sequence[Image.Image],
    config: LayoutConfig,
) -> Image.Image:
    """
    Compose two to four images into one fixed-ratio canvas.

    The canvas is filled with the background color, then each image is
    cover-fitted into its tile in input order. Inputs are not modified.
    """
    count = len(images)
    validate_image_count(count)

    plan = size_canvas(count, config.max_width, config.max_height)
    rects = layout_rects(count, plan.width, plan.height, config.spacing)
    bg_color = config.background_rgb
    logger.debug(
        "Composing %d images on %dx%d canvas: %s",
        count, plan.width, plan.height, rects,
    )

    canvas = Image.new(COLOR_MODE_RGB, plan.size(), bg_color)
    for img, rect in zip(images, rects, strict=True):
        draw_cover(canvas, to_rgb(img, bg_color=bg_color), rect)
    return canvas

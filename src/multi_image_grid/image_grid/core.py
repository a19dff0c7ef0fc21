"""Core geometry and painting primitives for multi-image grids."""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction

from PIL import Image

from multi_image_grid.constants import (
    COLOR_MODE_RGB,
    RATIO_STANDARD,
    RATIO_WIDE,
)
from multi_image_grid.runtime.validation import (
    validate_canvas_bounds,
    validate_image_count,
)

_RGB = tuple[int, int, int]

_PAIR_COUNT = 2


@dataclass(frozen=True)
class Rect:
    """Simple rectangle with convenience accessors."""

    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def from_xywh(cls, x: int, y: int, width: int, height: int) -> Rect:
        """Build a rectangle from its top left corner and size."""
        return cls(x, y, x + width, y + height)

    @property
    def w(self) -> int:
        """Width."""
        return self.x1 - self.x0

    @property
    def h(self) -> int:
        """Height."""
        return self.y1 - self.y0

    def size(self) -> tuple[int, int]:
        """Return (w, h)."""
        return self.w, self.h

    def intersects(self, other: Rect) -> bool:
        """Return True when the two rectangles share any pixel."""
        return (
            self.x0 < other.x1 and other.x0 < self.x1
            and self.y0 < other.y1 and other.y0 < self.y1
        )


@dataclass(frozen=True)
class SourceCrop:
    """Region of a source image to sample, in source pixel coordinates."""

    x: float
    y: float
    w: float
    h: float

    @property
    def box(self) -> tuple[float, float, float, float]:
        """Pillow style (left, upper, right, lower) box."""
        return self.x, self.y, self.x + self.w, self.y + self.h

    @property
    def aspect(self) -> float:
        """Width divided by height."""
        return self.w / self.h


@dataclass(frozen=True)
class CanvasPlan:
    """Final canvas dimensions for one grid."""

    width: int
    height: int

    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return self.width, self.height


def to_rgb(img: Image.Image, *, bg_color: _RGB) -> Image.Image:
    """Convert PIL image to RGB, alpha compositing if needed."""
    if img.mode == COLOR_MODE_RGB:
        return img
    if img.mode in ("RGBA", "LA", "P", "PA"):
        bg = Image.new("RGBA", img.size, (*bg_color, 255))
        comp = Image.alpha_composite(bg, img.convert("RGBA"))
        return comp.convert(COLOR_MODE_RGB)
    return img.convert(COLOR_MODE_RGB)


def target_ratio(count: int) -> Fraction:
    """Return the canvas height / width ratio used for ``count`` images."""
    validate_image_count(count)
    return RATIO_WIDE if count == _PAIR_COUNT else RATIO_STANDARD


def size_canvas(count: int, max_width: int, max_height: int) -> CanvasPlan:
    """
    Choose the largest canvas with the target ratio inside the budget.

    The full ``max_width`` is used unless the resulting height would
    exceed ``max_height``; in that case the height is pinned to the cap
    and the width shrinks to keep the ratio. Both dimensions are
    floored.
    """
    validate_canvas_bounds(max_width, max_height)
    ratio = target_ratio(count)

    ideal_height = math.floor(max_width * ratio)
    if ideal_height <= max_height:
        return CanvasPlan(width=max_width, height=ideal_height)
    return CanvasPlan(width=math.floor(max_height / ratio), height=max_height)


def cover_crop(
    image_w: int,
    image_h: int,
    dest_w: int,
    dest_h: int,
) -> SourceCrop:
    """
    Return the centered source region that covers a destination box.

    The crop has the destination's aspect ratio and keeps the full
    source extent along the axis that has no excess, so scaling it onto
    the destination fills it without letterboxing or distortion.
    """
    if min(image_w, image_h, dest_w, dest_h) <= 0:
        msg = (
            "Image and destination sizes must be positive, got "
            f"{image_w}x{image_h} -> {dest_w}x{dest_h}"
        )
        raise ValueError(msg)

    image_aspect = image_w / image_h
    dest_aspect = dest_w / dest_h

    if image_aspect > dest_aspect:
        crop_h = float(image_h)
        crop_w = min(float(image_w), image_h * dest_aspect)
        return SourceCrop((image_w - crop_w) / 2, 0.0, crop_w, crop_h)

    crop_w = float(image_w)
    crop_h = min(float(image_h), image_w / dest_aspect)
    return SourceCrop(0.0, (image_h - crop_h) / 2, crop_w, crop_h)


def draw_cover(canvas: Image.Image, img: Image.Image, rect: Rect) -> None:
    """Sample the cover crop of ``img`` and paste it scaled into ``rect``."""
    crop = cover_crop(img.width, img.height, rect.w, rect.h)
    tile = img.resize(
        rect.size(),
        Image.Resampling.LANCZOS,
        box=crop.box,
    )
    canvas.paste(tile, (rect.x0, rect.y0))

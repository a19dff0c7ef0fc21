"""
Public entry points shared by the CLI, bots, and tests.

``merge_images_in_grid`` renders a single attachment from two to four
sources. ``create_multi_image_data`` picks between that grid mode and
the non-rendering stacked mode so callers have one function to call
regardless of how they want the images shown.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Literal

from multi_image_grid.config import GridConfig, build_grid_config
from multi_image_grid.errors import InvalidConfigurationError
from multi_image_grid.image_grid import (
    GridAttachment,
    encode_png,
    ensure_png_name,
    make_grid,
)
from multi_image_grid.loader import fetch_image, load_images
from multi_image_grid.logging_utils import logger
from multi_image_grid.runtime.validation import validate_image_count
from multi_image_grid.stacked import StackedImageData, build_stacked_image_data

if TYPE_CHECKING:  # pragma: no cover
    from multi_image_grid.loader import ImageFetcher

GridMode = Literal["grid", "stacked"]

MODE_CHOICES: tuple[GridMode, ...] = ("grid", "stacked")


def merge_images_in_grid(
    sources: Sequence[str],
    config: GridConfig | None = None,
    *,
    fetch: ImageFetcher = fetch_image,
) -> GridAttachment:
    """
    Load two to four images and compose them into a PNG attachment.

    The image count is checked before anything is fetched. If any image
    fails to load the whole request fails with ImageLoadError; no grid
    is produced from the remaining images.
    """
    validate_image_count(len(sources))
    cfg = config or GridConfig()

    images = load_images(sources, cfg.loader, fetch=fetch)
    grid = make_grid(images, cfg.layout)

    filename = ensure_png_name(cfg.output.filename)
    data = encode_png(grid, compress_level=cfg.output.compress_level)
    logger.debug(
        "Encoded %dx%d grid as %s (%d bytes)",
        grid.width, grid.height, filename, len(data),
    )
    return GridAttachment(data=data, filename=filename)


def create_multi_image_data(
    mode: str | None,
    image_urls: Sequence[str],
    options: Mapping[str, Any] | None = None,
    *,
    fetch: ImageFetcher = fetch_image,
) -> GridAttachment | StackedImageData:
    """
    Build either a grid attachment or stacked embed data.

    In ``grid`` mode ``options`` is validated as a :class:`GridConfig`
    mapping (``layout``, ``loader`` and ``output`` sections). In
    ``stacked`` mode the only recognized option is ``shared_url``.
    """
    if not mode:
        msg = "mode is required"
        raise InvalidConfigurationError(msg)
    if isinstance(image_urls, str) or not isinstance(image_urls, Sequence):
        msg = "image_urls must be a list of URLs"
        raise InvalidConfigurationError(msg)

    if mode == "grid":
        return merge_images_in_grid(
            image_urls, build_grid_config(options), fetch=fetch,
        )
    if mode == "stacked":
        shared_url = (options or {}).get("shared_url")
        return build_stacked_image_data(image_urls, shared_url=shared_url)

    msg = f"Unknown mode: {mode}"
    raise InvalidConfigurationError(msg)


__all__ = [
    "MODE_CHOICES",
    "GridMode",
    "create_multi_image_data",
    "merge_images_in_grid",
]

"""
Stacked embed mode: several embeds grouped by a shared URL.

Nothing is rendered here. The accepted links are meant to be placed in
separate embeds that all carry the same ``shared_url`` so the chat
client shows them as one gallery.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from multi_image_grid.errors import (
    InvalidConfigurationError,
    InvalidImageCountError,
)
from multi_image_grid.loader import is_http_url
from multi_image_grid.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


@dataclass(frozen=True, slots=True)
class StackedImageData:
    """Links for a stacked gallery and the URL that groups them."""

    image_urls: list[str] = field(default_factory=list)
    shared_url: str | None = None


def build_stacked_image_data(
    image_urls: Sequence[object],
    shared_url: str | None = None,
) -> StackedImageData:
    """Keep the HTTP(S) links from ``image_urls`` in their original order."""
    if not image_urls:
        msg = "Please supply at least one image URL"
        raise InvalidImageCountError(msg)

    accepted = [
        u for u in image_urls if isinstance(u, str) and is_http_url(u)
    ]
    if not accepted:
        msg = "None of the provided URLs are valid HTTP/S links"
        raise InvalidConfigurationError(msg)

    dropped = len(image_urls) - len(accepted)
    if dropped:
        logger.debug("Dropped %d non HTTP/S entries", dropped)
    return StackedImageData(image_urls=accepted, shared_url=shared_url or None)

"""
Fetching and decoding of grid source images.

Sources are HTTP(S) URLs or local file paths. Loading is all-or-nothing:
if any source fails, the whole request is rejected with
:class:`ImageLoadError` rather than composing a partial grid.
"""

from __future__ import annotations

import io
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING

import requests
from PIL import Image

from multi_image_grid.config import LoaderConfig
from multi_image_grid.config_defaults import DEFAULT_MAX_EDGE, DEFAULT_TIMEOUT
from multi_image_grid.constants import HTTP_URL_PATTERN
from multi_image_grid.errors import ImageLoadError
from multi_image_grid.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    ImageFetcher = Callable[..., Image.Image]

_URL_RE = re.compile(HTTP_URL_PATTERN, re.IGNORECASE)

# Failures that count as "this image did not load"
_LOAD_ERRORS = (
    requests.RequestException,
    OSError,
    Image.DecompressionBombError,
)


def is_http_url(source: str) -> bool:
    """Return True for ``http://`` and ``https://`` links."""
    return bool(_URL_RE.match(source))


def _read_source(source: str, timeout: float) -> bytes:
    """Return the raw bytes behind a URL or file path."""
    if is_http_url(source):
        resp = requests.get(source, timeout=timeout)
        resp.raise_for_status()
        return resp.content
    return Path(source).read_bytes()


def decode_image(
    data: bytes,
    *,
    max_edge: int = DEFAULT_MAX_EDGE,
) -> Image.Image:
    """
    Decode image bytes and bound the longest side by ``max_edge``.

    Only the first frame of animated formats is kept. Aspect ratio is
    preserved when downscaling; smaller images are left untouched.
    """
    img = Image.open(io.BytesIO(data))
    img.load()
    img.thumbnail((max_edge, max_edge), Image.Resampling.LANCZOS)
    return img


def fetch_image(
    source: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    max_edge: int = DEFAULT_MAX_EDGE,
) -> Image.Image:
    """
    Load a single image from a URL or a local path.

    Args:
        source: HTTP(S) URL or filesystem path.
        timeout: Seconds to wait for a remote server.
        max_edge: Upper bound for the decoded width and height.

    Returns:
        The decoded PIL image.

    Raises:
        requests.RequestException: If the download fails.
        OSError: If the file is missing or not a readable image.

    """
    return decode_image(_read_source(source, timeout), max_edge=max_edge)


def load_images(
    sources: Sequence[str],
    config: LoaderConfig | None = None,
    *,
    fetch: ImageFetcher = fetch_image,
) -> list[Image.Image]:
    """
    Load every source concurrently, preserving input order.

    Each failure is logged with its source. If any source fails, raise
    ImageLoadError naming all failed sources; no partial list is
    returned.
    """
    cfg = config or LoaderConfig.model_validate({})
    loaded: list[Image.Image] = []
    failed: list[str] = []

    with ThreadPoolExecutor(max_workers=max(1, len(sources))) as pool:
        futures = [
            pool.submit(
                fetch, source, timeout=cfg.timeout, max_edge=cfg.max_edge,
            )
            for source in sources
        ]
        for source, future in zip(sources, futures, strict=True):
            try:
                loaded.append(future.result())
            except _LOAD_ERRORS as exc:
                logger.warning("Failed to load image %s: %s", source, exc)
                failed.append(source)

    if failed:
        msg = (
            f"{len(failed)} of {len(sources)} images failed to load: "
            + ", ".join(failed)
        )
        raise ImageLoadError(msg, failed)
    return loaded

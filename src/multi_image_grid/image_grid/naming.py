"""Filename, encoding, and persistence helpers for grid outputs."""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from multi_image_grid.config_defaults import DEFAULT_COMPRESS_LEVEL
from multi_image_grid.constants import (
    ATTACHMENT_SCHEME,
    PNG_FORMAT,
    PNG_SUFFIX,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from PIL import Image


@dataclass(frozen=True, slots=True)
class GridAttachment:
    """Encoded grid ready to be attached to an outbound chat message."""

    data: bytes
    filename: str

    @property
    def image_url(self) -> str:
        """Reference an embed uses to point at the attached file."""
        return attachment_url(self.filename)


def ensure_png_name(filename: str) -> str:
    """Return ``filename`` with a ``.png`` suffix."""
    path = Path(filename)
    # Path(".png").suffix is empty; the bare name already ends in .png
    if path.name.lower().endswith(PNG_SUFFIX):
        return filename
    return str(path.with_suffix(PNG_SUFFIX))


def attachment_url(filename: str) -> str:
    """Build the ``attachment://`` reference for an attached file."""
    return f"{ATTACHMENT_SCHEME}{filename}"


def encode_png(
    image: Image.Image,
    *,
    compress_level: int = DEFAULT_COMPRESS_LEVEL,
) -> bytes:
    """Serialize ``image`` to PNG bytes."""
    buffer = io.BytesIO()
    image.save(buffer, format=PNG_FORMAT, compress_level=compress_level)
    return buffer.getvalue()


def default_grid_name(sources: Sequence[str]) -> str:
    """
    Build a deterministic filename for a grid of ``sources``.

    Uses the stem of each source (URL path or file path) so the same
    inputs always map to the same name.
    """
    def stem(source: str) -> str:
        tail = source.rstrip("/").rsplit("/", 1)[-1].split("?", 1)[0]
        return Path(tail).stem.replace(" ", "_") or "image"

    return "grid_" + "_".join(stem(s) for s in sources) + PNG_SUFFIX


def save_grid(attachment: GridAttachment, out_path: Path) -> Path:
    """Write the encoded grid to ``out_path``, creating parent folders."""
    if not isinstance(out_path, Path):
        msg = "out_path must be a pathlib.Path"
        raise TypeError(msg)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(attachment.data)
    return out_path

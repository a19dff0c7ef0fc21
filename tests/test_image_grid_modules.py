"""Tests covering the image_grid naming and encoding helpers."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from multi_image_grid.image_grid import naming

pytestmark = pytest.mark.visual


def test_attachment_url_reference() -> None:
    attachment = naming.GridAttachment(data=b"", filename="grid.png")
    assert attachment.image_url == "attachment://grid.png"


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("grid.png", "grid.png"),
        ("grid.PNG", "grid.PNG"),
        ("photo.jpg", "photo.png"),
        ("grid", "grid.png"),
        (".png", ".png"),
    ],
)
def test_ensure_png_name(filename: str, expected: str) -> None:
    assert naming.ensure_png_name(filename) == expected


def test_encode_png_round_trips_size(sample_image: Image.Image) -> None:
    """Encoded bytes are a PNG of the same dimensions."""
    data = naming.encode_png(sample_image, compress_level=1)
    assert data.startswith(b"\x89PNG")
    with Image.open(io.BytesIO(data)) as decoded:
        assert decoded.format == "PNG"
        assert decoded.size == sample_image.size


def test_default_grid_name_from_paths_and_urls() -> None:
    """Names are derived from source stems, URLs lose their query."""
    name = naming.default_grid_name(
        ["photos/cat pic.jpg", "https://cdn.example.com/img/dog.png?w=800"],
    )
    assert name == "grid_cat_pic_dog.png"


def test_save_grid_creates_parents(tmp_path: Path) -> None:
    attachment = naming.GridAttachment(data=b"abc", filename="g.png")
    out = tmp_path / "nested" / "dir" / "g.png"
    assert naming.save_grid(attachment, out) == out
    assert out.read_bytes() == b"abc"


def test_save_grid_requires_path(tmp_path: Path) -> None:
    attachment = naming.GridAttachment(data=b"abc", filename="g.png")
    with pytest.raises(TypeError, match="pathlib.Path"):
        naming.save_grid(attachment, str(tmp_path / "g.png"))  # type: ignore[arg-type]

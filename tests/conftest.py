"""
Test configuration and shared fixtures for multi_image_grid.

This module defines reusable pytest fixtures for generating solid and
patterned images, writing them to disk, and routing the package logger
through caplog.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from multi_image_grid.config import LayoutConfig
from multi_image_grid.constants import COLOR_MODE_RGB
from multi_image_grid.logging_utils import logger

RED = (255, 0, 0)


@pytest.fixture
def make_image() -> Callable[..., Image.Image]:
    """Factory for solid RGB images of a given size and color."""

    def _make(
        width: int,
        height: int,
        color: tuple[int, int, int] = RED,
    ) -> Image.Image:
        return Image.new(COLOR_MODE_RGB, (width, height), color=color)

    return _make


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a sample 160x90 red RGB PIL image."""
    return Image.new(COLOR_MODE_RGB, (160, 90), color=RED)


@pytest.fixture
def write_image(tmp_path: Path) -> Callable[..., Path]:
    """Save a solid image under tmp_path and return its path."""

    def _write(
        name: str,
        size: tuple[int, int] = (160, 90),
        color: tuple[int, int, int] = RED,
    ) -> Path:
        path = tmp_path / name
        Image.new(COLOR_MODE_RGB, size, color=color).save(path)
        return path

    return _write


@pytest.fixture
def layout_config() -> LayoutConfig:
    """Default layout configuration."""
    return LayoutConfig()


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the package logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)

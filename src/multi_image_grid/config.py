"""
Configuration schema and loader for the multi-image grid package.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from tomlkit.exceptions import ParseError

from multi_image_grid.config_defaults import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_COMPRESS_LEVEL,
    DEFAULT_FILENAME,
    DEFAULT_MAX_EDGE,
    DEFAULT_MAX_HEIGHT,
    DEFAULT_MAX_WIDTH,
    DEFAULT_SPACING,
    DEFAULT_TIMEOUT,
)
from multi_image_grid.errors import InvalidConfigurationError

_HEX_RGB_LENGTH = 6
_PNG_COMPRESS_MAX = 9


def parse_hex_color(text: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` strings into RGB triples."""
    stripped = text.strip().lstrip("#")
    if len(stripped) != _HEX_RGB_LENGTH:
        msg = "color must look like #rrggbb"
        raise ValueError(msg)
    try:
        red = int(stripped[0:2], 16)
        green = int(stripped[2:4], 16)
        blue = int(stripped[4:6], 16)
    except ValueError as exc:
        msg = "color contains invalid hex digits"
        raise ValueError(msg) from exc
    return red, green, blue


class LayoutConfig(BaseModel):
    """Canvas budget, tile spacing, and background fill for one grid."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    spacing: int = Field(DEFAULT_SPACING, ge=0)
    max_width: int = Field(DEFAULT_MAX_WIDTH, gt=0)
    max_height: int = Field(DEFAULT_MAX_HEIGHT, gt=0)
    background_color: str = Field(DEFAULT_BACKGROUND_COLOR)

    @field_validator("background_color")
    @classmethod
    def _normalize_color(cls, value: str) -> str:
        red, green, blue = parse_hex_color(value)
        return f"#{red:02x}{green:02x}{blue:02x}"

    @property
    def background_rgb(self) -> tuple[int, int, int]:
        """Background color as an RGB triple."""
        return parse_hex_color(self.background_color)


class LoaderConfig(BaseModel):
    """Control how source images are fetched and decoded."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    max_edge: int = Field(DEFAULT_MAX_EDGE, gt=0)


class OutputConfig(BaseModel):
    """Configure the attachment filename and PNG compression."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    filename: str = Field(DEFAULT_FILENAME, min_length=1)
    compress_level: int = Field(
        DEFAULT_COMPRESS_LEVEL,
        ge=0,
        le=_PNG_COMPRESS_MAX,
    )


class GridConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    loader: LoaderConfig = Field(
        default_factory=lambda: LoaderConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


def build_grid_config(data: Mapping[str, Any] | None = None) -> GridConfig:
    """
    Validate a mapping of config sections into a :class:`GridConfig`.

    Pydantic validation failures are re-raised as
    :class:`InvalidConfigurationError` so callers see one error kind.
    """
    try:
        return GridConfig.model_validate(dict(data or {}))
    except ValidationError as exc:
        msg = f"Invalid grid configuration: {exc}"
        raise InvalidConfigurationError(msg) from exc


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> GridConfig:
        """
        Load a grid configuration from a TOML file.

        Returns a validated GridConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            try:
                doc = tomlkit.load(f)
            except ParseError as exc:
                msg = f"Malformed config file {path}: {exc}"
                raise InvalidConfigurationError(msg) from exc

        return build_grid_config(doc.unwrap())

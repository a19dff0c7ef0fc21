"""Helpers for accessing the installed package version."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from multi_image_grid.logging_utils import logger

_DISTRIBUTION_NAMES = ("multi-image-grid", "multi_image_grid")
_FALLBACK_VERSION = "0.0.0"


def _version_from_distribution() -> str | None:
    """Return the installed distribution version, if any."""
    for distribution_name in _DISTRIBUTION_NAMES:
        try:
            return importlib_metadata.version(distribution_name)
        except importlib_metadata.PackageNotFoundError:
            continue
    return None


def _version_from_pyproject(start: Path) -> str | None:
    """Return project.version from the nearest pyproject.toml above start."""
    for parent in start.parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            with pyproject_path.open("rb") as handle:
                data = tomllib.load(handle)
        except OSError as exc:
            logger.warning("Error reading %s: %s", pyproject_path, exc)
            return None
        version = data.get("project", {}).get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
    return None


def resolve_project_version() -> str:
    """
    Return the best-guess project version for ``--version`` output.

    Installed metadata wins, then a source checkout's pyproject.toml,
    then "0.0.0".
    """
    return (
        _version_from_distribution()
        or _version_from_pyproject(Path(__file__).resolve())
        or _FALLBACK_VERSION
    )

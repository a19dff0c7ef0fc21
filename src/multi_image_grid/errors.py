"""
Error kinds raised by the multi-image grid package.

Every error derives from :class:`MultiImageError` and also from the
builtin exception that best describes it, so callers can catch either
the package base class or ``ValueError``/``OSError``.
"""

from __future__ import annotations

from collections.abc import Sequence


class MultiImageError(Exception):
    """Base class for all package errors."""


class InvalidImageCountError(MultiImageError, ValueError):
    """Raised when the number of images is outside the supported range."""


class InvalidConfigurationError(MultiImageError, ValueError):
    """Raised for invalid layout bounds, colors, spacing, or modes."""


class ImageLoadError(MultiImageError, OSError):
    """
    Raised when one or more images could not be fetched or decoded.

    The ``failed`` attribute lists the offending sources in input order.
    """

    def __init__(self, message: str, failed: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.failed: tuple[str, ...] = tuple(failed)

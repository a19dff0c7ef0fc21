"""Command-line entry point for grid and stacked rendering."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

from multi_image_grid.api import (
    MODE_CHOICES,
    create_multi_image_data,
)
from multi_image_grid.config import (
    ConfigLoader,
    GridConfig,
    build_grid_config,
)
from multi_image_grid.errors import MultiImageError
from multi_image_grid.image_grid import (
    GridAttachment,
    default_grid_name,
    ensure_png_name,
    save_grid,
)
from multi_image_grid.logging_utils import logger, set_verbosity
from multi_image_grid.runtime.version import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

T = TypeVar("T")


def positive_int(text: str) -> int:
    """Argparse-style validator that enforces a strictly positive integer."""
    value = non_negative_int(text)
    if value == 0:
        msg = "must be positive"
        raise ValueError(msg)
    return value


def non_negative_int(text: str) -> int:
    """Argparse-style validator that accepts zero and positive integers."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value < 0:
        msg = "must not be negative"
        raise ValueError(msg)
    return value


def _wrap_validator[T](
    validator: Callable[[str], T],
    error_cls: type[argparse.ArgumentTypeError] = argparse.ArgumentTypeError,
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise error_cls(str(exc)) from exc

    return wrapper


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description=(
            "Combine 2-4 images into one chat-embed sized grid, or list "
            "the links for a stacked embed gallery."
        ),
    )
    parser.add_argument(
        "sources", nargs="+",
        help="Image URLs or file paths, in display order.",
    )
    parser.add_argument(
        "--mode", choices=list(MODE_CHOICES), default="grid",
        help="Render a grid image or emit stacked embed links.",
    )
    parser.add_argument("--out", type=Path, default=None,
                        help="Where to write the grid PNG.")
    parser.add_argument("--config", type=str, default=None,
                        help="TOML config file with layout/loader/output.")
    parser.add_argument("--spacing", type=_wrap_validator(non_negative_int),
                        default=None)
    parser.add_argument("--max-width", type=_wrap_validator(positive_int),
                        default=None)
    parser.add_argument("--max-height", type=_wrap_validator(positive_int),
                        default=None)
    parser.add_argument(
        "--bg", type=str, default=None,
        help="Background color as hex like #2f3136.",
    )
    parser.add_argument(
        "--shared-url", type=str, default=None,
        help="URL shared by all embeds in stacked mode.",
    )
    parser.add_argument("--verbose", action="store_true",
                        help="Log canvas and tile geometry.")
    parser.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}",
    )
    return parser


def _build_config(args: argparse.Namespace) -> GridConfig:
    """Merge the optional config file with command-line overrides."""
    base = (
        ConfigLoader.load(args.config) if args.config else GridConfig()
    )
    data: dict[str, Any] = base.model_dump()

    overrides = {
        "spacing": args.spacing,
        "max_width": args.max_width,
        "max_height": args.max_height,
        "background_color": args.bg,
    }
    data["layout"].update(
        {k: v for k, v in overrides.items() if v is not None},
    )
    data["output"]["filename"] = _resolve_output_path(args).name
    return build_grid_config(data)


def _resolve_output_path(args: argparse.Namespace) -> Path:
    """Use --out when given, otherwise a name derived from the sources."""
    if args.out is None:
        return Path(default_grid_name(args.sources))
    out = Path(args.out)
    return out.with_name(ensure_png_name(out.name))


def main(argv: Sequence[str] | None = None) -> int:
    """Parse command-line arguments and render or list the images."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_verbosity(verbose=True)

    try:
        options: dict[str, Any] = {"shared_url": args.shared_url}
        if args.mode == "grid":
            options = _build_config(args).model_dump()
        result = create_multi_image_data(args.mode, args.sources, options)
    except (MultiImageError, FileNotFoundError) as exc:
        parser.error(str(exc))

    if isinstance(result, GridAttachment):
        saved = save_grid(result, _resolve_output_path(args))
        logger.info("Grid saved to: %s", saved)
    else:
        for url in result.image_urls:
            print(url)  # noqa: T201
        if result.shared_url:
            logger.info("Shared URL: %s", result.shared_url)

    return 0


__all__ = ["build_parser", "main", "non_negative_int", "positive_int"]

"""Allow ``python -m multi_image_grid``."""

from multi_image_grid.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

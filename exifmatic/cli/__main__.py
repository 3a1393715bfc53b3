"""Module wrapper so running ``python -m exifmatic.cli`` matches the console script."""

from exifmatic.cli import main  # Re-exported Click command-group


if __name__ == "__main__":  # pragma: no cover
    main()

"""
Module entry-point that makes the package runnable with

    python -m exifmatic
    python -m exifmatic.cli

The behaviour is identical to the *exifmatic-cli* console script because the
Click **group** object imported below performs all CLI dispatching.
"""

from exifmatic.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()

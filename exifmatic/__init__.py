"""
exifmatic package initialisation.

The module performs two small tasks:

1. **Expose the version string**
   ``exifmatic.__version__`` is resolved at import-time from the installed
   distribution metadata so that all runtime contexts (install, editable,
   frozen app) surface the same canonical value.

2. **Re-export the public core API**
   The four core steps and the one-call helper are available from the top
   level::

       from exifmatic import build_filename

       build_filename(open("IMG_1234.txt").read(), "{y}{m}{D}_{t}.{e}")

Module attributes
-----------------
__version__ : str
    Semantic version derived from the installed wheel.
"""

from importlib.metadata import PackageNotFoundError, version

# --------------------------------------------------------------------------- #
# Version resolution
# --------------------------------------------------------------------------- #
try:
    __version__: str = version("exifmatic")
except PackageNotFoundError:
    # Source tree without an installed wheel (e.g. early development checkout).
    __version__ = "0.0.0"

# --------------------------------------------------------------------------- #
# Public re-exports
# --------------------------------------------------------------------------- #
from .config import ConfigSchema, load_config  # noqa: E402
from .metadata import parse_metadata  # noqa: E402
from .pipelines import build_filename, collect_variables, rename_from_metadata  # noqa: E402
from .templating import format_pattern  # noqa: E402
from .utils.errors import ExifmaticError, PatternError  # noqa: E402
from .variables import derive_variables, merge  # noqa: E402

__all__: list[str] = [
    "__version__",
    "ConfigSchema",
    "ExifmaticError",
    "PatternError",
    "build_filename",
    "collect_variables",
    "derive_variables",
    "format_pattern",
    "load_config",
    "merge",
    "parse_metadata",
    "rename_from_metadata",
]

"""Public façade for the ``io`` sub-package.

This package holds the helpers that touch the file-system: reading the
metadata side-car and renaming the photo.  Only helpers intended for external
consumption are re-exported.
"""

from .files import read_metadata_text, rename_file, resolve_target

__all__ = ["read_metadata_text", "rename_file", "resolve_target"]

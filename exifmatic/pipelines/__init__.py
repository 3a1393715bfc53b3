"""Pipeline entry-points re-exported for convenience."""

from .rename import build_filename, collect_variables, rename_from_metadata

__all__ = ["build_filename", "collect_variables", "rename_from_metadata"]

"""
Public façade for the *utils* package.

Anything imported here becomes part of the *stable* public API.
Internal helpers live in their own modules and are **not** re-exported.
"""

from __future__ import annotations

# ─── error taxonomy ──────────────────────────────────────────────────────
from .errors import (
    ConfigError,
    ExifmaticError,
    MetadataReadError,
    PatternError,
    RenameError,
)

# ─── console output ──────────────────────────────────────────────────────
from .display import echo_rename, echo_variables, echo_warning

# ------------------------------------------------------------------------
__all__: list[str] = [
    # errors
    "ConfigError",
    "ExifmaticError",
    "MetadataReadError",
    "PatternError",
    "RenameError",
    # display
    "echo_rename",
    "echo_variables",
    "echo_warning",
]

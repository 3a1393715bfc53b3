"""Custom exceptions raised across the exifmatic rename pipeline.

Only the template formatter and the two I/O boundaries (reading the metadata
file, renaming the source file) escalate errors.  Variable derivation never
raises; it simply produces fewer keys.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


class ExifmaticError(RuntimeError):
    """Base class for every error exifmatic reports to its caller."""

    pass


class PatternError(ExifmaticError):
    """Raised when a filename pattern cannot be fully substituted.

    Attributes:
        pattern: The pattern that failed.
        missing: Placeholder names absent from the variable mapping, in order
            of first appearance.  Empty for syntax errors.
        position: Offset of the offending brace for syntax errors, else
            ``None``.
    """

    def __init__(
        self,
        pattern: str,
        *,
        missing: Iterable[str] = (),
        position: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.pattern = pattern
        self.missing = tuple(missing)
        self.position = position
        if reason is None:
            names = ", ".join(f"{{{name}}}" for name in self.missing)
            reason = f"unknown variable(s) {names}"
        super().__init__(f"Cannot format pattern '{pattern}': {reason}")


class MetadataReadError(ExifmaticError):
    """Raised when the metadata side-car file cannot be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read metadata file {path}: {cause.strerror or cause}")


class RenameError(ExifmaticError):
    """Raised when the source file cannot be moved to its computed name."""

    def __init__(self, source: Path, target: Path, reason: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Cannot rename {source} -> {target}: {reason}")


class ConfigError(ExifmaticError):
    """Raised when a YAML configuration file is unreadable or invalid."""

    pass

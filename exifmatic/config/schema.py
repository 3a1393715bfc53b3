"""
Pydantic models that mirror the YAML configuration consumed by *exifmatic*.

The classes in this module define a strongly-typed representation of the
configuration file so that the rest of the codebase can work with validated
objects instead of ad-hoc dictionaries.  Every default reproduces the
built-in behaviour, so an empty YAML document is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..variables import (
    CREATE_DATE_FIELD,
    DEFAULT_ALIASES,
    DEFAULT_TIMESTAMP_FORMATS,
    FILENAME_FIELD,
)

# --------------------------------------------------------------------------- #
# 1.  Leaf models                                                             #
# --------------------------------------------------------------------------- #


class SourceFields(BaseModel):
    """Names of the metadata fields the derivations read.

    Attributes:
        create_date: Field holding the capture timestamp.
        filename: Field holding the original camera filename.
    """

    create_date: str = CREATE_DATE_FIELD
    filename: str = FILENAME_FIELD


class RenameRules(BaseModel):
    """Behaviour of the final rename step.

    Attributes:
        overwrite: Replace an existing file at the computed target.
    """

    overwrite: bool = False


# --------------------------------------------------------------------------- #
# 2.  Top-level model – complete validated config                             #
# --------------------------------------------------------------------------- #


class ConfigSchema(BaseModel):
    """Root configuration object consumed by the rest of *exifmatic*.

    Attributes:
        version: Version string of the configuration schema.
        pattern: Default filename pattern used when the CLI gets none.
        sources: Source field names for the derivations.
        timestamp_formats: Ordered ``strptime`` formats; first match wins.
        aliases: Mapping of alias code to raw metadata key.
        rename: Rules for the rename step.
        log_dir: Directory for the rotating JSON log.
    """

    version: str = "1.0"
    pattern: Optional[str] = None
    sources: SourceFields = Field(default_factory=SourceFields)
    timestamp_formats: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TIMESTAMP_FORMATS)
    )
    aliases: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ALIASES))
    rename: RenameRules = Field(default_factory=RenameRules)
    log_dir: Optional[Path] = None

    # --------------------------- validators ------------------------------ #
    @field_validator("timestamp_formats")
    @classmethod
    def _formats_not_empty(cls, value: List[str]) -> List[str]:
        """Reject an empty fallback chain."""
        if not value:
            raise ValueError("timestamp_formats must list at least one format")
        return value

    @field_validator("aliases")
    @classmethod
    def _alias_codes_usable(cls, value: Dict[str, str]) -> Dict[str, str]:
        """Ensure every alias code can be written as a ``{placeholder}``."""
        bad = sorted(code for code in value if not code or "{" in code or "}" in code)
        if bad:
            raise ValueError("Unusable alias code(s): " + ", ".join(repr(c) for c in bad))
        return value

"""
YAML configuration loader.

This helper locates, reads and validates the exifmatic configuration before
returning a :class:`exifmatic.config.schema.ConfigSchema` instance.

Search precedence (first match wins)
1. An explicit path argument (``--config`` on the CLI).
2. ``exifmatic.yaml`` in the working directory – project-local override.
3. The packaged default shipped inside the wheel.

All resolution logic is concentrated here so the rest of *exifmatic* treats
configuration as an already-validated object.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

import yaml
from importlib.resources import files
from pydantic import ValidationError

from ..utils.errors import ConfigError
from .schema import ConfigSchema

if TYPE_CHECKING:  # pragma: no cover
    from importlib.resources.abc import Traversable

LOCAL_CONFIG_NAME = "exifmatic.yaml"

# --------------------------------------------------------------------------- #
# Wheel-internal fallback (works even from a zipped wheel)                    #
# --------------------------------------------------------------------------- #
_DEFAULT_CONFIG = files("exifmatic.resources") / "default_config.yaml"

# --------------------------------------------------------------------------- #
# Helper functions                                                            #
# --------------------------------------------------------------------------- #


def _first_existing(*candidates: Optional[Path]) -> Optional[Path]:
    """Return the first path in *candidates* that exists on disk."""
    for p in candidates:
        if p is not None and p.exists():
            return p
    return None


def _load_yaml(path: Path | Traversable) -> dict:
    """Read a YAML file.

    Args:
        path: Location of the YAML document.

    Returns:
        Dictionary parsed from the file, or an empty dict if the file is empty.

    Raises:
        ConfigError: When the file cannot be read, is not valid YAML or does
            not hold a mapping.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot load configuration {path} – {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {path} must be a mapping, got {type(data).__name__}")
    return data


def resolve_config_path(
    explicit: Optional[Path] = None, *, cwd: Optional[Path] = None
) -> Path | Traversable:
    """Resolve the configuration file according to the documented precedence.

    Args:
        explicit: Path supplied by the caller (may be ``None``).  It must
            exist when given.
        cwd: Directory searched for ``exifmatic.yaml``; defaults to the
            current working directory.

    Returns:
        Path to the YAML that should be loaded.  The packaged default is
        returned as a resource handle and read in place, so it also works
        from a zipped install.

    Raises:
        ConfigError: When *explicit* is given but does not exist.
    """
    if explicit is not None:
        explicit = Path(explicit).expanduser().resolve()
        if not explicit.exists():
            raise ConfigError(f"Configuration file {explicit} does not exist")
        return explicit

    local = Path(cwd or Path.cwd()) / LOCAL_CONFIG_NAME
    resolved = _first_existing(local)
    return resolved if resolved is not None else _DEFAULT_CONFIG


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #
def load_config(
    config_path: Optional[str | Path] = None, *, cwd: Optional[Path] = None
) -> ConfigSchema:
    """Return a fully validated :class:`ConfigSchema`.

    Args:
        config_path: Explicit path to a YAML file.  ``None`` triggers the
            search sequence described in the module doc-string.
        cwd: Directory searched for a project-local ``exifmatic.yaml``.

    Returns:
        A :class:`ConfigSchema` object ready for downstream use.

    Raises:
        ConfigError: When the YAML is missing, unreadable or fails
            validation.
    """
    path = resolve_config_path(Path(config_path) if config_path else None, cwd=cwd)
    data = _load_yaml(path)
    try:
        return ConfigSchema(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration {path} – {exc}") from exc

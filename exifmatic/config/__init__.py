"""
Configuration package façade.

Exports the small, stable surface that external callers rely on:

* :func:`load_config` – Locate, parse and validate the YAML configuration
  into a single :class:`ConfigSchema` instance.
* :class:`ConfigSchema` – Pydantic model representing the fully-validated
  configuration.

Anything not imported here is considered private implementation detail and may
change without prior notice.
"""

from .loader import load_config  # noqa: F401  (import re-exposed on purpose)
from .schema import ConfigSchema  # noqa: F401

__all__: list[str] = ["load_config", "ConfigSchema"]

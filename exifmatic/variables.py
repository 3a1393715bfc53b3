"""Derive pattern variables from a parsed metadata record.

Three derivations feed the variable mapping:

* the capture timestamp (``CreateDate``) expands to calendar/clock codes
  (``Y``, ``m``, ``D``, ``t``…), see :class:`exifmatic.models.DateTimeVars`;
* the original filename (``FileName``) splits into base name, sequence number
  and extension (``f``, ``r``, ``e``);
* aliases copy a raw field under a short code (``Model`` → ``T2``).

None of the helpers raise.  A missing or unparsable source field simply means
its codes are absent from the result.  :func:`merge` then overlays the raw
record so that source values always win over derived ones.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING, Dict, Mapping, Optional, Sequence

import structlog

from .models import DateTimeVars, FilenameVars

if TYPE_CHECKING:  # pragma: no cover
    from .config.schema import ConfigSchema

__all__ = [
    "DEFAULT_ALIASES",
    "DEFAULT_TIMESTAMP_FORMATS",
    "CREATE_DATE_FIELD",
    "FILENAME_FIELD",
    "parse_timestamp",
    "derive_datetime_vars",
    "derive_filename_vars",
    "derive_alias_vars",
    "derive_variables",
    "merge",
]

log = structlog.get_logger()

CREATE_DATE_FIELD = "CreateDate"
FILENAME_FIELD = "FileName"

# Tried in order; the first successful parse wins.
DEFAULT_TIMESTAMP_FORMATS: tuple[str, ...] = (
    "%Y:%m:%d %H:%M:%S",
    "%Y:%m:%d %H:%M:%S%z",
)

# alias code -> raw metadata key
DEFAULT_ALIASES: Dict[str, str] = {"T2": "Model"}

# Greedy stem ending in a non-digit, optional digit run, dot, extension.
_FILENAME_RE = re.compile(r"(.*\D)(\d*)\.([a-zA-Z0-9]+)")


# --------------------------------------------------------------------------- #
# Date / time                                                                 #
# --------------------------------------------------------------------------- #
def parse_timestamp(
    value: str, formats: Sequence[str] = DEFAULT_TIMESTAMP_FORMATS
) -> Optional[datetime]:
    """Return the naive wall-clock time encoded in *value*.

    Each format in *formats* is attempted in order.  When a format carries a
    UTC offset the offset is dropped after parsing: the clock fields stay as
    written and no conversion to another zone happens.

    Returns:
        A naive :class:`datetime`, or *None* when every format fails.
    """
    errors: list[str] = []
    for fmt in formats:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError as err:
            errors.append(str(err))
            continue
        return parsed.replace(tzinfo=None)
    log.warning("timestamp_unparsed", value=value, errors=errors)
    return None


def derive_datetime_vars(
    value: str, formats: Sequence[str] = DEFAULT_TIMESTAMP_FORMATS
) -> Dict[str, str]:
    """Expand a capture timestamp into the date/time codes.

    Args:
        value: Raw timestamp such as ``2023:09:08 18:56:54`` or
            ``2023:09:08 18:56:54+0200``.
        formats: Ordered ``strptime`` formats to try.

    Returns:
        ``{"Y": "2023", "y": "23", ..., "a": "Fri"}`` or an empty mapping when
        *value* cannot be parsed.
    """
    parsed = parse_timestamp(value, formats)
    if parsed is None:
        return {}
    return DateTimeVars.from_datetime(parsed).as_vars()


# --------------------------------------------------------------------------- #
# Filename                                                                    #
# --------------------------------------------------------------------------- #
def derive_filename_vars(value: str) -> Dict[str, str]:
    """Split a camera filename into ``f`` (stem), ``r`` (number), ``e`` (ext).

    ``IMG_1234.JPG`` gives ``f="IMG_"``, ``r="1234"``, ``e="JPG"``.  Names
    without a dotted alphanumeric suffix produce no keys at all; names without
    a trailing number produce an empty ``r``.
    """
    match = _FILENAME_RE.search(value)
    if match is None:
        log.debug("filename_unmatched", value=value)
        return {}
    name, number, extension = match.groups()
    return FilenameVars(name=name, number=number, extension=extension).as_vars()


# --------------------------------------------------------------------------- #
# Aliases                                                                     #
# --------------------------------------------------------------------------- #
def derive_alias_vars(
    record: Mapping[str, str], aliases: Mapping[str, str] = DEFAULT_ALIASES
) -> Dict[str, str]:
    """Expose raw fields under short alias codes (``T2`` for ``Model``)."""
    return {code: record[key] for code, key in aliases.items() if key in record}


# --------------------------------------------------------------------------- #
# Public entry-points                                                         #
# --------------------------------------------------------------------------- #
def derive_variables(
    record: Mapping[str, str], *, config: Optional["ConfigSchema"] = None
) -> Dict[str, str]:
    """Return every variable derivable from *record*.

    Args:
        record: Parsed metadata (see :func:`exifmatic.metadata.parse_metadata`).
        config: Optional configuration overriding source field names,
            timestamp formats and aliases.  The defaults match the packaged
            configuration.

    Returns:
        New mapping holding date/time, filename and alias codes.  *record* is
        not modified.
    """
    if config is not None:
        date_field = config.sources.create_date
        name_field = config.sources.filename
        formats: Sequence[str] = config.timestamp_formats
        aliases: Mapping[str, str] = config.aliases
    else:
        date_field, name_field = CREATE_DATE_FIELD, FILENAME_FIELD
        formats, aliases = DEFAULT_TIMESTAMP_FORMATS, DEFAULT_ALIASES

    derived: Dict[str, str] = {}
    if date_field in record:
        derived.update(derive_datetime_vars(record[date_field], formats))
    if name_field in record:
        derived.update(derive_filename_vars(record[name_field]))
    derived.update(derive_alias_vars(record, aliases))
    log.debug("variables_derived", keys=sorted(derived))
    return derived


def merge(derived: Mapping[str, str], raw: Mapping[str, str]) -> Dict[str, str]:
    """Overlay *raw* on top of *derived* and return the new mapping.

    Raw metadata always wins when a key exists in both.  Neither input is
    mutated.
    """
    merged = dict(derived)
    merged.update(raw)
    return merged

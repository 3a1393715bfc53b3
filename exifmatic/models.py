"""
Typed, immutable records for the variables derived from metadata fields.

Raw metadata stays an open ``dict[str, str]`` because its keys depend on the
tool that produced the dump.  The *derived* variables, on the other hand, form
a fixed schema, so they are modelled here as frozen pydantic models whose
field aliases are the short codes users type in patterns (``{Y}``, ``{r}``…).
:meth:`as_vars` turns a record back into the plain mapping the formatter
consumes.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["DateTimeVars", "FilenameVars", "RenameResult", "WEEKDAY_ABBREVIATIONS"]

# Fixed English names; the process locale must never leak into filenames.
WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class _CodeRecord(BaseModel):
    """Shared behaviour for records keyed by short pattern codes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def as_vars(self) -> Dict[str, str]:
        """Return the record as ``{code: value}``."""
        return self.model_dump(by_alias=True)


class DateTimeVars(_CodeRecord):
    """Calendar and clock variables derived from a capture timestamp.

    Every value is a pre-formatted string; see :meth:`from_datetime` for the
    exact rendering rules.
    """

    year: str = Field(alias="Y", description="full year")
    year2: str = Field(alias="y", description="year modulo 100, 2 digits")
    month: str = Field(alias="m", description="month 01-12")
    day: str = Field(alias="D", description="day of month 01-31")
    time: str = Field(alias="t", description="HHMMSS, 24-hour clock")
    hour: str = Field(alias="H", description="hour 00-23")
    hour12: str = Field(alias="h", description="hour modulo 12, 00-11")
    minute: str = Field(alias="M", description="minute 00-59")
    second: str = Field(alias="S", description="second 00-59")
    week: str = Field(alias="W", description="ISO-8601 week number")
    weekday: str = Field(alias="a", description="abbreviated English weekday")

    @classmethod
    def from_datetime(cls, dt: datetime) -> "DateTimeVars":
        """Build the record from the naive wall-clock fields of *dt*."""
        return cls(
            year=f"{dt.year:04d}",
            year2=f"{dt.year % 100:02d}",
            month=f"{dt.month:02d}",
            day=f"{dt.day:02d}",
            time=f"{dt.hour:02d}{dt.minute:02d}{dt.second:02d}",
            hour=f"{dt.hour:02d}",
            hour12=f"{dt.hour % 12:02d}",
            minute=f"{dt.minute:02d}",
            second=f"{dt.second:02d}",
            week=f"{dt.isocalendar()[1]:02d}",
            weekday=WEEKDAY_ABBREVIATIONS[dt.weekday()],
        )


class FilenameVars(_CodeRecord):
    """Parts of a camera filename such as ``IMG_1234.JPG``.

    Attributes:
        name: Everything up to and including the last non-digit before the
            sequence number (``IMG_``).
        number: Trailing digit run, possibly empty (``1234``).
        extension: Alphanumeric suffix after the dot (``JPG``).
    """

    name: str = Field(alias="f")
    number: str = Field(alias="r")
    extension: str = Field(alias="e")


class RenameResult(BaseModel, frozen=True):
    """Summary of one invocation of the rename pipeline.

    Attributes
    ----------
    source
        File that was (or would be) renamed.  *None* when no source file was
        supplied and only the filename was computed.
    target
        Computed destination.  Relative paths are relative to the working
        directory at the time of the call.
    filename
        Pattern output before any target directory was prepended.
    changed
        ``True`` when the file system was modified.
    dry_run
        ``True`` when the rename was only simulated.
    """

    source: Path | None = None
    target: Path
    filename: str
    changed: bool = False
    dry_run: bool = False

"""Parse ``key: value`` metadata dumps into a flat mapping.

The side-car files consumed by exifmatic are plain-text dumps such as the
output of ``exiftool -s``::

    FileName                        : IMG_1234.JPG
    CreateDate                      : 2023:09:08 18:56:54
    Model                           : iPhone 14

Only the *first* colon on each line separates key from value, so timestamps
keep their ``HH:MM:SS`` colons.  Lines end at newline characters only; form
feeds and other Unicode line separators stay inside the value.  Lines
without a colon (headers, blank lines) are dropped without complaint.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

__all__ = ["parse_metadata", "split_metadata_line", "serialize_metadata"]


def split_metadata_line(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(key, value)`` for *line* or *None* when it has no colon.

    Both parts are stripped of surrounding whitespace.
    """
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return key.strip(), value.strip()


def parse_metadata(text: str) -> Dict[str, str]:
    """Return the metadata record contained in *text*.

    Args:
        text: Full content of a metadata file.

    Returns:
        Mapping of verbatim field names to trimmed values.  Later duplicate
        keys overwrite earlier ones.  The function never raises.
    """
    record: Dict[str, str] = {}
    for line in text.split("\n"):
        pair = split_metadata_line(line)
        if pair is not None:
            key, value = pair
            record[key] = value
    return record


def serialize_metadata(record: Dict[str, str]) -> str:
    """Render *record* back into ``key: value`` lines."""
    return "".join(f"{key}: {value}\n" for key, value in record.items())

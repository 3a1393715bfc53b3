import pytest

from exifmatic.metadata import parse_metadata, serialize_metadata, split_metadata_line


def test_split_on_first_colon_only():
    """Verify timestamps keep their colons."""
    assert split_metadata_line("CreateDate : 2023:09:08 18:56:54") == (
        "CreateDate",
        "2023:09:08 18:56:54",
    )


def test_split_without_colon_returns_none():
    """Verify lines without separator are rejected."""
    assert split_metadata_line("---- ExifTool ----") is None
    assert split_metadata_line("") is None


def test_parse_trims_and_drops_noise():
    """Verify parse trims keys and values and skips header lines."""
    text = "---- ExifTool ----\n  Model  :  iPhone 14  \n\nFileName: IMG_1.JPG\n"
    assert parse_metadata(text) == {"Model": "iPhone 14", "FileName": "IMG_1.JPG"}


def test_parse_last_duplicate_wins():
    """Verify later duplicate keys overwrite earlier ones."""
    assert parse_metadata("Model: A\nModel: B\n") == {"Model": "B"}


def test_parse_one_entry_per_line():
    """Verify every colon line yields exactly one entry."""
    lines = [f"Key{i}: value {i}" for i in range(20)]
    record = parse_metadata("\n".join(lines))
    assert len(record) == len(lines)
    assert record["Key7"] == "value 7"


def test_parse_handles_crlf_and_empty_values():
    """Verify Windows line endings and empty values."""
    assert parse_metadata("A: 1\r\nB:\r\n") == {"A": "1", "B": ""}


def test_parse_empty_text():
    """Verify empty input gives an empty record."""
    assert parse_metadata("") == {}


def test_serialize_round_trip():
    """Verify re-serialising a parsed record parses back to the same record."""
    record = parse_metadata(
        "header\nCreateDate: 2023:09:08 18:56:54+0200\nLensModel : 24mm f/1.4 \nEmpty:\n"
    )
    assert parse_metadata(serialize_metadata(record)) == record


@pytest.mark.parametrize("separator", ["\x0c", "\x0b", "\x1e", "\x85", "\u2028", "\u2029"])
def test_parse_splits_on_newline_only(separator: str):
    """Verify other line separators stay inside the value."""
    text = f"Title: part1{separator}Model: spoofed\nMake: Canon\n"
    assert parse_metadata(text) == {
        "Title": f"part1{separator}Model: spoofed",
        "Make": "Canon",
    }

from pathlib import Path

import pytest

from exifmatic import build_filename, collect_variables, rename_from_metadata
from exifmatic.config import ConfigSchema
from exifmatic.utils.errors import MetadataReadError, PatternError, RenameError

from .utils import SAMPLE_FILENAME, SAMPLE_METADATA, SAMPLE_PATTERN


def test_build_filename_sample():
    """Verify the end-to-end core on the documented example."""
    assert build_filename(SAMPLE_METADATA, SAMPLE_PATTERN) == SAMPLE_FILENAME


def test_raw_field_usable_in_pattern():
    """Verify raw metadata keys are placeholders too."""
    assert build_filename(SAMPLE_METADATA, "{Model}-{FileName}") == "iPhone 14-IMG_9876.JPG"


def test_raw_value_overrides_derived_code():
    """Verify a raw field named like a derived code wins."""
    text = SAMPLE_METADATA + "Y: raw-year\n"
    variables = collect_variables(text)
    assert variables["Y"] == "raw-year"
    assert variables["y"] == "23"


def test_missing_variable_never_returns_partial_result():
    """Verify an unknown placeholder aborts the whole computation."""
    with pytest.raises(PatternError) as exc_info:
        build_filename(SAMPLE_METADATA, "{y}_{NoSuchKey}")
    assert exc_info.value.missing == ("NoSuchKey",)


def test_bad_timestamp_keeps_other_variables():
    """Verify an unparsable CreateDate only removes the date codes."""
    text = "CreateDate: not-a-date\nFileName: IMG_0001.JPG\nModel: X100V\n"
    assert build_filename(text, "{T2}_{r}.{e}") == "X100V_0001.JPG"
    with pytest.raises(PatternError):
        build_filename(text, "{Y}.{e}")


def test_build_filename_with_config_aliases():
    """Verify configured aliases are available to patterns."""
    cfg = ConfigSchema(aliases={"cam": "Model"})
    assert build_filename(SAMPLE_METADATA, "{cam}.{e}", config=cfg) == "iPhone 14.JPG"


def test_rename_from_metadata_without_source(metadata_file: Path):
    """Verify only the filename is computed when no source is given."""
    result = rename_from_metadata(metadata_file, SAMPLE_PATTERN)
    assert result.source is None
    assert result.filename == SAMPLE_FILENAME
    assert result.target == Path(SAMPLE_FILENAME)
    assert not result.changed


def test_rename_from_metadata_renames(metadata_file: Path, tmp_path: Path):
    """Verify the source file is moved into the target directory."""
    photo = tmp_path / "IMG_9876.JPG"
    photo.write_bytes(b"jpeg")
    out = tmp_path / "out"
    out.mkdir()

    result = rename_from_metadata(metadata_file, SAMPLE_PATTERN, photo, target_dir=out)

    assert result.changed
    assert (out / SAMPLE_FILENAME).read_bytes() == b"jpeg"
    assert not photo.exists()


def test_rename_overwrite_follows_config(metadata_file: Path, tmp_path: Path):
    """Verify the configured overwrite rule applies when no flag is given."""
    photo = tmp_path / "IMG_9876.JPG"
    photo.write_bytes(b"new")
    (tmp_path / SAMPLE_FILENAME).write_bytes(b"old")

    with pytest.raises(RenameError):
        rename_from_metadata(metadata_file, SAMPLE_PATTERN, photo, target_dir=tmp_path)

    cfg = ConfigSchema(rename={"overwrite": True})
    result = rename_from_metadata(
        metadata_file, SAMPLE_PATTERN, photo, config=cfg, target_dir=tmp_path
    )
    assert result.changed
    assert (tmp_path / SAMPLE_FILENAME).read_bytes() == b"new"


def test_rename_from_missing_metadata(tmp_path: Path):
    """Verify a missing side-car surfaces as MetadataReadError."""
    with pytest.raises(MetadataReadError):
        rename_from_metadata(tmp_path / "missing.txt", SAMPLE_PATTERN)

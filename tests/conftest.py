"""Pytest configuration and shared fixtures for exifmatic tests."""

import logging
from pathlib import Path

import pytest
import structlog

from .utils import SAMPLE_METADATA


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration a test (or the CLI) installed."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def metadata_file(tmp_path: Path) -> Path:
    """Write the sample metadata dump and return its path."""
    path = tmp_path / "IMG_9876.txt"
    path.write_text(SAMPLE_METADATA, encoding="utf-8")
    return path

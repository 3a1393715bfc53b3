"""Tests for :mod:`exifmatic.utils.logging`."""
import json
import logging
from pathlib import Path

import structlog

from exifmatic.utils.logging import resolve_log_dir, setup_logging


def test_resolve_log_dir_prefers_environment(tmp_path: Path, monkeypatch):
    """Verify $EXIFMATIC_LOG_DIR wins over the configured directory."""
    monkeypatch.setenv("EXIFMATIC_LOG_DIR", str(tmp_path / "env"))
    assert resolve_log_dir(tmp_path / "cfg") == tmp_path / "env"


def test_resolve_log_dir_disabled(monkeypatch):
    """Verify file logging is off when nothing is configured."""
    monkeypatch.delenv("EXIFMATIC_LOG_DIR", raising=False)
    assert resolve_log_dir(None) is None


def test_json_log_written(tmp_path: Path, monkeypatch):
    """Verify events land as JSON lines in exifmatic.log."""
    monkeypatch.delenv("EXIFMATIC_LOG_DIR", raising=False)
    setup_logging(log_dir=tmp_path)

    structlog.get_logger().warning("rename_collision", target="a.jpg")
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = (tmp_path / "exifmatic.log").read_text().splitlines()
    event = json.loads(lines[-1])
    assert event["event"] == "rename_collision"
    assert event["target"] == "a.jpg"
    assert event["level"] == "warning"


def test_quiet_console_filters_info(tmp_path: Path, monkeypatch):
    """Verify INFO events are dropped when no file log wants them."""
    monkeypatch.delenv("EXIFMATIC_LOG_DIR", raising=False)
    mirror = tmp_path / "mirror.log"
    setup_logging(extra_text_log=mirror)

    log = structlog.get_logger()
    log.info("renamed", source="a")
    log.warning("timestamp_unparsed", value="x")

    text = mirror.read_text()
    assert "timestamp_unparsed" in text
    assert "renamed" not in text

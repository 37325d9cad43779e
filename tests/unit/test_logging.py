"""Unit tests for logging setup and layout statistics."""

import json
import logging
from unittest.mock import MagicMock

import pytest
import structlog

from fontview.utils import LayoutLogger, LayoutStats, configure_logging


@pytest.fixture
def restore_logging():
    """Undo handler and structlog changes made by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_json_to_log_file(self, tmp_path, restore_logging):  # noqa: ARG002
        log_file = tmp_path / "fontview.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("Layout complete", glyphs=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        events = [json.loads(line.split(" | ", 3)[3]) for line in lines]
        assert events[0]["event"] == "Logging initialized"
        assert events[-1]["event"] == "Layout complete"
        assert events[-1]["glyphs"] == 3
        assert events[-1]["level"] == "info"

    def test_no_file_without_path(self, tmp_path, monkeypatch, restore_logging):  # noqa: ARG002
        monkeypatch.chdir(tmp_path)
        before = list(logging.getLogger().handlers)
        configure_logging(quiet=True)
        added = [h for h in logging.getLogger().handlers if h not in before]
        assert added == []
        assert list(tmp_path.iterdir()) == []

    def test_console_handler_level(self, restore_logging):  # noqa: ARG002
        before = list(logging.getLogger().handlers)
        configure_logging(console_level="info")
        added = [h for h in logging.getLogger().handlers if h not in before]
        assert len(added) == 1
        assert isinstance(added[0], logging.StreamHandler)
        assert added[0].level == logging.INFO


class TestLayoutLogger:
    """Tests for LayoutLogger."""

    def test_initial_stats(self):
        layout_logger = LayoutLogger(MagicMock())
        assert layout_logger.stats == LayoutStats()

    def test_log_layout_start(self):
        logger = MagicMock()
        LayoutLogger(logger).log_layout_start("AVA", 24.0)
        logger.debug.assert_called_once_with("Layout started", chars=3, pixel_height=24.0)

    def test_glyphs_counted(self):
        layout_logger = LayoutLogger(MagicMock())
        layout_logger.log_glyph("A", 2, 0.0, 0.0)
        layout_logger.log_glyph("V", 4, 12.0, -1.6)
        layout_logger.log_glyph("A", 2, 22.8, -1.4)
        assert layout_logger.stats.glyph_count == 3
        assert layout_logger.stats.kerned_pairs == 2

    def test_unmapped_recorded(self):
        logger = MagicMock()
        layout_logger = LayoutLogger(logger)
        layout_logger.log_unmapped("\n")
        layout_logger.log_unmapped("z")

        assert layout_logger.stats.notdef_count == 2
        assert layout_logger.stats.unmapped == ["\n", "z"]
        assert logger.info.call_args_list[0].kwargs["codepoint"] == "U+000A"

    def test_layout_complete(self):
        logger = MagicMock()
        layout_logger = LayoutLogger(logger)
        layout_logger.log_glyph("A", 2, 0.0, 0.0)
        layout_logger.log_layout_complete(12.34567)

        assert layout_logger.stats.total_advance == 12.34567
        logger.info.assert_called_once_with(
            "Layout complete", glyphs=1, notdef=0, kerned_pairs=0, total_advance=12.346
        )

"""Tests for logging utilities."""

import logging
from unittest.mock import MagicMock

import pytest

from mathglyph.domain import BuildResult, RenderOptions, ResolutionPath
from mathglyph.utils.logging import ResolutionLogger, ResolutionStats, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def reset_handlers(self):
        """Remove installed handlers after each test."""
        yield
        configure_logging(quiet=True)

    def test_file_handler(self, tmp_path):
        """Test a log file is written when a path is given."""
        log_file = tmp_path / "mathglyph.log"
        configure_logging(log_file=log_file, quiet=True)
        logging.getLogger("mathglyph.test").debug("resolving %s", "x")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "resolving x" in log_file.read_text(encoding="utf-8")

    def test_no_file_by_default(self, tmp_path, monkeypatch):
        """Test no log file is created without a path."""
        monkeypatch.chdir(tmp_path)
        configure_logging(quiet=True)
        assert list(tmp_path.iterdir()) == []

    def test_reconfigure_replaces_handlers(self):
        """Test handlers are not duplicated across calls."""
        root = logging.getLogger()
        configure_logging()
        count = len(root.handlers)
        configure_logging()
        assert len(root.handlers) == count
        configure_logging(quiet=True)
        assert len(root.handlers) == count - 1


class TestResolutionLogger:
    """Tests for ResolutionLogger."""

    def test_counts_paths(self):
        """Test resolutions are counted per path."""
        logger = ResolutionLogger(MagicMock())
        options = RenderOptions()
        logger.log_resolution("x", "math", "ord", BuildResult(options, element=None))
        logger.log_resolution(
            "y", "math", "ord",
            BuildResult(options, element=None, path=ResolutionPath.DEFAULT_FONT),
        )
        logger.log_resolution("z", "math", "ord", BuildResult(options, element=None))
        stats = logger.stats
        assert stats.resolved_count == 3
        assert stats.unstyled_count == 2
        assert stats.paths[ResolutionPath.DEFAULT_FONT] == 1

    def test_logs_codepoints(self):
        """Test code points are included in the log event."""
        mock_logger = MagicMock()
        ResolutionLogger(mock_logger).log_unstyled("☃")
        _, kwargs = mock_logger.warning.call_args
        assert kwargs["codepoints"] == ["U+2603"]

    def test_empty_stats(self):
        """Test a fresh stats object has no counts."""
        stats = ResolutionStats()
        assert stats.resolved_count == 0
        assert stats.unstyled_count == 0

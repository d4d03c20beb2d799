"""Unit tests for logging setup and layout statistics."""

import logging

from panelcut.utils import LayoutLogger, LayoutStats, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_repeated_calls_do_not_stack_handlers(self, tmp_path):
        """Test reconfiguring replaces the handlers of the previous call."""
        root = logging.getLogger()
        configure_logging(log_file=tmp_path / "first.log", quiet=False)
        count = len(root.handlers)

        configure_logging(log_file=tmp_path / "second.log", quiet=False)
        configure_logging(log_file=tmp_path / "third.log", quiet=False)

        assert len(root.handlers) == count
        files = [h.baseFilename for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert str(tmp_path / "third.log") in files
        assert str(tmp_path / "first.log") not in files
        assert str(tmp_path / "second.log") not in files

    def test_replaced_file_handler_is_closed(self, tmp_path):
        """Test the previous log file is released."""
        configure_logging(log_file=tmp_path / "first.log", quiet=True)
        first = next(
            h
            for h in logging.getLogger().handlers
            if isinstance(h, logging.FileHandler)
            and h.baseFilename == str(tmp_path / "first.log")
        )

        configure_logging(quiet=True)

        assert first not in logging.getLogger().handlers
        assert first.stream is None

    def test_quiet_without_file_installs_nothing(self):
        """Test quiet mode without a log file adds no handlers of its own."""
        root = logging.getLogger()
        configure_logging(quiet=True)
        before = list(root.handlers)

        configure_logging(quiet=True)

        assert root.handlers == before


class TestLayoutLogger:
    """Tests for LayoutLogger class."""

    def test_stats_tracking(self, tmp_path):
        """Test completed layouts and written files update the statistics."""
        layout_logger = LayoutLogger(configure_logging(quiet=True))
        layout_logger.log_layout_start("lantern", "print-once")
        layout_logger.log_layout_complete(
            parts=["base_plate", "top_plate"], path_count=12, circle_count=2, duration_ms=1.5
        )
        layout_logger.log_file_written(tmp_path / "lantern.svg", 2048)

        stats = layout_logger.stats
        assert stats.layout == "lantern"
        assert stats.parts == ["base_plate", "top_plate"]
        assert stats.shape_count == 14
        assert stats.bytes_written == 2048

    def test_duration_without_times(self):
        """Test duration is zero until both timestamps are set."""
        assert LayoutStats().duration_seconds == 0.0
        assert LayoutStats(start_time=10.0, end_time=12.5).duration_seconds == 2.5

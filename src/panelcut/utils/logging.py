"""Logging utilities for Panelcut."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers added by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class LayoutStats:
    """Statistics from one template generation run."""

    layout: str = ""
    parts: list[str] = field(default_factory=list)
    path_count: int = 0
    circle_count: int = 0
    bytes_written: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def shape_count(self) -> int:
        """Total number of shapes drawn."""
        return self.path_count + self.circle_count


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by an earlier call are removed and closed first, so
    repeated calls do not duplicate output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("panelcut")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class LayoutLogger:
    """Logger for tracking template generation and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = LayoutStats()

    def log_layout_start(self, layout: str, variant: str | None = None) -> None:
        """Log start of a layout build."""
        self._logger.debug("Building layout", layout=layout, variant=variant)
        self._stats.layout = layout

    def log_layout_complete(
        self,
        parts: list[str],
        path_count: int,
        circle_count: int,
        duration_ms: float,
    ) -> None:
        """Log a finished layout build."""
        self._logger.info(
            "Layout built",
            layout=self._stats.layout,
            parts=len(parts),
            paths=path_count,
            circles=circle_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.parts = list(parts)
        self._stats.path_count = path_count
        self._stats.circle_count = circle_count

    def log_file_written(self, output_path: Path, size_bytes: int) -> None:
        """Log a written template file."""
        self._logger.info("Template written", path=str(output_path), bytes=size_bytes)
        self._stats.bytes_written = size_bytes

    def log_layout_error(self, error: Exception) -> None:
        """Log a failed layout build."""
        self._logger.error(
            "Layout failed",
            layout=self._stats.layout,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> LayoutStats:
        """Get current layout statistics."""
        return self._stats

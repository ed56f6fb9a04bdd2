"""Logging utilities for Mathglyph."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from mathglyph.domain import BuildResult, ResolutionPath

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class ResolutionStats:
    """Counts of resolution paths taken during a run."""

    resolved_count: int = 0
    paths: dict[ResolutionPath, int] = field(default_factory=dict)

    @property
    def unstyled_count(self) -> int:
        """Number of symbols that fell through to the unstyled glyph."""
        return self.paths.get(ResolutionPath.UNSTYLED, 0)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging on top of the standard library.

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

    logger = structlog.get_logger("mathglyph")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class ResolutionLogger:
    """Logger for tracking symbol resolutions."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ResolutionStats()

    def log_resolution(self, symbol: str, mode: str, atom_type: str, result: BuildResult) -> None:
        """Log a completed resolution."""
        self._logger.info(
            "Symbol resolved",
            symbol=symbol,
            codepoints=[f"U+{ord(c):04X}" for c in symbol],
            mode=mode,
            atom_type=atom_type,
            path=result.path.value,
            italic=round(result.italic, 5),
            skew=round(result.skew, 5),
        )
        self._stats.resolved_count += 1
        self._stats.paths[result.path] = self._stats.paths.get(result.path, 0) + 1

    def log_unstyled(self, symbol: str) -> None:
        """Log a symbol that has no render config or composite entry."""
        self._logger.warning(
            "Symbol has no render config",
            symbol=symbol,
            codepoints=[f"U+{ord(c):04X}" for c in symbol],
        )

    def log_metrics_font(self, font_name: str, path: Path, glyph_count: int) -> None:
        """Log a font metrics table loaded from a font file."""
        self._logger.info(
            "Font metrics loaded",
            font=font_name,
            path=str(path),
            glyphs=glyph_count,
        )

    @property
    def stats(self) -> ResolutionStats:
        """Get current resolution statistics."""
        return self._stats

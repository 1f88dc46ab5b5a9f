"""Logging utilities for fontscope."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer(ensure_ascii=False),
]


@dataclass
class GenerationStats:
    """Statistics from one generation call."""

    glyphs_emitted: int = 0
    paths_emitted: int = 0
    whitespace_count: int = 0
    empty_outline_count: int = 0
    missing_glyphs: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def missing_count(self) -> int:
        return len(self.missing_glyphs)

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def get_logger(name: str = "fontscope") -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``.

    Events go through stdlib logging, so nothing is printed until
    handlers are installed (see configure_logging).
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so SVG written to stdout stays clean.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_fontscope", False):
            root_logger.removeHandler(handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._fontscope = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._fontscope = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("fontscope")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class GenerationLogger:
    """Logger for tracking per-glyph generation events and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._stats = GenerationStats()

    def log_start(
        self,
        text_length: int,
        font_size: float,
        direction: str,
        mode: str,
        layers_per_glyph: int = 1,
    ) -> None:
        """Log start of a generation call."""
        self._stats.start_time = time.time()
        self._logger.debug(
            "Generation started",
            chars=text_length,
            font_size=font_size,
            direction=direction,
            mode=mode,
            layers_per_glyph=layers_per_glyph,
        )

    def log_glyph_emitted(self, char: str, glyph_name: str, index: int, layers: int) -> None:
        """Log a glyph group written to the canvas."""
        self._logger.debug("Glyph emitted", char=char, glyph=glyph_name, index=index, layers=layers)
        self._stats.glyphs_emitted += 1
        self._stats.paths_emitted += layers

    def log_whitespace(self, char: str, index: int, advance: float) -> None:
        """Log whitespace that advanced the cursor without output."""
        self._logger.debug("Whitespace advanced", char=char, index=index, advance=round(advance, 2))
        self._stats.whitespace_count += 1

    def log_empty_outline(self, char: str, glyph_name: str, index: int) -> None:
        """Log a glyph that has no outline segments."""
        self._logger.debug("Glyph has no outline", char=char, glyph=glyph_name, index=index)
        self._stats.empty_outline_count += 1

    def log_missing_glyph(self, char: str, index: int) -> None:
        """Log a character the font has no glyph for."""
        self._logger.info("Glyph missing from font", char=char, index=index)
        self._stats.missing_glyphs.append(char)

    def log_complete(self, width: float, height: float) -> None:
        """Log end of a generation call."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Generation complete",
            glyphs=self._stats.glyphs_emitted,
            paths=self._stats.paths_emitted,
            missing=self._stats.missing_count,
            width=round(width, 2),
            height=round(height, 2),
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats

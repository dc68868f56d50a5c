from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog
from structlog.typing import Processor

from edgedebug.config import AppSettings
from edgedebug.errors import UsageError

LOGGER_NAME = "edgedebug"


def configure_cli_logging(settings: AppSettings) -> Path | None:
    """Send logs to stderr and, optionally, a JSON log file.

    stdout carries the rendered document, so no handler ever writes there.
    """
    _configure_structlog()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    _reset_handlers(logger)

    console_stream = sys.stderr
    console_handler = logging.StreamHandler(stream=console_stream)
    console_handler.setLevel(_resolve_log_level(settings.log_level))
    console_handler.setFormatter(
        _formatter(structlog.dev.ConsoleRenderer(colors=_is_tty(console_stream)))
    )
    logger.addHandler(console_handler)

    log_file = settings.log_file
    if log_file is not None:
        file_handler = _open_log_file(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            _formatter(
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(sort_keys=True),
            )
        )
        logger.addHandler(file_handler)

    logger.debug(
        "logging configured console_level=%s path=%s",
        settings.log_level,
        log_file,
    )
    return log_file


def _resolve_log_level(raw_level: str) -> int:
    normalized = raw_level.strip().upper()
    resolved = getattr(logging, normalized, None)
    if isinstance(resolved, int):
        return resolved
    return logging.WARNING


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _open_log_file(log_file: Path) -> logging.FileHandler:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        raise UsageError(f"cannot open log file {log_file}: {exc.strerror or exc}") from exc


def _formatter(*processors: Processor) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *processors,
        ],
    )


def _is_tty(stream: object) -> bool:
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False

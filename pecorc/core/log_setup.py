"""Structured logging configuration for the pecorc command line."""

from __future__ import annotations

import logging
import sys

import structlog

LOG_FORMATS = ("console", "json")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _resolve_log_level(level: str | None) -> int:
    candidate = (level or "warning").upper()
    value = logging.getLevelName(candidate)
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(level: str | None = "warning", stdout_format: str = "console") -> None:
    min_level = _resolve_log_level(level)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    # Route structlog through standard logging
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            timestamper,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
    )

    if stdout_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    root_logger = logging.getLogger()
    root_logger.setLevel(min_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries the dumped config, logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(min_level)
    # Library modules log through plain stdlib loggers
    console_formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    pecorc_logger = logging.getLogger("pecorc")
    pecorc_logger.setLevel(min_level)


__all__ = ["LOG_FORMATS", "LOG_LEVELS", "configure_logging"]

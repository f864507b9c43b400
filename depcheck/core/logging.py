"""Diagnostic logging for depcheck: structlog rendered through stdlib handlers.

Findings are never logged here; they travel in :class:`CheckResult`.  This
only covers the tool's own diagnostics, which always go to stderr.
"""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

LEVEL_ENV = "DEPCHECK_LOG_LEVEL"
FORMAT_ENV = "DEPCHECK_LOG_FORMAT"


def _processors() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(level: str | None = None) -> None:
    """Route ``depcheck.*`` loggers to stderr.

    ``DEPCHECK_LOG_LEVEL`` picks the level (WARNING when unset) unless
    *level* is given.  ``DEPCHECK_LOG_FORMAT=json`` switches from the
    console renderer to one JSON object per line.
    """
    log_level = (level or os.environ.get(LEVEL_ENV, "WARNING")).upper()
    processors = _processors()

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "depcheck": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(os.environ.get(FORMAT_ENV, "console").lower()),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "depcheck",
                },
            },
            "root": {"handlers": ["stderr"], "level": log_level},
            "loggers": {"depcheck": {"level": log_level}},
        }
    )

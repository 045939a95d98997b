"""structlog configuration for applications that drive timeweave.

The package itself only calls ``structlog.get_logger()``; nothing is
configured on import.
"""

import logging
import sys

import structlog

from timeweave.config import LogFormat, Settings, settings as default_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog to emit console or JSON logs.

    Args:
        settings: Settings to read the level and format from. Defaults to the
            module-level settings.
    """
    settings = settings or default_settings
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.LOG_LEVEL}")

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

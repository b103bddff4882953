"""
Opt-in logging setup for applications using this package.

The package itself only calls ``structlog.get_logger``; nothing is configured
on import.
"""

import logging
import sys
from typing import Any

import structlog

from fhir_r4.config import FhirSettings, get_settings


def configure_logging(settings: FhirSettings | None = None) -> None:
    """
    Route structlog through the standard library at the configured level.

    :param settings: Settings to read ``log_level`` and ``log_format`` from.
        Defaults to :func:`~fhir_r4.config.get_settings`.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(settings),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Loggers stay reconfigurable, e.g. by structlog.testing.capture_logs
        cache_logger_on_first_use=False,
    )


def _renderer(settings: FhirSettings) -> Any:
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()

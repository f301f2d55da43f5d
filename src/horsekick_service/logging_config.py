"""Structured logging configuration using structlog.

Events from structlog loggers, from the standard library, and Python warnings
(e.g. DroppedRowWarning raised while cleaning a CSV) all pass through one
ProcessorFormatter, rendered as JSON in production and as console text
otherwise.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

SERVICE_NAME = "horsekick-service"

# Loggers that only add per-request noise next to RequestTracingMiddleware
QUIET_LOGGERS = ("uvicorn.access",)


def add_service_name(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict["app"] = SERVICE_NAME
    return event_dict


def _renderer(environment: str) -> Processor:
    if environment.lower() == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(log_level: str = "INFO", environment: str = "development") -> None:
    """Configure structlog on top of the standard library logging module.

    Args:
        log_level: Logging level name, case-insensitive
        environment: "production" selects JSON output
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_name,
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(environment),
            foreign_pre_chain=pre_chain,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # warnings.warn() output goes to the "py.warnings" logger instead of stderr
    logging.captureWarnings(True)

    structlog.get_logger(__name__).info(
        "Logging configured", log_level=log_level, environment=environment
    )

"""
Logging

structlog configured once at import. Every rating log line carries the
request context bound by the request middleware (request_id, path) and by
authentication (user_id), so a rejected submission can be traced back to
its request:

    2026-10-18T09:12:03Z [warning  ] Application error   error_code=ALREADY_RATED
        request_id=4f0c... user_id=u-1 path=/rating/c-9

Console output in development, one JSON object per line elsewhere.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from scorecard.config.settings import settings


def setup_logging() -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Named logger, e.g. get_logger("scorecard.services.rating")."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind fields to every log line of the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("scorecard")

"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from scorecard.shared.core.logging import logger, get_logger
    from scorecard.shared.core.exceptions import ScorecardException, AlreadyRatedError

    logger.info("Starting operation", user_id=user_id)
"""

from scorecard.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from scorecard.shared.core.exceptions import (
    ScorecardException,
    AuthenticationError,
    NotFoundError,
    ContentNotFoundError,
    RatingNotFoundError,
    ValidationError,
    InvalidCategoryError,
    InvalidScoreError,
    ConflictError,
    AlreadyRatedError,
    NotYetRatedError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "ScorecardException",
    "AuthenticationError",
    "NotFoundError",
    "ContentNotFoundError",
    "RatingNotFoundError",
    "ValidationError",
    "InvalidCategoryError",
    "InvalidScoreError",
    "ConflictError",
    "AlreadyRatedError",
    "NotYetRatedError",
]

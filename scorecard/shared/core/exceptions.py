"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    ScorecardException (base)
       │
       ├── AuthenticationError (401)    ← Missing or invalid bearer token
       ├── NotFoundError (404)          ← Resource not found
       │      ├── ContentNotFoundError
       │      └── RatingNotFoundError   ← No stored entry to delete
       ├── ValidationError (400)        ← Invalid input data
       │      ├── InvalidCategoryError
       │      └── InvalidScoreError
       └── ConflictError (409)          ← Request conflicts with stored state
              ├── AlreadyRatedError
              └── NotYetRatedError

Usage:
======
    from scorecard.shared.core.exceptions import AlreadyRatedError

    raise AlreadyRatedError(user_id, content_id, "clarity", existing_score)
    # Results in: {"error": {"code": "ALREADY_RATED", "message": "...", "details": {...}}}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_YET_RATED",
            "message": "userId=[u-1] has not rated contentId=[c-9] in category=[clarity]",
            "details": {"user_id": "u-1", "content_id": "c-9", "category": "clarity"}
        }
    }
"""

import math
from typing import Any, Iterable, Optional


def _reported_value(value: Any) -> Any:
    """
    Request value as it can appear in a JSON error body.

    Values JSON cannot carry (NaN, infinities, arbitrary objects) are
    reported by their repr.
    """
    if value is None or isinstance(value, (bool, str, int)):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    return repr(value)


class ScorecardException(Exception):
    """
    Base exception for all Scorecard application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION ERRORS (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(ScorecardException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Missing bearer token
    - Token expired or malformed
    - Token payload carries no user_id
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(ScorecardException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("Content", content_id)
        # Message: "Content with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ContentNotFoundError(NotFoundError):
    """Content not found error."""

    def __init__(self, content_id: str) -> None:
        super().__init__(
            resource="Content",
            resource_id=content_id,
            details={"content_id": content_id},
        )


class RatingNotFoundError(NotFoundError):
    """
    Stored rating entry not found.

    Raised by the store when a deletion targets a record or category
    entry that does not exist.
    """

    def __init__(self, user_id: str, content_id: str, category: str) -> None:
        super().__init__(
            resource=f"Rating in category '{category}'",
            details={
                "user_id": user_id,
                "content_id": content_id,
                "category": category,
            },
        )


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(ScorecardException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        error_code: str = "VALIDATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
        )


class InvalidCategoryError(ValidationError):
    """Category is not one of the registered rating categories."""

    def __init__(self, category: Any, valid_categories: Iterable[str]) -> None:
        valid = list(valid_categories)
        super().__init__(
            message=(
                f"category {category} is not one of the valid categories. "
                f"Valid categories are: {', '.join(valid)}"
            ),
            error_code="INVALID_CATEGORY",
            details={"category": _reported_value(category), "valid_categories": valid},
        )


class InvalidScoreError(ValidationError):
    """Score is missing, non-numeric, fractional or outside the allowed range."""

    def __init__(self, score: Any, min_score: int, max_score: int) -> None:
        super().__init__(
            message=(
                f"score {score} is either not a whole number "
                f"or not in [{min_score}, {max_score}]"
            ),
            error_code="INVALID_SCORE",
            details={"score": _reported_value(score), "min": min_score, "max": max_score},
        )


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS (409)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(ScorecardException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource state.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        error_code: str = "CONFLICT",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code=error_code,
            details=details,
        )


class AlreadyRatedError(ConflictError):
    """
    The user already scored this content in this category.

    Carries the existing score so clients can show what is stored.
    """

    def __init__(self, user_id: str, content_id: str, category: str, score: int) -> None:
        self.score = score
        super().__init__(
            message=(
                f"userId=[{user_id}] has already rated contentId=[{content_id}] "
                f"in category=[{category}] with score=[{score}]"
            ),
            error_code="ALREADY_RATED",
            details={
                "user_id": user_id,
                "content_id": content_id,
                "category": category,
                "score": score,
            },
        )


class NotYetRatedError(ConflictError):
    """
    The user has no rating to act on.

    Without a category this means the user has not rated the content at all.
    """

    def __init__(self, user_id: str, content_id: str, category: Optional[str] = None) -> None:
        message = f"userId=[{user_id}] has not rated contentId=[{content_id}]"
        details: dict[str, Any] = {"user_id": user_id, "content_id": content_id}
        if category is not None:
            message = f"{message} in category=[{category}]"
            details["category"] = category
        super().__init__(
            message=message,
            error_code="NOT_YET_RATED",
            details=details,
        )

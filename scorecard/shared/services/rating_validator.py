"""
Rating Validator

Pure checks run before any rating is stored. No I/O: every function takes
the already-loaded record (or None) plus explicit request values, returns
normally to permit and raises the matching error otherwise.

Checks:
=======
- check_category_valid()     → InvalidCategoryError
- check_score_valid()        → InvalidScoreError
- check_not_already_rated()  → AlreadyRatedError   (guards new submissions)
- check_already_rated()      → NotYetRatedError    (guards update / delete)
- check_has_any_rating()     → NotYetRatedError    (content level)

Usage:
======
    category = check_category_valid(raw_category)
    score = check_score_valid(raw_score)
    check_not_already_rated(record, category, user_id=user_id, content_id=content_id)
"""

import math
from typing import Any, Optional

from scorecard.shared.core.exceptions import (
    AlreadyRatedError,
    InvalidCategoryError,
    InvalidScoreError,
    NotYetRatedError,
)
from scorecard.shared.models.enums import RatingCategory
from scorecard.shared.models.rating import Rating


MIN_SCORE = 0
MAX_SCORE = 100


def check_category_valid(category: Any) -> RatingCategory:
    """
    Require a registered category.

    Args:
        category: Raw category from the request (may be None or any type)

    Returns:
        The matching RatingCategory

    Raises:
        InvalidCategoryError: If category is not in the registry
    """
    if not RatingCategory.is_valid(category):
        raise InvalidCategoryError(category, RatingCategory.values())
    return RatingCategory(category)


def check_score_valid(score: Any) -> int:
    """
    Require a whole-number score within [MIN_SCORE, MAX_SCORE].

    Only JSON numbers qualify: ints, and floats with no fractional part
    (80.0 is normalized to 80). None, booleans, strings, NaN, infinities,
    fractional floats and other numeric types (Decimal, Fraction) are rejected.

    Args:
        score: Raw score from the request body

    Returns:
        The score as an int

    Raises:
        InvalidScoreError: If the score is missing, malformed or out of range
    """
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise InvalidScoreError(score, MIN_SCORE, MAX_SCORE)

    if isinstance(score, float) and not (math.isfinite(score) and score.is_integer()):
        raise InvalidScoreError(score, MIN_SCORE, MAX_SCORE)

    if not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidScoreError(score, MIN_SCORE, MAX_SCORE)

    return int(score)


def check_not_already_rated(
    record: Optional[Rating],
    category: RatingCategory,
    *,
    user_id: str,
    content_id: str,
) -> None:
    """
    Require that no score is stored for the category yet.

    Raises:
        AlreadyRatedError: Carrying the stored score
    """
    if record is not None and record.has_category(category.value):
        raise AlreadyRatedError(
            user_id,
            content_id,
            category.value,
            record.score_for(category.value),
        )


def check_already_rated(
    record: Optional[Rating],
    category: RatingCategory,
    *,
    user_id: str,
    content_id: str,
) -> None:
    """
    Require a stored score for the category.

    Raises:
        NotYetRatedError: If there is no record or no entry for the category
    """
    if record is None or not record.has_category(category.value):
        raise NotYetRatedError(user_id, content_id, category.value)


def check_has_any_rating(
    record: Optional[Rating],
    *,
    user_id: str,
    content_id: str,
) -> None:
    """
    Require that the user rated the content in at least one category.

    Raises:
        NotYetRatedError: If there is no record
    """
    if record is None:
        raise NotYetRatedError(user_id, content_id)

"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, error envelope, health
- rating: Rating requests and responses

Usage:
======
    from scorecard.shared.schemas.rating import RatingResponse, RatingSummaryResponse
    from scorecard.shared.schemas.common import ErrorResponse
"""

from scorecard.shared.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from scorecard.shared.schemas.rating import (
    RatingResultResponse,
    RatingResponse,
    CategorySummaryResponse,
    RatingSummaryResponse,
    CategoriesResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Rating
    "RatingResultResponse",
    "RatingResponse",
    "CategorySummaryResponse",
    "RatingSummaryResponse",
    "CategoriesResponse",
]

"""
Rating-related Pydantic schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from scorecard.shared.models.enums import RatingCategory
from scorecard.shared.schemas.common import BaseSchema


class RatingResultResponse(BaseModel):
    """Response for a submitted, updated or removed category score."""

    user_id: str
    content_id: str
    category: RatingCategory
    score: int


class RatingResponse(BaseSchema):
    """A user's stored scores for one content item."""

    user_id: str
    content_id: str
    ratings: dict[str, int] = Field(description="Category -> score")
    created_at: datetime
    updated_at: datetime


class CategorySummaryResponse(BaseSchema):
    """Statistics for one category across all users."""

    category: RatingCategory
    count: int
    average: Optional[float] = None
    minimum: Optional[int] = None
    maximum: Optional[int] = None


class RatingSummaryResponse(BaseSchema):
    """Aggregated ratings of one content item."""

    content_id: str
    raters: int = Field(description="Number of users who rated the content")
    categories: List[CategorySummaryResponse]


class CategoriesResponse(BaseModel):
    """Registered rating categories in registry order."""

    categories: List[RatingCategory]

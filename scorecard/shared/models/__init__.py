"""
Scorecard SQLAlchemy Models

This package contains all database models for the Scorecard application.

Models Overview:
================
- Base: Base class and timestamp mixin
- RatingCategory: Closed registry of rating categories
- Rating: One user's category scores for one content item

Usage:
======
    from scorecard.shared.models import Rating, RatingCategory

    record = await repo.find_one(user_id, content_id)
    record.ratings  # {"clarity": 80, "difficulty": 35}
"""

from scorecard.shared.models.base import Base, TimestampMixin
from scorecard.shared.models.enums import RatingCategory
from scorecard.shared.models.rating import Rating

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "RatingCategory",
    # Core models
    "Rating",
]

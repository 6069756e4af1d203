"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ Validator (pure checks)

Services should:
- Contain business logic and validation
- Own the transaction boundary when a lock must cover the commit
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- RatingService: Submit, update, remove and aggregate ratings

Usage:
======
    from scorecard.shared.services import RatingService

    service = RatingService(db)
    result = await service.submit_rating(user_id, content_id, "clarity", 80)
"""

from scorecard.shared.services.rating_service import (
    CategorySummary,
    ContentDirectory,
    OpenContentDirectory,
    RatingResult,
    RatingService,
    RatingSummary,
)

__all__ = [
    "RatingService",
    "RatingResult",
    "RatingSummary",
    "CategorySummary",
    "ContentDirectory",
    "OpenContentDirectory",
]

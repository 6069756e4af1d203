"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         └── RatingRepository           ← Rating records, per-key locking

Usage Example:
==============
    from scorecard.shared.repositories import RatingRepository

    async def read_rating(db: AsyncSession, user_id: str, content_id: str):
        repo = RatingRepository(db)
        return await repo.find_one(user_id, content_id)
"""

from scorecard.shared.repositories.base import BaseRepository
from scorecard.shared.repositories.rating_repository import RatingRepository

__all__ = [
    "BaseRepository",
    "RatingRepository",
]

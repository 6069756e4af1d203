"""
Rating Repository

Database operations for Rating records: one record per (user_id, content_id)
holding a category -> score mapping.

Common Operations:
==================
- find_one()         → Look up the record for a (user, content) pair
- upsert_category()  → Create the record or set one category's score
- delete_category()  → Remove one category entry (drops empty records)
- lock()             → Serialize mutations of one (user, content) pair

Concurrency:
============
lock() is a Redis lock, so a read-check-write sequence (and its commit) for
one pair runs alone across every worker process. The row also carries a
version counter: an UPDATE or DELETE that lost a race anyway matches no row
and raises StaleDataError instead of overwriting a newer mapping, and the
unique constraint on (user_id, content_id) rejects a second insert.

Usage Example:
==============
    repo = RatingRepository(db)
    async with repo.lock(user_id, content_id):
        record = await repo.find_one(user_id, content_id)
        if record is None or not record.has_category("clarity"):
            await repo.upsert_category(user_id, content_id, "clarity", 80)
        await db.commit()
"""

from typing import Optional

from redis.asyncio.lock import Lock
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from scorecard.shared.adapters.redis_adapter import RedisAdapter, get_redis_adapter
from scorecard.shared.core.exceptions import RatingNotFoundError
from scorecard.shared.core.logging import get_logger
from scorecard.shared.models.enums import RatingCategory
from scorecard.shared.models.rating import Rating
from scorecard.shared.repositories.base import BaseRepository


logger = get_logger("scorecard.repositories.rating")


def _category_key(category: RatingCategory | str) -> str:
    if isinstance(category, RatingCategory):
        return category.value
    return category


class RatingRepository(BaseRepository[Rating]):
    """
    Repository for Rating database operations.

    Owns the stored category mapping: no other component writes it.
    """

    def __init__(self, session: AsyncSession, redis: Optional[RedisAdapter] = None) -> None:
        """
        Initialize RatingRepository.

        Args:
            session: Async database session
            redis: Lock provider; defaults to the process-wide adapter
        """
        super().__init__(Rating, session)
        self.redis = redis if redis is not None else get_redis_adapter()

    def lock(self, user_id: str, content_id: str) -> Lock:
        """
        Serialize mutations for one (user_id, content_id) pair.

        Different pairs never wait on each other.
        """
        return self.redis.lock(f"rating:{user_id}:{content_id}")

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find_one(self, user_id: str, content_id: str) -> Optional[Rating]:
        """
        Get the rating record for a user and content item.

        Always reloads the row, so a record already in the session reflects
        writes committed by other workers.

        Args:
            user_id: Rating user
            content_id: Rated content

        Returns:
            Rating if the user rated the content in any category, None otherwise

        SQL Generated:
            SELECT * FROM ratings WHERE user_id = '...' AND content_id = '...'
        """
        result = await self.session.execute(
            select(Rating)
            .where(
                Rating.user_id == user_id,
                Rating.content_id == content_id,
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_for_content(self, content_id: str) -> list[Rating]:
        """Get every user's record for a content item, oldest first."""
        result = await self.session.execute(
            select(Rating)
            .where(Rating.content_id == content_id)
            .order_by(Rating.created_at, Rating.user_id)
        )
        return list(result.scalars().all())

    async def list_for_user(self, user_id: str) -> list[Rating]:
        """Get all records of one user, oldest first."""
        result = await self.session.execute(
            select(Rating)
            .where(Rating.user_id == user_id)
            .order_by(Rating.created_at, Rating.content_id)
        )
        return list(result.scalars().all())

    # ═══════════════════════════════════════════════════════════════════════════
    # MUTATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def upsert_category(
        self,
        user_id: str,
        content_id: str,
        category: RatingCategory | str,
        score: int,
    ) -> Rating:
        """
        Set one category's score, creating the record if needed.

        Args:
            user_id: Rating user
            content_id: Rated content
            category: Category to set
            score: Validated score

        Returns:
            The created or updated record

        Raises:
            sqlalchemy.exc.IntegrityError: If another worker inserted the
                record for this pair first
            sqlalchemy.orm.exc.StaleDataError: If another worker changed the
                record since it was read
        """
        key = _category_key(category)
        record = await self.find_one(user_id, content_id)

        if record is None:
            record = await self.create(
                user_id=user_id,
                content_id=content_id,
                ratings={key: score},
            )
            logger.debug("Rating record created", user_id=user_id, content_id=content_id)
            return record

        record.ratings = {**record.ratings, key: score}
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def delete_category(
        self,
        user_id: str,
        content_id: str,
        category: RatingCategory | str,
    ) -> Optional[Rating]:
        """
        Remove one category entry from a record.

        A record left without entries is deleted.

        Args:
            user_id: Rating user
            content_id: Rated content
            category: Category to remove

        Returns:
            The updated record, or None if the record was deleted

        Raises:
            RatingNotFoundError: If there is no record or no entry for the category
        """
        key = _category_key(category)
        record = await self.find_one(user_id, content_id)

        if record is None or key not in record.ratings:
            raise RatingNotFoundError(user_id, content_id, key)

        remaining = {name: score for name, score in record.ratings.items() if name != key}

        if not remaining:
            await self.delete(record)
            logger.debug("Rating record deleted", user_id=user_id, content_id=content_id)
            return None

        record.ratings = remaining
        await self.session.flush()
        await self.session.refresh(record)
        return record

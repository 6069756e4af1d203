"""
Rating Service

Business logic for rating operations.

Every mutation is a fixed pipeline: request-only checks first (category,
score), then the record is loaded under the (user, content) lock, the
state check runs against it, and the write is committed before the lock
is released. The first failing check ends the request; nothing is written.

    submit_rating:  category → score → load → not already rated → upsert
    update_rating:  category → score → load → already rated     → upsert
    remove_rating:  category → content exists → load → already rated → delete

Usage:
======
    from scorecard.shared.services.rating_service import RatingService

    service = RatingService(db)
    result = await service.submit_rating(user_id, content_id, "clarity", 80)
"""

from dataclasses import dataclass, field
from statistics import fmean
from typing import Any, Awaitable, Optional, Protocol, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from scorecard.shared.core.exceptions import ConflictError, ContentNotFoundError
from scorecard.shared.core.logging import get_logger
from scorecard.shared.models.enums import RatingCategory
from scorecard.shared.models.rating import Rating
from scorecard.shared.repositories.rating_repository import RatingRepository
from scorecard.shared.services.rating_validator import (
    check_already_rated,
    check_category_valid,
    check_has_any_rating,
    check_not_already_rated,
    check_score_valid,
)


logger = get_logger("scorecard.services.rating")

T = TypeVar("T")


class ContentDirectory(Protocol):
    """Answers whether a content id names existing content."""

    async def exists(self, content_id: str) -> bool:
        ...


class OpenContentDirectory:
    """Directory that treats every content id as existing."""

    async def exists(self, content_id: str) -> bool:
        return True


@dataclass
class RatingResult:
    """Outcome of a successful mutation for one category."""

    user_id: str
    content_id: str
    category: RatingCategory
    score: int


@dataclass
class CategorySummary:
    """Score statistics for one category across all users."""

    category: RatingCategory
    count: int = 0
    average: Optional[float] = None
    minimum: Optional[int] = None
    maximum: Optional[int] = None


@dataclass
class RatingSummary:
    """Aggregated ratings of one content item."""

    content_id: str
    raters: int
    categories: list[CategorySummary] = field(default_factory=list)


class RatingService:
    """
    Service for rating-related business logic.

    Handles:
    - Submitting a first score for a category
    - Updating an existing score
    - Removing a score
    - Reading a user's record and aggregating a content item's ratings

    Attributes:
        session: Database session
        repo: RatingRepository instance
        content_directory: Content existence collaborator
    """

    def __init__(
        self,
        session: AsyncSession,
        content_directory: Optional[ContentDirectory] = None,
        repo: Optional[RatingRepository] = None,
    ) -> None:
        """
        Initialize RatingService.

        Args:
            session: Async database session
            content_directory: Content existence check; defaults to accepting all ids
            repo: Repository override (shares the session when omitted)
        """
        self.session = session
        self.repo = repo if repo is not None else RatingRepository(session)
        self.content_directory = content_directory or OpenContentDirectory()

    # ═══════════════════════════════════════════════════════════════════════════
    # MUTATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def submit_rating(
        self,
        user_id: str,
        content_id: str,
        category: Any,
        score: Any,
    ) -> RatingResult:
        """
        Store a user's first score for a category of a content item.

        Args:
            user_id: Authenticated user
            content_id: Rated content
            category: Raw category from the request
            score: Raw score from the request (may be missing or malformed)

        Returns:
            RatingResult with the stored score

        Raises:
            InvalidCategoryError: Category not registered
            InvalidScoreError: Score missing, malformed or out of range
            AlreadyRatedError: A score for the category is already stored
        """
        rating_category = check_category_valid(category)
        valid_score = check_score_valid(score)

        async with self.repo.lock(user_id, content_id):
            record = await self.repo.find_one(user_id, content_id)
            check_not_already_rated(
                record, rating_category, user_id=user_id, content_id=content_id
            )
            await self._publish(
                self.repo.upsert_category(user_id, content_id, rating_category, valid_score),
                user_id,
                content_id,
            )

        logger.info(
            "Rating submitted",
            user_id=user_id,
            content_id=content_id,
            category=rating_category.value,
            score=valid_score,
        )
        return RatingResult(user_id, content_id, rating_category, valid_score)

    async def update_rating(
        self,
        user_id: str,
        content_id: str,
        category: Any,
        score: Any,
    ) -> RatingResult:
        """
        Overwrite a user's existing score for a category.

        Raises:
            InvalidCategoryError: Category not registered
            InvalidScoreError: Score missing, malformed or out of range
            NotYetRatedError: No score stored for the category
        """
        rating_category = check_category_valid(category)
        valid_score = check_score_valid(score)

        async with self.repo.lock(user_id, content_id):
            record = await self.repo.find_one(user_id, content_id)
            check_already_rated(record, rating_category, user_id=user_id, content_id=content_id)
            await self._publish(
                self.repo.upsert_category(user_id, content_id, rating_category, valid_score),
                user_id,
                content_id,
            )

        logger.info(
            "Rating updated",
            user_id=user_id,
            content_id=content_id,
            category=rating_category.value,
            score=valid_score,
        )
        return RatingResult(user_id, content_id, rating_category, valid_score)

    async def remove_rating(
        self,
        user_id: str,
        content_id: str,
        category: Any,
    ) -> RatingResult:
        """
        Remove a user's score for a category.

        Returns:
            RatingResult carrying the removed score

        Raises:
            InvalidCategoryError: Category not registered
            ContentNotFoundError: Content id does not resolve to content
            NotYetRatedError: No score stored for the category
        """
        rating_category = check_category_valid(category)

        if not await self.content_directory.exists(content_id):
            raise ContentNotFoundError(content_id)

        async with self.repo.lock(user_id, content_id):
            record = await self.repo.find_one(user_id, content_id)
            check_already_rated(record, rating_category, user_id=user_id, content_id=content_id)
            removed_score = record.score_for(rating_category.value)
            await self._publish(
                self.repo.delete_category(user_id, content_id, rating_category),
                user_id,
                content_id,
            )

        logger.info(
            "Rating removed",
            user_id=user_id,
            content_id=content_id,
            category=rating_category.value,
        )
        return RatingResult(user_id, content_id, rating_category, removed_score)

    async def _publish(self, write: Awaitable[T], user_id: str, content_id: str) -> T:
        """Run a store write and commit it; losing a race to another worker becomes a conflict."""
        try:
            result = await write
            await self.session.commit()
        except (IntegrityError, StaleDataError) as e:
            await self.session.rollback()
            logger.warning(
                "Concurrent rating record write",
                user_id=user_id,
                content_id=content_id,
                error=str(e),
            )
            raise ConflictError(
                "Rating record was modified concurrently, retry the request",
                details={"user_id": user_id, "content_id": content_id},
            ) from e
        return result

    # ═══════════════════════════════════════════════════════════════════════════
    # QUERIES
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_rating(self, user_id: str, content_id: str) -> Optional[Rating]:
        """
        Get the user's record for a content item.

        Returns:
            Rating or None if the user has not rated the content
        """
        return await self.repo.find_one(user_id, content_id)

    async def get_user_rating(self, user_id: str, content_id: str) -> Rating:
        """
        Get the user's record for a content item, requiring that it exists.

        Raises:
            NotYetRatedError: If the user has not rated the content at all
        """
        record = await self.get_rating(user_id, content_id)
        check_has_any_rating(record, user_id=user_id, content_id=content_id)
        return record

    async def list_user_ratings(self, user_id: str) -> list[Rating]:
        """Get all of a user's records."""
        return await self.repo.list_for_user(user_id)

    async def summarize_content(self, content_id: str) -> RatingSummary:
        """
        Aggregate all users' scores for a content item.

        Every registered category is reported in registry order; categories
        nobody rated have count 0 and no statistics.

        Args:
            content_id: Content to summarize

        Returns:
            RatingSummary with per-category count, average, min and max
        """
        records = await self.repo.list_for_content(content_id)

        scores: dict[RatingCategory, list[int]] = {category: [] for category in RatingCategory.all()}
        for record in records:
            for name, score in record.ratings.items():
                if RatingCategory.is_valid(name):
                    scores[RatingCategory(name)].append(score)

        categories = []
        for category, values in scores.items():
            if not values:
                categories.append(CategorySummary(category=category))
                continue
            categories.append(
                CategorySummary(
                    category=category,
                    count=len(values),
                    average=round(fmean(values), 2),
                    minimum=min(values),
                    maximum=max(values),
                )
            )

        return RatingSummary(content_id=content_id, raters=len(records), categories=categories)

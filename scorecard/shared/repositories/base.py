"""
Base Repository

Generic write helpers shared by repositories. Lookups are entity specific
(ratings are found by their (user_id, content_id) pair, never by id), so
they live on the concrete repository.

Repository methods flush, never commit: the service decides when a change
is published, because a rating write must be committed before its key lock
is released.
"""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from scorecard.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository bound to one model and one session.

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Insert a new row and reload it with its generated values
        (id, timestamps, version).
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, instance: ModelType) -> None:
        """Delete a loaded row."""
        await self.session.delete(instance)
        await self.session.flush()

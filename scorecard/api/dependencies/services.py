"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request with the request's db session. The
content directory is a separate dependency so deployments can plug in
their own existence check:

    app.dependency_overrides[get_content_directory] = lambda: LessonDirectory()

Usage:
======
    from scorecard.api.dependencies.services import get_rating_service

    @router.post("/{content_id}")
    async def submit(rating_service: RatingService = Depends(get_rating_service)):
        ...
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from scorecard.api.dependencies.database import get_db
from scorecard.shared.services.rating_service import (
    ContentDirectory,
    OpenContentDirectory,
    RatingService,
)


async def get_content_directory() -> ContentDirectory:
    """
    Dependency providing the content existence check.

    Accepts every content id unless overridden.
    """
    return OpenContentDirectory()


async def get_rating_service(
    db: AsyncSession = Depends(get_db),
    content_directory: ContentDirectory = Depends(get_content_directory),
) -> RatingService:
    """
    Dependency to get RatingService instance.
    """
    return RatingService(db, content_directory=content_directory)

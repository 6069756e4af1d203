"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser
- Services: get_rating_service(), get_content_directory()

Usage:
======
    from scorecard.api.dependencies import DbSession, CurrentUser

    @router.get("/rating")
    async def list_ratings(db: DbSession, user: CurrentUser):
        ...
"""

from scorecard.api.dependencies.database import (
    get_db,
    DbSession,
)
from scorecard.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    CurrentUser,
)
from scorecard.api.dependencies.services import (
    get_content_directory,
    get_rating_service,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "CurrentUser",
    # Services
    "get_content_directory",
    "get_rating_service",
]

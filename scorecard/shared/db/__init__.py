"""
Database access: the async engine, the per-request session dependency
and the startup/shutdown/readiness hooks.

    from scorecard.shared.db import get_db

    @router.get("/rating/{content_id}")
    async def get_rating(content_id: str, db: AsyncSession = Depends(get_db)):
        return await RatingRepository(db).find_one(user_id, content_id)
"""

from scorecard.shared.db.session import (
    AsyncSessionLocal,
    close_db,
    engine,
    get_db,
    init_db,
    ping_db,
)

__all__ = [
    "AsyncSessionLocal",
    "close_db",
    "engine",
    "get_db",
    "init_db",
    "ping_db",
]

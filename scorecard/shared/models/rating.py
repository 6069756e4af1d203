"""
Rating Entity Model

All scores one user has given one content item, one entry per category.

SAMPLE RATING RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id          │ 550e8400-e29b-41d4-a716-446655440000                           │
│ user_id     │ 6385f1c2a9e2b1d4c8e7f012                                       │
│ content_id  │ 6385f2d0a9e2b1d4c8e7f0ab                                       │
│ ratings     │ {"clarity": 80, "difficulty": 35}                              │
└──────────────────────────────────────────────────────────────────────────────┘

A record exists only while it holds at least one category entry.
"""

import uuid
from typing import Any

from sqlalchemy import Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from scorecard.shared.models.base import Base, TimestampMixin


class Rating(Base, TimestampMixin):
    """
    Rating model - one user's category scores for one piece of content.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: The user who rated
        content_id: The rated content (lesson, showcase, ...), opaque id
        ratings: Mapping of category value -> score in [0, 100]
        version: Optimistic concurrency counter, 1 on insert
    """

    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "content_id", name="uq_ratings_user_content"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # COMPOSITE KEY
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )

    content_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # SCORES
    # ═══════════════════════════════════════════════════════════════════════════

    # Reassign rather than mutate in place; plain JSON columns do not track
    # nested changes.
    ratings: Mapped[dict[str, Any]] = mapped_column(
        nullable=False,
        default=dict,
    )

    # Bumped by every UPDATE; a write based on a stale read matches no row
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    # ═══════════════════════════════════════════════════════════════════════════
    # METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def has_category(self, category: str) -> bool:
        """Check whether a score is stored for the category."""
        return category in self.ratings

    def score_for(self, category: str) -> int | None:
        return self.ratings.get(category)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<Rating(user_id={self.user_id}, content_id={self.content_id}, "
            f"ratings={self.ratings})>"
        )

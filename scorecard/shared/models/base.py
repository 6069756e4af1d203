"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models.
It includes the declarative base and the timestamp mixin.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Usage:
======
    from scorecard.shared.models.base import Base, TimestampMixin

    class Rating(Base, TimestampMixin):
        __tablename__ = "ratings"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
        ratings: Mapped[dict[str, Any]] = mapped_column(nullable=False)
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides:
    - Type annotation support for columns
    - JSON type mapping: JSONB on PostgreSQL, plain JSON elsewhere

    Example:
        class Rating(Base, TimestampMixin):
            __tablename__ = "ratings"

            id: Mapped[uuid.UUID] = mapped_column(
                Uuid,
                primary_key=True,
                default=uuid.uuid4
            )
    """

    # dict columns are JSONB on PostgreSQL; other dialects (tests) get JSON
    type_annotation_map = {
        dict[str, Any]: JSON().with_variant(JSONB(), "postgresql"),
    }


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    Provides two timestamp columns that are automatically managed:
    - created_at: Set when the record is first inserted
    - updated_at: Updated whenever the record is modified

    Database Behavior:
    ==================
    - created_at: Set by the database on INSERT via server_default
    - updated_at: Set on INSERT, updated by SQLAlchemy on UPDATE via onupdate
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

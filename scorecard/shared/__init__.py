"""
Shared Module

Contains the rating engine and its supporting layers:
- Models: SQLAlchemy ORM models and the category registry
- Repositories: Data access layer
- Services: Validation and orchestration
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models, RatingCategory
    ├── repositories/   ← Data access layer
    ├── services/       ← Rating validator and service
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and versions
    ├── adapters/       ← Redis (per-key mutation locks)
    └── utils/          ← JWT verification

Usage:
======
    from scorecard.shared.models import Rating, RatingCategory
    from scorecard.shared.repositories import RatingRepository
    from scorecard.shared.services import RatingService
    from scorecard.shared.core import logger, ScorecardException
"""

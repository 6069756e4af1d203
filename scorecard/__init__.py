"""
Scorecard Backend

Per-user, per-content, per-category ratings with validation and aggregation.

Package Structure:
==================
    scorecard/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn scorecard.api.main:app --reload

    # Migrations
    alembic upgrade head
"""

"""
API Handlers

Route handlers grouped by resource.

Handlers:
=========
- health_handler: /health, /ready, /live
- rating_handler: /rating

Usage:
======
    from scorecard.api.handlers import rating_handler

    app.include_router(rating_handler.router, prefix="/rating")
"""

from scorecard.api.handlers import health_handler, rating_handler

__all__ = [
    "health_handler",
    "rating_handler",
]

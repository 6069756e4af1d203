"""
Adapters for infrastructure other than the database.

- redis_adapter: per-(user, content) mutation locks
"""

from scorecard.shared.adapters.redis_adapter import (
    RedisAdapter,
    close_redis,
    get_redis_adapter,
)

__all__ = [
    "RedisAdapter",
    "close_redis",
    "get_redis_adapter",
]

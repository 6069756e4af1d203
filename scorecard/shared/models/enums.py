"""
Enums used across the application.
"""

from enum import Enum
from typing import Any


class RatingCategory(str, Enum):
    """
    Closed set of dimensions along which content is rated.

    Declaration order is the registry order used in listings,
    summaries and error messages.
    """

    CLARITY = "clarity"
    DIFFICULTY = "difficulty"
    USEFULNESS = "usefulness"
    ENGAGEMENT = "engagement"

    @classmethod
    def is_valid(cls, category: Any) -> bool:
        """Check whether a raw value names a registered category."""
        return isinstance(category, str) and category in cls._value2member_map_

    @classmethod
    def all(cls) -> list["RatingCategory"]:
        """All categories in registry order."""
        return list(cls)

    @classmethod
    def values(cls) -> list[str]:
        return [category.value for category in cls]

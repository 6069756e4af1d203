"""
Utilities.

- security: bearer JWT verification
"""

from scorecard.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]

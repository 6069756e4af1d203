"""
Authentication Dependencies

FastAPI dependencies for the caller identity.

Dependency Hierarchy:
=====================
    get_current_user_token()  ← Extract and validate JWT from header
           │
           ▼
    get_current_user()        ← Require a user_id claim

The user_id is trusted as given; issuing tokens and checking that the user
still exists belong to the identity provider.

Usage:
======
    from scorecard.api.dependencies.auth import CurrentUser

    @router.get("/rating")
    async def list_ratings(current_user: CurrentUser):
        return current_user["user_id"]
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from scorecard.config.settings import settings
from scorecard.shared.core.exceptions import AuthenticationError
from scorecard.shared.core.logging import log_context
from scorecard.shared.utils.security import SecurityUtils


# Missing headers reach get_current_user_token as None so the error
# goes through the application's own error format
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict:
    """
    Get current authenticated user from token.

    Args:
        token: Decoded JWT token

    Returns:
        User data dict with user_id

    Raises:
        AuthenticationError: If user_id not in token
    """
    user_id = token.get("user_id")

    if not user_id:
        raise AuthenticationError("Invalid token payload")

    log_context(user_id=str(user_id))

    return {"user_id": str(user_id)}


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[dict, Depends(get_current_user)]

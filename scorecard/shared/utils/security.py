"""
Caller identity.

Tokens are issued by the identity provider; this service only verifies
them and reads the user_id claim (see api/dependencies/auth.py).
"""

import jwt


class SecurityUtils:
    """JWT verification for bearer tokens."""

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Verify a token's signature and expiry and return its claims.

        Raises:
            ValueError: If the token is expired or invalid
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e

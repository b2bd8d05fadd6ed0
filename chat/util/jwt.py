"""JWT token utilities.

Caller tokens carry the authenticated identity in an ``identity`` claim:

    {"identity": {"user_id": "...", "account_role": "applicant"}, "exp": ...}
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from chat.config import AuthSettings


class Identity(BaseModel):
    """Authenticated identity carried by a token."""

    user_id: str
    account_role: Optional[str] = None


class TokenPayload(BaseModel):
    """JWT token payload."""

    identity: Identity
    exp: Optional[datetime] = None

    @property
    def user_id(self) -> str:
        return self.identity.user_id


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    account_role: str | None = None,
    expires_in: timedelta = timedelta(days=1),
) -> str:
    """Create a JWT token for an identity.

    Args:
        user_id: User ID
        settings: Authentication settings
        account_role: Optional role of the account
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    payload = {
        "identity": {"user_id": user_id, "account_role": account_role},
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or has no identity
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except (PydanticValidationError, TypeError):
        raise JWTError("Token has no identity")

"""Helpers shared by the message routes."""

import logfire
from fastapi import HTTPException, status

from chat.domain.error import (
    ContentDeletedError,
    DomainError,
    NotFoundError,
    OperationFailedError,
    ValidationError,
)
from chat.domain.service import JWTService

BEARER_PREFIX = "bearer "


def require_user(authorization: str | None, jwt_service: JWTService) -> str:
    """Resolve the calling user from an ``Authorization: Bearer`` header.

    Args:
        authorization: Raw Authorization header value
        jwt_service: JWT service from DI

    Returns:
        The caller's user ID

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = authorization[len(BEARER_PREFIX) :].strip()
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


def to_http_error(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error returned to the caller."""
    if isinstance(error, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ContentDeletedError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(error, OperationFailedError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        code = status.HTTP_400_BAD_REQUEST

    logfire.warn(
        "Message request failed",
        error=str(error),
        error_type=type(error).__name__,
        status_code=code,
    )
    return HTTPException(status_code=code, detail=str(error))

"""Bearer-token identity for the notes API.

Every note belongs to the opaque ``sub`` claim of the caller's access
token. Owner ids are only ever compared for equality.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from ainotes.config import Settings, get_settings

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"

# Tokens are issued by an external identity provider; this API only verifies them.
bearer_scheme = HTTPBearer(auto_error=False)


class InvalidTokenError(Exception):
    """Token could not be decoded or does not identify an owner."""


def issue_owner_token(owner_id: str, ttl: timedelta | None = None, *, settings: Settings | None = None) -> str:
    """Sign an access token whose subject is *owner_id*."""
    settings = settings or get_settings()
    ttl = ttl if ttl is not None else timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    claims: dict[str, Any] = {
        "sub": owner_id,
        "type": ACCESS_TOKEN_TYPE,
        "exp": datetime.now(UTC) + ttl,
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def owner_from_token(token: str, *, settings: Settings | None = None) -> str:
    """Return the owner id carried by an access token.

    Raises:
        InvalidTokenError: bad signature, expired, wrong type or no subject.
    """
    settings = settings or get_settings()
    try:
        claims = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as exc:
        raise InvalidTokenError(str(exc)) from exc

    if claims.get("type") != ACCESS_TOKEN_TYPE:
        raise InvalidTokenError("not an access token")
    owner_id = claims.get("sub")
    if not owner_id:
        raise InvalidTokenError("token has no subject")
    return str(owner_id)


async def get_current_owner(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    try:
        if credentials is None:
            raise InvalidTokenError("missing bearer token")
        return owner_from_token(credentials.credentials)
    except InvalidTokenError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None

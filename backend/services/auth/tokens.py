from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config import Settings, get_settings


logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class InvalidTokenError(Exception):
    """Raised when a bearer token is missing a user or fails verification."""


def create_access_token(
    user_id: str,
    settings: Optional[Settings] = None,
    expires_in: Optional[timedelta] = None,
) -> str:
    """Issue a signed token carrying the user id in a ``userId`` claim.

    Args:
        user_id: The authenticated user's id.
        settings: Settings to sign with (defaults to app settings).
        expires_in: Token lifetime (defaults to ``jwt_expires_days``).

    Returns:
        Encoded JWT.
    """
    settings = settings or get_settings()
    expires_in = expires_in if expires_in is not None else timedelta(days=settings.jwt_expires_days)
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> str:
    """Verify a token and return the user id it carries.

    Raises:
        InvalidTokenError: If the token is expired, tampered with or has no user id.
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token has expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError("Invalid token") from e

    user_id = payload.get("userId") or payload.get("sub")
    if not user_id:
        raise InvalidTokenError("Token does not identify a user")
    return str(user_id)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """Dependency resolving the caller's user id from the Authorization header."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Access token is required")

    try:
        return decode_access_token(credentials.credentials, settings)
    except InvalidTokenError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise HTTPException(status_code=401, detail=str(e))

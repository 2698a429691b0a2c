"""Bearer-token helpers. Tokens are issued by the auth service; this app only verifies them."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from fastapi import HTTPException, status

from backoffice.config import settings

_BEARER = "Bearer "


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """
    Create a JWT containing arbitrary `data`.

    Expected payload keys:
      sub, role
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def extract_bearer_token(auth_header: str | None) -> str:
    """Pull the token out of an Authorization header. Raises 401 on a missing or malformed header."""
    if not auth_header:
        raise _unauthorized("Missing Authorization header")
    if not auth_header.startswith(_BEARER):
        raise _unauthorized("Invalid token format. Expected 'Bearer <token>'")
    token = auth_header[len(_BEARER):].strip()
    if not token:
        raise _unauthorized("Empty bearer token")
    return token


def decode_access_token(token: str) -> dict:
    """Decode and verify a JWT. Raises 401 on failure or when the role claim is absent."""
    try:
        payload = jwt.decode(
            token, settings.secret_key, algorithms=[settings.algorithm]
        )
    except JWTError:
        raise _unauthorized("Invalid or expired token")
    if not payload.get("role"):
        raise _unauthorized("Token carries no role claim")
    return payload

from __future__ import annotations

from typing import Optional

import jwt
from fastapi import HTTPException, status

from app.config import get_settings


def _load_api_tokens() -> set[str]:
    settings = get_settings()
    tokens = set()
    if settings.API_TOKENS:
        for value in settings.API_TOKENS.split(","):
            value = value.strip()
            if value:
                tokens.add(value)
    return tokens


def _get_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _decode_jwt(token: str) -> dict:
    settings = get_settings()
    options = {"verify_aud": bool(settings.JWT_AUDIENCE)}
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options=options,
        )
    except jwt.PyJWTError as exc:
        raise _unauthorized("Invalid token") from exc


def authenticate_request(authorization: Optional[str]) -> dict:
    """Resolve the bearer credential of a request.

    Static API tokens are checked first, then JWTs when a signing secret is
    configured. With neither configured every request is rejected.
    """
    token = _get_bearer_token(authorization)
    if not token:
        raise _unauthorized("Not authenticated")

    if token in _load_api_tokens():
        return {"auth_type": "api_token"}

    settings = get_settings()
    if settings.JWT_SECRET:
        payload = _decode_jwt(token)
        return {"auth_type": "jwt", "payload": payload}

    raise _unauthorized("Invalid token")

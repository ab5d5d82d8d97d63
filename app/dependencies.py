from typing import Optional

from fastapi import Header

from app.core.security import authenticate_request
from app.database.session import get_db


def require_auth(authorization: Optional[str] = Header(None)):
    return authenticate_request(authorization)


__all__ = ["get_db", "require_auth"]

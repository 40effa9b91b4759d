from typing import Optional

from fastapi import Header

from app import config
from app.auth.tokens import verify_token
from app.errors import Forbidden, Unauthenticated


def get_current_user_id(authorization: Optional[str] = Header(None)) -> int:
    """Authenticate the request from its ``Authorization: Bearer`` header.

    Missing header or token -> 401; a token that fails verification -> 403.
    """
    parts = authorization.split(" ") if authorization else []
    token = parts[1] if len(parts) > 1 else None
    if not token:
        raise Unauthenticated()

    user_id = verify_token(token, config.JWT_SECRET)
    if user_id is None:
        raise Forbidden("Invalid or expired token.")
    return user_id

"""JWT token creation and verification helpers.

Uses PyJWT with HS256 algorithm for signing.
Tokens carry the user id and an expiry timestamp.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt


def create_token(user_id: int, secret: str, expiry_hours: int = 24) -> str:
    """Create a signed JWT token for a user.

    Args:
        user_id: ID of the authenticated user.
        secret: Secret key used for HS256 signing.
        expiry_hours: Token validity duration in hours (default 24).

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "iat": now,
        "exp": now + timedelta(hours=expiry_hours),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def verify_token(token: str, secret: str) -> Optional[int]:
    """Verify a JWT token and extract the user id.

    Returns:
        The ``userId`` claim on success, or ``None`` if the token is
        expired, malformed, has an invalid signature or lacks the claim.
    """
    try:
        payload = jwt.decode(token, secret, algorithms=["HS256"])
        return int(payload["userId"])
    except (jwt.InvalidTokenError, KeyError, TypeError, ValueError):
        return None

"""
Credential hashing and bearer-token helpers.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from points_bank.errors import Unauthenticated

JWT_ALGORITHM = "HS256"


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def issue_token(account_id: int, secret: str, ttl_hours: int = 24, now: Optional[datetime] = None) -> str:
    """
    Sign an HS256 JWT whose subject is the internal account id.
    """
    issued = now or datetime.now(timezone.utc)
    claims = {
        "sub": str(account_id),
        "iat": issued,
        "exp": issued + timedelta(hours=ttl_hours),
    }
    return jwt.encode(claims, secret, algorithm=JWT_ALGORITHM)


def verify_token(token: str, secret: str) -> int:
    """
    Return the account id carried by token, or raise Unauthenticated.
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.InvalidTokenError:
        raise Unauthenticated("invalid token")

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise Unauthenticated("invalid token")


def parse_bearer(header: Optional[str]) -> str:
    """
    Extract the token from an "Authorization: Bearer <token>" header value.
    """
    if not header:
        raise Unauthenticated("missing authorization header")
    parts = header.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise Unauthenticated("invalid authorization header")
    return parts[1].strip()

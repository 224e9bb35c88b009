"""Auth service: JWT, password hashing."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from app.config import settings


@dataclass(frozen=True)
class UserIdentity:
    """Who a verified session token belongs to."""

    id: int
    email: str


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash (e.g. seeded placeholder)
        return False


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def create_access_token(user_id: int, email: str, expires_minutes: int | None = None) -> str:
    minutes = settings.access_token_minutes if expires_minutes is None else expires_minutes
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    payload = {"sub": str(user_id), "email": email, "exp": expire}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> UserIdentity | None:
    """Return the identity carried by ``token``, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        return None
    sub = payload.get("sub")
    email = payload.get("email")
    if sub is None or email is None:
        return None
    try:
        return UserIdentity(id=int(sub), email=email)
    except (TypeError, ValueError):
        return None

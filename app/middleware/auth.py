"""Auth dependency for protected routes."""
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.config import settings
from app.database import get_db
from app.errors import AuthenticationError
from app.services import users
from app.services.auth import UserIdentity, decode_token

bearer_scheme = HTTPBearer(auto_error=False)


def _token_from_request(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    """Session cookie wins over the Authorization header when both are sent."""
    token = request.cookies.get(settings.auth_cookie_name)
    if token:
        return token
    if credentials and credentials.scheme.lower() == "bearer":
        return credentials.credentials
    return None


async def get_current_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserIdentity | None:
    """Identity from the session token. Returns None if absent or invalid."""
    token = _token_from_request(request, credentials)
    if not token:
        return None
    return decode_token(token)


async def get_current_identity_required(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserIdentity:
    """Require a valid session token. Raises 401 otherwise."""
    token = _token_from_request(request, credentials)
    if not token:
        raise AuthenticationError("Missing token")
    identity = decode_token(token)
    if not identity:
        raise AuthenticationError("Invalid or expired token")
    return identity


def get_current_user_identity(
    identity: UserIdentity = Depends(get_current_identity_required),
    db=Depends(get_db),
) -> UserIdentity:
    """Like ``get_current_identity_required`` but the account must still exist.

    Used by routes that write rows owned by the caller.
    """
    if not users.user_exists(db, identity.id):
        raise AuthenticationError("Account no longer exists")
    return identity

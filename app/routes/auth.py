"""Auth routes."""
from fastapi import APIRouter, Depends, Response, status

from app.config import settings
from app.database import get_db
from app.middleware.auth import get_current_identity_required
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserEnvelope, UserResponse
from app.schemas.common import MessageResponse
from app.services import users
from app.services.auth import UserIdentity

router = APIRouter(tags=["auth"])


def _set_auth_cookie(response: Response, token: str) -> None:
    # httponly so page scripts cannot read the token
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.access_token_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserEnvelope)
def register(data: RegisterRequest, db=Depends(get_db)):
    user = users.register_user(db, data)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, response: Response, db=Depends(get_db)):
    _, token = users.authenticate(db, data.email, data.password)
    _set_auth_cookie(response, token)
    return TokenResponse(token=token)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    response.delete_cookie(settings.auth_cookie_name, httponly=True, samesite="lax")
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserEnvelope)
def me(identity: UserIdentity = Depends(get_current_identity_required), db=Depends(get_db)):
    user = users.get_user(db, identity.id)
    return UserEnvelope(user=UserResponse.model_validate(user))

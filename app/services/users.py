"""Credential store: registration, login and user lookup."""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import AuthenticationError, DuplicateError, NotFoundError
from app.logging_config import get_logger
from app.models import User
from app.schemas.auth import RegisterRequest
from app.services.auth import create_access_token, get_password_hash, verify_password

logger = get_logger("app.services.users")

INVALID_CREDENTIALS = "Invalid credentials"


def register_user(db: Session, data: RegisterRequest) -> User:
    """Create a user. ``data.email`` is already lower-cased by the schema."""
    if db.query(User.id).filter(User.email == data.email).first():
        raise DuplicateError("Email already registered")
    user = User(
        email=data.email,
        password_hash=get_password_hash(data.password),
        name=data.name,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent registration for the same email
        db.rollback()
        raise DuplicateError("Email already registered")
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def authenticate(db: Session, email: str, password: str) -> tuple[User, str]:
    """Check credentials and issue a session token.

    Unknown email and wrong password fail the same way so callers cannot
    probe which addresses are registered.
    """
    user = db.query(User).filter(User.email == email.strip().lower()).first()
    if not user or not verify_password(password, user.password_hash):
        logger.warning("Rejected login attempt")
        raise AuthenticationError(INVALID_CREDENTIALS)
    return user, create_access_token(user.id, user.email)


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def user_exists(db: Session, user_id: int) -> bool:
    return db.query(User.id).filter(User.id == user_id).first() is not None

"""Database models."""
from app.models.base import Base
from app.models.user import User
from app.models.rental import Rental, RentalImage
from app.models.interaction import Comment, Like
from app.models.todo import Todo

__all__ = [
    "Base",
    "User",
    "Rental",
    "RentalImage",
    "Comment",
    "Like",
    "Todo",
]

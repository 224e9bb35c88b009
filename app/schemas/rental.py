"""Rental, comment and feed schemas."""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.utils import parse_price, strip_or_none


class RentalCreate(BaseModel):
    title: str = Field(max_length=256)
    description: str | None = None
    price: float | None = None
    location: str | None = Field(default=None, max_length=256)

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("title cannot be empty")
        return v

    @field_validator("description", "location", mode="before")
    @classmethod
    def clean_text(cls, v):
        return strip_or_none(v) if isinstance(v, str) else v

    @field_validator("price", mode="before")
    @classmethod
    def check_price(cls, v):
        return parse_price(v)


class CommentCreate(BaseModel):
    text: str

    @field_validator("text", mode="before")
    @classmethod
    def check_text(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("text cannot be empty")
        return v


class OwnerResponse(BaseModel):
    id: int
    name: str | None


class CommentResponse(BaseModel):
    id: int
    text: str
    created_at: datetime | None
    user_id: int
    user_name: str | None


class CommentEnvelope(BaseModel):
    comment: CommentResponse


class RentalResponse(BaseModel):
    id: int
    title: str
    description: str | None
    price: float | None
    location: str | None
    images: list[str] = []
    owner: OwnerResponse
    created_at: datetime | None


class RentalEnvelope(BaseModel):
    rental: RentalResponse


class FeedEntry(RentalResponse):
    comments: list[CommentResponse] = []
    likes: int = 0
    liked: bool = False


class FeedEntryEnvelope(BaseModel):
    rental: FeedEntry


class FeedPage(BaseModel):
    feed: list[FeedEntry]
    offset: int
    limit: int
    total: int
    hasMore: bool


class LikeResponse(BaseModel):
    liked: bool

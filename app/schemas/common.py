"""Common schemas."""
from pydantic import BaseModel


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    code: str | None = None
    errors: list[FieldError] | None = None


class MessageResponse(BaseModel):
    message: str

"""Todo schemas."""
from datetime import datetime

from pydantic import BaseModel, field_validator, model_validator


def _require_text(v):
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise ValueError("text cannot be empty")
    return v


class TodoCreate(BaseModel):
    text: str

    @field_validator("text", mode="before")
    @classmethod
    def check_text(cls, v):
        return _require_text(v)


class TodoUpdate(BaseModel):
    text: str | None = None
    done: bool | None = None

    @field_validator("text", mode="before")
    @classmethod
    def check_text(cls, v):
        return _require_text(v)

    @model_validator(mode="after")
    def check_not_empty(self):
        if self.text is None and self.done is None:
            raise ValueError("Nothing to update")
        return self


class TodoResponse(BaseModel):
    id: int
    text: str
    done: bool
    created_at: datetime | None

    model_config = {"from_attributes": True}


class TodoEnvelope(BaseModel):
    todo: TodoResponse


class TodoListResponse(BaseModel):
    todos: list[TodoResponse]

"""Todo routes. Every todo is private to its owner."""
from fastapi import APIRouter, Depends, Path, status

from app.database import get_db
from app.middleware.auth import get_current_user_identity
from app.schemas.common import MessageResponse
from app.schemas.todo import TodoCreate, TodoEnvelope, TodoListResponse, TodoResponse, TodoUpdate
from app.services import todos as todo_service
from app.services.auth import UserIdentity

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=TodoListResponse)
def list_todos(
    identity: UserIdentity = Depends(get_current_user_identity),
    db=Depends(get_db),
):
    items = todo_service.list_todos(db, identity.id)
    return TodoListResponse(todos=[TodoResponse.model_validate(t) for t in items])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TodoEnvelope)
def create_todo(
    data: TodoCreate,
    identity: UserIdentity = Depends(get_current_user_identity),
    db=Depends(get_db),
):
    t = todo_service.create_todo(db, identity.id, data)
    return TodoEnvelope(todo=TodoResponse.model_validate(t))


@router.get("/{todo_id}", response_model=TodoEnvelope)
def get_todo(
    todo_id: int = Path(gt=0),
    identity: UserIdentity = Depends(get_current_user_identity),
    db=Depends(get_db),
):
    t = todo_service.get_owned_todo(db, todo_id, identity.id)
    return TodoEnvelope(todo=TodoResponse.model_validate(t))


@router.patch("/{todo_id}", response_model=TodoEnvelope)
def update_todo(
    data: TodoUpdate,
    todo_id: int = Path(gt=0),
    identity: UserIdentity = Depends(get_current_user_identity),
    db=Depends(get_db),
):
    t = todo_service.update_todo(db, todo_id, identity.id, data)
    return TodoEnvelope(todo=TodoResponse.model_validate(t))


@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: int = Path(gt=0),
    identity: UserIdentity = Depends(get_current_user_identity),
    db=Depends(get_db),
):
    todo_service.delete_todo(db, todo_id, identity.id)
    return MessageResponse(message="Deleted")

"""Per-user todo list."""
from sqlalchemy.orm import Session

from app.errors import AuthorizationError, NotFoundError
from app.models import Todo
from app.schemas.todo import TodoCreate, TodoUpdate


def create_todo(db: Session, user_id: int, data: TodoCreate) -> Todo:
    obj = Todo(user_id=user_id, text=data.text, done=False)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def list_todos(db: Session, user_id: int) -> list[Todo]:
    return db.query(Todo).filter(Todo.user_id == user_id).order_by(Todo.id.desc()).all()


def get_owned_todo(db: Session, todo_id: int, user_id: int) -> Todo:
    """Fetch a todo the caller owns; someone else's todo is 403, not 404."""
    obj = db.query(Todo).filter(Todo.id == todo_id).first()
    if not obj:
        raise NotFoundError("Todo not found")
    if obj.user_id != user_id:
        raise AuthorizationError("Not authorized to access this todo")
    return obj


def update_todo(db: Session, todo_id: int, user_id: int, data: TodoUpdate) -> Todo:
    obj = get_owned_todo(db, todo_id, user_id)
    if data.text is not None:
        obj.text = data.text
    if data.done is not None:
        obj.done = data.done
    db.commit()
    db.refresh(obj)
    return obj


def delete_todo(db: Session, todo_id: int, user_id: int) -> None:
    obj = get_owned_todo(db, todo_id, user_id)
    db.delete(obj)
    db.commit()

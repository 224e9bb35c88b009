"""Comments and likes on rentals."""
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.errors import NotFoundError
from app.logging_config import get_logger
from app.models import Comment, Like
from app.schemas.rental import CommentCreate
from app.services.listings import rental_exists

logger = get_logger("app.services.interactions")


def require_rental(db: Session, rental_id: int) -> None:
    if not rental_exists(db, rental_id):
        raise NotFoundError("Rental not found")


def add_comment(db: Session, rental_id: int, author_id: int, data: CommentCreate) -> Comment:
    require_rental(db, rental_id)
    c = Comment(rental_id=rental_id, user_id=author_id, text=data.text)
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


def list_comments(db: Session, rental_id: int, cap: int | None = None) -> list[Comment]:
    """Comments oldest first; ``cap`` keeps only the first N."""
    qry = (
        db.query(Comment)
        .options(joinedload(Comment.user))
        .filter(Comment.rental_id == rental_id)
        .order_by(Comment.id.asc())
    )
    if cap is not None:
        qry = qry.limit(cap)
    return qry.all()


def toggle_like(db: Session, rental_id: int, user_id: int) -> bool:
    """Flip the like of ``user_id`` on ``rental_id``; returns True when now liked.

    Delete first: if a row went away the pair is now unliked. Otherwise insert;
    a primary key clash means a concurrent toggle of the same pair already
    inserted, which leaves the pair liked either way.
    """
    require_rental(db, rental_id)
    removed = (
        db.query(Like)
        .filter(Like.rental_id == rental_id, Like.user_id == user_id)
        .delete(synchronize_session=False)
    )
    if removed:
        db.commit()
        logger.info("User %s unliked rental %s", user_id, rental_id)
        return False
    db.add(Like(rental_id=rental_id, user_id=user_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if not has_liked(db, rental_id, user_id):
            raise
        logger.info("Concurrent like of rental %s by user %s; keeping existing row", rental_id, user_id)
        return True
    logger.info("User %s liked rental %s", user_id, rental_id)
    return True


def count_likes(db: Session, rental_id: int) -> int:
    return db.query(func.count(Like.user_id)).filter(Like.rental_id == rental_id).scalar() or 0


def has_liked(db: Session, rental_id: int, user_id: int) -> bool:
    return db.query(Like).filter(
        Like.rental_id == rental_id,
        Like.user_id == user_id,
    ).first() is not None

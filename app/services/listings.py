"""Rental listings repository."""
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from app.config import settings
from app.errors import NotFoundError, ValidationError
from app.logging_config import get_logger
from app.models import Rental, RentalImage
from app.schemas.rental import RentalCreate
from app.utils import clamp

logger = get_logger("app.services.listings")


def clamp_page(offset: int | None, limit: int | None) -> tuple[int, int]:
    """Normalize paging input: limit into [1, feed_max_limit], offset >= 0."""
    if limit is None:
        limit = settings.feed_default_limit
    if offset is None:
        offset = 0
    return max(offset, 0), clamp(limit, 1, settings.feed_max_limit)


def create_rental(db: Session, owner_id: int, data: RentalCreate, images: list[str] | None = None) -> Rental:
    images = [url for url in (images or []) if url]
    if len(images) > settings.max_images_per_rental:
        raise ValidationError.single(
            "images", f"at most {settings.max_images_per_rental} images are allowed"
        )
    rental = Rental(
        owner_id=owner_id,
        title=data.title,
        description=data.description,
        price=data.price,
        location=data.location,
    )
    rental.images = [RentalImage(position=i, url=url) for i, url in enumerate(images)]
    db.add(rental)
    db.commit()
    db.refresh(rental)
    logger.info("User %s created rental %s with %d images", owner_id, rental.id, len(images))
    return rental


def get_rental(db: Session, rental_id: int) -> Rental:
    rental = db.query(Rental).filter(Rental.id == rental_id).first()
    if not rental:
        raise NotFoundError("Rental not found")
    return rental


def rental_exists(db: Session, rental_id: int) -> bool:
    return db.query(Rental.id).filter(Rental.id == rental_id).first() is not None


def list_page(db: Session, offset: int | None = None, limit: int | None = None) -> list[Rental]:
    """Rentals newest first (id descending)."""
    offset, limit = clamp_page(offset, limit)
    return (
        db.query(Rental)
        .options(selectinload(Rental.owner), selectinload(Rental.images))
        .order_by(Rental.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def count_rentals(db: Session) -> int:
    return db.query(func.count(Rental.id)).scalar() or 0

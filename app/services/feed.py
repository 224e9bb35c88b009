"""Feed assembly: rentals joined with owner, comments and like counts."""
from sqlalchemy.orm import Session

from app.config import settings
from app.models import Comment, Rental
from app.schemas.rental import CommentResponse, FeedEntry, FeedPage, OwnerResponse, RentalResponse
from app.services import interactions, listings


def _image_urls(r: Rental) -> list[str]:
    return [img.url for img in (r.images or []) if img.url]


def comment_to_response(c: Comment) -> CommentResponse:
    return CommentResponse(
        id=c.id,
        text=c.text,
        created_at=c.created_at,
        user_id=c.user_id,
        user_name=c.user.name if c.user else None,
    )


def rental_to_response(r: Rental) -> RentalResponse:
    return RentalResponse(
        id=r.id,
        title=r.title,
        description=r.description,
        price=r.price,
        location=r.location,
        images=_image_urls(r),
        owner=OwnerResponse(id=r.owner_id, name=r.owner.name if r.owner else None),
        created_at=r.created_at,
    )


def _entry(db: Session, r: Rental, comment_cap: int | None, viewer_id: int | None) -> FeedEntry:
    base = rental_to_response(r)
    comments = interactions.list_comments(db, r.id, cap=comment_cap)
    return FeedEntry(
        **base.model_dump(),
        comments=[comment_to_response(c) for c in comments],
        likes=interactions.count_likes(db, r.id),
        liked=interactions.has_liked(db, r.id, viewer_id) if viewer_id else False,
    )


def assemble(
    db: Session,
    offset: int | None = None,
    limit: int | None = None,
    viewer_id: int | None = None,
) -> FeedPage:
    """One page of the feed, newest rental first.

    ``total`` is read separately from the page, so under concurrent writes
    ``hasMore`` reflects the count at the moment it was taken.
    """
    offset, limit = listings.clamp_page(offset, limit)
    rentals = listings.list_page(db, offset, limit)
    total = listings.count_rentals(db)
    feed = [_entry(db, r, settings.feed_comment_preview, viewer_id) for r in rentals]
    return FeedPage(
        feed=feed,
        offset=offset,
        limit=limit,
        total=total,
        hasMore=offset + len(feed) < total,
    )


def assemble_detail(db: Session, rental_id: int, viewer_id: int | None = None) -> FeedEntry:
    """Single rental with every comment."""
    r = listings.get_rental(db, rental_id)
    return _entry(db, r, None, viewer_id)

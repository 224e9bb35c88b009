"""Feed routes."""
from fastapi import APIRouter, Depends, Query

from app.config import settings
from app.database import get_db
from app.middleware.auth import get_current_identity
from app.schemas.rental import FeedPage
from app.services import feed as feed_service
from app.utils import parse_int

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("", response_model=FeedPage)
def get_feed(
    db=Depends(get_db),
    identity=Depends(get_current_identity),
    offset: str | None = Query(None, description="Rows to skip; negative or unparsable values count as 0"),
    limit: str | None = Query(
        None,
        description=f"Clamped to 1..{settings.feed_max_limit}; unparsable values give {settings.feed_default_limit}",
    ),
):
    """Recent rentals with owner, images, first comments and like count. Public."""
    return feed_service.assemble(
        db,
        offset=parse_int(offset),
        limit=parse_int(limit),
        viewer_id=identity.id if identity else None,
    )

"""Rental routes: create, detail, comments, likes."""
import json
from fastapi import APIRouter, Depends, Path, Request, status
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from app.config import settings
from app.database import get_db
from app.errors import ValidationError, validate_payload
from app.logging_config import get_logger
from app.middleware.auth import get_current_identity, get_current_user_identity
from app.schemas.rental import (
    CommentCreate,
    CommentEnvelope,
    FeedEntryEnvelope,
    LikeResponse,
    RentalCreate,
    RentalEnvelope,
    RentalResponse,
)
from app.services import feed, interactions, listings
from app.services.auth import UserIdentity
from app.services.storage import StorageBackend, get_storage

router = APIRouter(prefix="/rentals", tags=["rentals"])
logger = get_logger("app.routes.rentals")

FORM_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def _decode_json_body(raw: bytes) -> dict:
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise ValidationError.single("body", "Body must be valid JSON")
    if not isinstance(payload, dict):
        raise ValidationError.single("body", "Body must be a JSON object")
    return payload


def _store_rental(db, owner_id: int, data: RentalCreate, images: list[str]) -> RentalResponse:
    rental = listings.create_rental(db, owner_id, data, images)
    return feed.rental_to_response(rental)


async def _save_uploads(storage: StorageBackend, uploads: list[UploadFile]) -> list[str]:
    saved: list[str] = []
    try:
        for upload in uploads:
            saved.append(await run_in_threadpool(storage.save, upload.file, upload.filename))
    except Exception:
        for ref in saved:
            await run_in_threadpool(storage.delete, ref)
        raise
    return saved


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RentalEnvelope)
async def create_rental(
    request: Request,
    identity: UserIdentity = Depends(get_current_user_identity),
    db=Depends(get_db),
    storage: StorageBackend = Depends(get_storage),
):
    """Create a rental from a multipart form (with ``images`` files) or a JSON body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        try:
            fields = {k: v for k, v in form.items() if not isinstance(v, UploadFile)}
            uploads = [
                f for f in form.getlist("images")
                if isinstance(f, UploadFile) and f.filename
            ]
            data = validate_payload(RentalCreate, fields)
            if len(uploads) > settings.max_images_per_rental:
                raise ValidationError.single(
                    "images", f"at most {settings.max_images_per_rental} images are allowed"
                )
            images = await _save_uploads(storage, uploads)
        finally:
            await form.close()
    else:
        data = validate_payload(RentalCreate, _decode_json_body(await request.body()))
        images = []

    try:
        rental = await run_in_threadpool(_store_rental, db, identity.id, data, images)
    except Exception:
        for ref in images:
            await run_in_threadpool(storage.delete, ref)
        if images:
            logger.warning("Removed %d uploads after failed rental create", len(images))
        raise
    return RentalEnvelope(rental=rental)


@router.get("/{rental_id}", response_model=FeedEntryEnvelope)
def get_rental(
    rental_id: int = Path(gt=0),
    db=Depends(get_db),
    identity=Depends(get_current_identity),
):
    """Rental detail with every comment. Public."""
    entry = feed.assemble_detail(db, rental_id, viewer_id=identity.id if identity else None)
    return FeedEntryEnvelope(rental=entry)


def _store_comment(db, rental_id: int, author_id: int, payload: dict):
    data = validate_payload(CommentCreate, payload)
    c = interactions.add_comment(db, rental_id, author_id, data)
    return feed.comment_to_response(c)


@router.post("/{rental_id}/comments", status_code=status.HTTP_201_CREATED, response_model=CommentEnvelope)
async def add_comment(
    request: Request,
    rental_id: int = Path(gt=0),
    identity: UserIdentity = Depends(get_current_user_identity),
    db=Depends(get_db),
):
    # a missing rental is reported before anything is said about the body
    await run_in_threadpool(interactions.require_rental, db, rental_id)
    payload = _decode_json_body(await request.body())
    comment = await run_in_threadpool(_store_comment, db, rental_id, identity.id, payload)
    return CommentEnvelope(comment=comment)


@router.post("/{rental_id}/like", response_model=LikeResponse)
def toggle_like(
    rental_id: int = Path(gt=0),
    identity: UserIdentity = Depends(get_current_user_identity),
    db=Depends(get_db),
):
    liked = interactions.toggle_like(db, rental_id, identity.id)
    return LikeResponse(liked=liked)

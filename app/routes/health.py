"""Health check endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy import text

from app.database import get_db

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_check(db=Depends(get_db)):
    """Liveness plus a round trip to the database."""
    db.execute(text("SELECT 1"))
    return {"status": "ok"}

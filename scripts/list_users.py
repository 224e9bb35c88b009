"""
Print registered users.

Usage:
    python -m scripts.list_users
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.database import SessionLocal, init_db
from app.models import User


def main() -> None:
    init_db()
    db = SessionLocal()
    try:
        users = db.query(User).order_by(User.id).all()
        if not users:
            print("No users.")
            return
        for u in users:
            created = u.created_at.isoformat() if u.created_at else "-"
            print(f"{u.id:>5}  {u.email:<40}  {u.name or '-':<20}  {created}")
    finally:
        db.close()


if __name__ == "__main__":
    main()

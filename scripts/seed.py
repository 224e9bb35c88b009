"""
Seed sample users, rentals, comments and likes for development.

Run from the project directory: python -m scripts.seed

Usage:
    python -m scripts.seed            # Seed an empty database
    python -m scripts.seed --force    # Seed even if users already exist
"""
import argparse
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.database import SessionLocal, init_db
from app.models import Comment, Like, Rental, RentalImage, User
from app.services.auth import get_password_hash

DEMO_PASSWORD = "password123"

NAMES = [
    "Alice", "Bob", "Carl", "Dana", "Eve", "Frank", "Grace", "Hector", "Ivy", "Jack",
    "Kara", "Liam", "Mona", "Nate", "Olga", "Pete", "Quinn", "Rita", "Sam", "Tina",
    "Uma", "Vik", "Wendy", "Xander", "Yara", "Zane", "Aria", "Ben", "Cleo", "Drew",
]

TITLES = [
    "Cozy studio near downtown", "Spacious 2BR with balcony", "Sunny loft with skylights",
    "Quiet garden apartment", "Modern place with fast Wi-Fi", "Charming cottage by the park",
    "Riverside 1BR with view", "Minimalist studio, great location", "Family-friendly 3BR house",
    "Stylish condo in the arts district", "Compact studio, affordable", "Bright 1BR with large windows",
    "Renovated apartment, new kitchen", "Top-floor flat with city view", "Suburban home with yard",
    "Beachside bungalow, walks to sand", "Mountain cabin retreat", "Eco-friendly tiny house",
    "Penthouse suite with terrace", "Historic townhouse with character",
    "Co-living room, utilities included", "Studio with workspace nook", "Pet-friendly 2BR",
    "Affordable room in shared house", "Luxury condo with gym access", "Riverfront suite with balcony",
    "City-center studio near transit", "Rooftop access condo",
    "Basement apartment with private entrance", "Loft with exposed brick",
]

AUDIENCES = ["students", "professionals", "couples", "families"]
LOCATIONS = ["Downtown", "Uptown", "Midtown", "Riverside", "Old Town", "Seaside", "Hillcrest"]


def _ago(minutes: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(minutes=minutes)


def seed(force: bool = False) -> None:
    init_db()
    db = SessionLocal()
    try:
        if db.query(User).first() and not force:
            print("Database already seeded. Use --force to add sample data anyway.")
            return
        password_hash = get_password_hash(DEMO_PASSWORD)
        users = []
        for name in NAMES:
            email = f"{name.lower()}@example.com"
            if db.query(User).filter(User.email == email).first():
                continue
            u = User(email=email, password_hash=password_hash, name=name)
            db.add(u)
            users.append(u)
        db.flush()
        if not users:
            print("Sample users already present; nothing to do.")
            return

        # Oldest first so ids ascend with created_at
        for i in reversed(range(len(TITLES))):
            owner = users[i % len(users)]
            title = TITLES[i]
            rental = Rental(
                owner_id=owner.id,
                title=title,
                description=(
                    f"A lovely rental: {title}. Close to amenities and transit. "
                    f"Perfect for {AUDIENCES[i % 4]}."
                ),
                price=round(300 + random.random() * 1200, 2),
                location=LOCATIONS[i % len(LOCATIONS)],
                created_at=_ago(i * 30 + 20),
            )
            rental.images = [
                RentalImage(position=j, url=f"https://picsum.photos/seed/rent{i}-{j}/1200/900")
                for j in range(1 + i % 3)
            ]
            db.add(rental)
            db.flush()
            for c in range(i % 4):
                commenter = users[(i + c + 3) % len(users)]
                db.add(Comment(
                    rental_id=rental.id,
                    user_id=commenter.id,
                    text=f"Looks great! Interested. ({c + 1})",
                    created_at=_ago(i * 30 + 15 - c * 5),
                ))
            likers = {users[(i + n + 2) % len(users)].id for n in range(i % 7)}
            for user_id in likers:
                db.add(Like(rental_id=rental.id, user_id=user_id))
        db.commit()
        print(f"Seed complete. {len(users)} users, {len(TITLES)} rentals. Password: {DEMO_PASSWORD}")
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed sample rentals")
    parser.add_argument("--force", action="store_true", help="Seed even if the database has users")
    args = parser.parse_args()
    seed(force=args.force)


if __name__ == "__main__":
    main()

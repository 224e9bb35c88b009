"""Database connection and session management."""
from pathlib import Path

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.logging_config import get_logger
from app.models import Base

logger = get_logger("app.database")


def normalize_url(url: str) -> str:
    # Railway/Heroku use postgres:// but SQLAlchemy 1.4+ requires postgresql://
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def build_engine(url: str) -> Engine:
    """Create an engine for ``url``; SQLite connections get foreign keys switched on."""
    url = normalize_url(url)
    is_sqlite = url.startswith("sqlite")
    in_memory = url in ("sqlite://", "sqlite:///:memory:")
    if is_sqlite and not in_memory:
        db_path = url.split("///", 1)[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    new_engine = create_engine(
        url,
        connect_args={"check_same_thread": False} if is_sqlite else {},
        poolclass=StaticPool if in_memory else None,
        pool_pre_ping=not is_sqlite,
    )
    if is_sqlite:
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create all tables and patch up databases created by older releases."""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    cols = [c["name"] for c in inspect(bind).get_columns("todos")]
    if "done" not in cols:
        # todos predating the done flag
        with bind.connect() as conn:
            conn.execute(text("ALTER TABLE todos ADD COLUMN done BOOLEAN DEFAULT FALSE NOT NULL"))
            conn.commit()
        logger.info("Added todos.done column")

"""Shared fixtures: in-memory database, temp upload dir, API clients."""
import os
import tempfile

# Settings are read at import time, so point them at throwaway resources first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="rentfeed-uploads-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.config import settings
from app.database import build_engine, get_db, init_db
from app.main import app
from app.services.storage import LocalStorage, get_storage

PASSWORD = "password1"


@pytest.fixture
def engine():
    eng = build_engine("sqlite://")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / "uploads"), settings.upload_url_prefix, settings.max_upload_bytes)


@pytest.fixture
def make_client(session_factory, storage):
    """Build API clients that share one database but keep separate cookie jars."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage

    def factory() -> TestClient:
        return TestClient(app)

    yield factory
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()


def register(client: TestClient, email: str, password: str = PASSWORD, name: str | None = None):
    body = {"email": email, "password": password}
    if name is not None:
        body["name"] = name
    return client.post("/api/register", json=body)


def login(client: TestClient, email: str, password: str = PASSWORD):
    return client.post("/api/login", json={"email": email, "password": password})


@pytest.fixture
def signed_in(make_client):
    """Return a factory: a client logged in (via cookie) as a fresh user."""

    def factory(email: str, name: str | None = None) -> TestClient:
        c = make_client()
        assert register(c, email, name=name).status_code == 201
        assert login(c, email).status_code == 200
        return c

    return factory

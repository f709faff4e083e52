"""Pytest configuration and fixtures."""

import os
import tempfile

# Settings are read at import time, so the test environment is set up first.
os.environ["DATABASE_URL"] = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("UPLOAD_ROOT", tempfile.mkdtemp(prefix="achievify-uploads-"))
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from achievify import models  # noqa: E402, F401
from achievify.api.dependencies import get_blob_store  # noqa: E402
from achievify.database import Base, get_db  # noqa: E402
from achievify.main import app  # noqa: E402
from achievify.services.storage import BlobStore  # noqa: E402

SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "s3cret-pass"


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def blob_store(tmp_path):
    """Blob store rooted in a per-test temporary directory."""
    store = BlobStore(tmp_path / "uploads", subdirs=("timetables", "wall"))
    store.ensure_dirs()
    return store


@pytest.fixture(scope="function")
def client(db, blob_store):
    """Create a test client with database and storage overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_store] = lambda: blob_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(client, username: str, email: str) -> dict:
    """Register a user and return the public user from login."""
    response = client.post(
        "/api/register",
        json={
            "fullName": f"{username.title()} Tester",
            "username": username,
            "email": email,
            "password": PASSWORD,
        },
    )
    assert response.status_code == 200
    response = client.post("/api/login", json={"userOrEmail": username, "password": PASSWORD})
    assert response.status_code == 200
    return response.json()["user"]


@pytest.fixture
def user(client):
    """A registered user."""
    return register_and_login(client, "alice", "alice@example.com")


@pytest.fixture
def other_user(client):
    """A second registered user, for ownership checks."""
    return register_and_login(client, "bob", "bob@example.com")

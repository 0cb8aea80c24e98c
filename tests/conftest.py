# tests/conftest.py
import os
import tempfile
import pytest

# keep the app's own engine off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from eventhub.main import app
from eventhub.db import Base, get_db


# --- Temporary SQLite DB file for the whole test session ---
@pytest.fixture(scope="session")
def tmp_db_url():
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    url = f"sqlite:///{path}"
    yield url
    try:
        os.remove(path)
    except OSError:
        pass


@pytest.fixture(scope="session")
def engine(tmp_db_url):
    eng = create_engine(tmp_db_url, connect_args={"check_same_thread": False}, future=True)
    Base.metadata.create_all(bind=eng)
    return eng


@pytest.fixture(scope="session")
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


@pytest.fixture(scope="function")
def db_session(session_factory):
    db = session_factory()
    _clear_all(db)
    try:
        yield db
    finally:
        db.rollback()
        db.close()


# --- Override FastAPI's DB dependency to use our test session ---
@pytest.fixture(autouse=True)
def override_get_db(db_session):
    def _get_db():
        try:
            yield db_session
        finally:
            pass
    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


# --- Utility: clear tables so every test starts empty ---
def _clear_all(db):
    db.execute(text("DELETE FROM bookings"))
    db.execute(text("DELETE FROM events"))
    db.commit()


@pytest.fixture
def event_payload():
    """Raw, un-normalized event fields as a caller would send them."""
    return {
        "title": "  AI & Data Summit 2025! ",
        "description": " Two days of talks on applied ML. ",
        "overview": "Talks, workshops and a hack night.",
        "image": "/images/summit.png",
        "venue": "Moscone Center",
        "location": " San Francisco, CA ",
        "date": "2025-03-05",
        "time": "9:05",
        "mode": "hybrid",
        "audience": "Engineers",
        "agenda": [" Keynote ", "Panels", "Closing"],
        "organizer": "Data Guild",
        "tags": ["ai", " data "],
    }


@pytest.fixture
def seed_event(db_session, event_payload):
    from eventhub.commit import commit_event
    return commit_event(db_session, event_payload)

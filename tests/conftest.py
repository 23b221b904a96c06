import os
import tempfile

# Settings are read at import time; keep tests away from the real database and Redis
os.environ.setdefault("DATABASE_URL", f"sqlite:///{tempfile.mkdtemp()}/songboard-test.db")
os.environ.setdefault("REDIS_URL", "redis://localhost:1/0")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from songboard.core.cache import cache
from songboard.db.base import Base, import_models
from songboard.db.session import get_db
from songboard.main import app


@pytest.fixture(autouse=True)
def no_redis():
    cache.redis_client = None
    yield


@pytest.fixture
def db_session(tmp_path):
    import_models()
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def login_as(client):
    def _login(nickname):
        response = client.post("/api/v1/auth/login", json={"nickname": nickname})
        assert response.status_code == 200
        return response.json()
    return _login


@pytest.fixture
def submit_song(client):
    def _submit(title="Song", genre="POP", video_id="abcDE12345", artist="Artist"):
        response = client.post(
            "/api/v1/songs",
            json={
                "title": title,
                "artist": artist,
                "genre": genre,
                "youtubeUrl": f"https://youtu.be/{video_id}",
            },
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _submit

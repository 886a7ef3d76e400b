import os

# Settings are read at import time, keep the app away from the real database file
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.core.config import settings
from app.db import Base
from app.db.init_db import seed_default_teacher
from app.db.session import enable_sqlite_foreign_keys
from app.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


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
def client(session_factory, db):
    seed_default_teacher(db)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def token(client):
    resp = client.post(
        "/api/auth/login",
        json={"username": settings.DEFAULT_TEACHER_USERNAME, "password": settings.DEFAULT_TEACHER_PASSWORD},
    )
    assert resp.status_code == 200
    return resp.json()["token"]


@pytest.fixture
def auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def add_student(client, auth):
    def _add(name, class_name="23", section="A"):
        resp = client.post(
            "/api/students",
            json={"name": name, "className": class_name, "section": section},
            headers=auth,
        )
        assert resp.status_code == 201, resp.text
        return resp.json()["student"]

    return _add

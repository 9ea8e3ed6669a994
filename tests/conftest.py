import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PRELOAD_SEGMENTER", "false")
os.environ.setdefault("ARTICLE_PAGE_SIZE", "250")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, get_db
from main import app

PASSWORD = "s3cret-pass!"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, username="reader", password=PASSWORD, study_lang="en", display_lang="en"):
    response = client.post(
        "/user/register",
        json={
            "username": username,
            "password": password,
            "study_lang": study_lang,
            "display_lang": display_lang,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["user"]


def login(client, username="reader", password=PASSWORD):
    response = client.post("/user/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def reader(client):
    """A registered, logged-in user: ``(user, tokens, headers)``."""
    user = register(client)
    tokens = login(client)
    return user, tokens, auth_header(tokens["token"])

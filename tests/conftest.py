"""
Shared pytest fixtures: an app over in-memory SQLite with a fixed secret.
"""

import pytest
from fastapi.testclient import TestClient

from pomoauth.config import Settings
from pomoauth.database import init_db, make_engine, make_session_factory
from pomoauth.main import create_app


TEST_SECRET = "test-secret-key"

ALICE = {"email": "a@x.com", "password": "secret123", "username": "a"}


@pytest.fixture()
def settings() -> Settings:
    return Settings(secret_key=TEST_SECRET, database_url="sqlite://")


@pytest.fixture()
def engine(settings):
    engine = make_engine(settings.database_url)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def app(settings, engine):
    return create_app(settings, engine)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def registered_user(client):
    r = client.post("/signup", json=ALICE)
    assert r.status_code == 200
    return dict(ALICE)


@pytest.fixture()
def signed_in_client(client, registered_user):
    r = client.post("/login", json={"email": registered_user["email"], "password": registered_user["password"]})
    assert r.status_code == 200
    return client

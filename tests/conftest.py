import pytest
from fastapi.testclient import TestClient

from speech_companion.db import Database
from speech_companion.main import create_app
from speech_companion.settings import Settings


@pytest.fixture
def app_settings():
    return Settings(
        DATABASE_URL="sqlite://",
        SEED_ON_STARTUP=True,
        SEED_SAMPLE_DATA=False,
        SESSION_CLEANUP_INTERVAL_SECONDS=0,
        JWT_SECRET_KEY="test-secret",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def database():
    db = Database("sqlite://").open()
    db.create_all()
    yield db
    db.close()


@pytest.fixture
def session(database):
    s = database.session()
    yield s
    s.close()


@pytest.fixture
def app(app_settings):
    return create_app(Database("sqlite://"), app_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def register_and_login(client, email="parent@test.dev", password="secret123", name="Test Parent"):
    r = client.post("/auth/register", json={"name": name, "email": email, "password": password})
    assert r.status_code == 201, r.text
    r = client.post("/auth/token", data={"username": email, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client)


@pytest.fixture
def child(client, auth_headers):
    r = client.post("/children", json={"name": "Mia", "birth_date": "2020-01-15"}, headers=auth_headers)
    assert r.status_code == 201, r.text
    return r.json()


@pytest.fixture
def words(client, auth_headers):
    r = client.get("/vocabulary/categories", headers=auth_headers)
    assert r.status_code == 200
    return [w for c in r.json()["categories"] for w in c["words"]]

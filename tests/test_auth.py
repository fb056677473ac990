from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from conftest import register_and_login


def test_register_and_me(client):
    headers = register_and_login(client, email="Someone@Example.com", name="  Sam  ")
    r = client.get("/auth/me", headers=headers)
    assert r.status_code == 200
    body = r.json()
    assert body["email"] == "someone@example.com"
    assert body["name"] == "Sam"
    assert "session_id" not in body


def test_duplicate_email(client):
    register_and_login(client)
    r = client.post("/auth/register", json={"name": "Other", "email": "PARENT@test.dev", "password": "secret123"})
    assert r.status_code == 409


def test_register_validation(client):
    r = client.post("/auth/register", json={"name": "A", "email": "not-an-email", "password": "secret123"})
    assert r.status_code == 422
    r = client.post("/auth/register", json={"name": "A", "email": "a@b.dev", "password": "123"})
    assert r.status_code == 422
    r = client.post("/auth/register", json={"name": "   ", "email": "a@b.dev", "password": "secret123"})
    assert r.status_code == 422


def test_bad_password(client):
    register_and_login(client)
    r = client.post("/auth/token", data={"username": "parent@test.dev", "password": "wrong-one"})
    assert r.status_code == 401


def test_protected_routes_need_a_token(client):
    assert client.get("/children").status_code == 401
    r = client.get("/children", headers={"Authorization": "Bearer garbage"})
    assert r.status_code == 401


def test_signout_revokes_token(client):
    headers = register_and_login(client)
    assert client.post("/auth/signout", headers=headers).json() == {"ok": True}
    assert client.get("/auth/me", headers=headers).status_code == 401


def test_each_sign_in_is_its_own_session(client):
    first = register_and_login(client)
    r = client.post("/auth/token", data={"username": "parent@test.dev", "password": "secret123"})
    second = {"Authorization": f"Bearer {r.json()['access_token']}"}
    client.post("/auth/signout", headers=first)
    assert client.get("/auth/me", headers=second).status_code == 200


def test_root_and_info(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code in (302, 307)
    assert r.headers["location"] == "/docs"
    assert client.get("/info").json() == {"status": "ok", "database_open": True}


def test_register_race_on_same_email_is_a_conflict(client, monkeypatch):
    def commit_loses_race(self):
        raise IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.email"))

    with monkeypatch.context() as m:
        m.setattr(Session, "commit", commit_loses_race)
        r = client.post("/auth/register", json={"name": "Late", "email": "late@test.dev", "password": "secret123"})
    assert r.status_code == 409
    # Rolled back: the address is still free
    register_and_login(client, email="late@test.dev")


def test_signout_database_error_keeps_session(client, monkeypatch):
    headers = register_and_login(client)
    real_commit = Session.commit
    calls = []

    def commit_fails_after_auth(self):
        calls.append(self)
        # The first commit records session activity; the second is the sign-out
        if len(calls) > 1:
            raise OperationalError("DELETE FROM auth_sessions", {}, Exception("database is locked"))
        return real_commit(self)

    with monkeypatch.context() as m:
        m.setattr(Session, "commit", commit_fails_after_auth)
        r = client.post("/auth/signout", headers=headers)
    assert r.status_code == 500
    assert client.get("/auth/me", headers=headers).status_code == 200

from datetime import timedelta

from talentviz.core.config import settings
from talentviz.core.timeutils import utcnow


def test_login_returns_user_without_password(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "admin"
    assert body["role"] == "admin"
    assert body["fullName"] == "Admin User"
    assert "password" not in body
    assert "hashedPassword" not in body
    assert settings.SESSION_COOKIE_NAME in response.cookies


def test_login_with_wrong_password_is_unauthorized(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})

    assert response.status_code == 401
    assert settings.SESSION_COOKIE_NAME not in response.cookies


def test_login_with_unknown_user_is_unauthorized(client):
    response = client.post("/api/auth/login", json={"username": "ghost", "password": "admin123"})

    assert response.status_code == 401


def test_login_without_password_is_bad_request(client):
    response = client.post("/api/auth/login", json={"username": "admin"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Validation error"


def test_passwords_are_stored_hashed(storage):
    import asyncio

    user = asyncio.run(storage.get_user_by_username("admin"))
    assert user.hashed_password != "admin123"
    assert user.hashed_password.startswith("$2")


def test_me_requires_session(client):
    response = client.get("/api/auth/me")

    assert response.status_code == 401


def test_me_returns_logged_in_user(client, login):
    login("manager")

    response = client.get("/api/auth/me")

    assert response.status_code == 200
    assert response.json()["username"] == "manager"
    assert response.json()["role"] == "manager"


def test_logout_ends_session(client, login, storage):
    login("recruiter")
    assert len(storage.sessions) == 1

    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert storage.sessions == {}
    assert client.get("/api/auth/me").status_code == 401


def test_logout_without_session_is_ok(client):
    assert client.post("/api/auth/logout").status_code == 200


def test_protected_endpoint_requires_session(client):
    assert client.get("/api/requirements").status_code == 401
    assert client.get("/api/dashboard/stats").status_code == 401


def test_forged_cookie_is_rejected(client):
    client.cookies.set(settings.SESSION_COOKIE_NAME, "not-a-signed-token")

    assert client.get("/api/auth/me").status_code == 401


def test_expired_session_is_rejected_and_removed(client, login, storage):
    login("admin")
    session = next(iter(storage.sessions.values()))
    session.expires_at = utcnow() - timedelta(minutes=1)

    assert client.get("/api/auth/me").status_code == 401
    assert storage.sessions == {}


def test_session_of_deleted_user_is_rejected(client, login, storage):
    login("recruiter")
    recruiter_id = next(iter(storage.sessions.values())).user_id
    del storage.users[recruiter_id]

    assert client.get("/api/requirements").status_code == 401
    assert storage.sessions == {}

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("SEED_DEFAULTS", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import asyncio

import pytest
from fastapi.testclient import TestClient

from talentviz.main import app
from talentviz.repositories.mem_storage import MemStorage
from talentviz.services.seed_service import seed_defaults


@pytest.fixture
def storage():
    store = MemStorage()
    asyncio.run(seed_defaults(store))
    return store


@pytest.fixture
def client(storage):
    with TestClient(app) as c:
        app.state.memory_storage = storage
        yield c


def _login(c, username, password=None):
    response = c.post(
        "/api/auth/login",
        json={"username": username, "password": password or f"{username}123"},
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def login(client):
    def _do(username, password=None):
        return _login(client, username, password)
    return _do


@pytest.fixture
def client_for(client):
    """Extra clients, each with its own cookie jar, sharing the test's storage."""
    def _make(username, password=None):
        c = TestClient(app)
        _login(c, username, password)
        return c
    return _make


@pytest.fixture
def admin(client, login):
    login("admin")
    return client


@pytest.fixture
def make_requirement(client_for):
    manager = client_for("manager")

    def _make(**overrides):
        payload = {
            "title": "Backend Engineer",
            "department": "Eng",
            "description": "Build and run the hiring APIs",
            "skills": ["python", "sql"],
            "experience": 3,
            "location": "Remote",
            "priority": "high",
            "status": "draft",
        }
        payload.update(overrides)
        response = manager.post("/api/requirements", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make


@pytest.fixture
def make_candidate(client_for):
    recruiter = client_for("recruiter")
    counter = {"n": 0}

    def _make(requirement_id, stage_id=1, **overrides):
        counter["n"] += 1
        payload = {
            "name": f"Candidate {counter['n']}",
            "email": f"candidate{counter['n']}@mail.talentviz.com",
            "currentTitle": "Software Engineer",
            "experience": 4,
            "skills": ["python"],
            "currentStageId": stage_id,
            "requirementId": requirement_id,
        }
        payload.update(overrides)
        response = recruiter.post("/api/candidates", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make

from talentviz.core.permissions import Capability, ROLE_CAPABILITIES, roles_with
from talentviz.models.user import UserRole


def test_every_role_has_a_capability_entry():
    assert set(ROLE_CAPABILITIES) == set(UserRole)


def test_admin_holds_every_capability():
    for capability in Capability:
        assert UserRole.admin in roles_with(capability)


def test_only_admin_manages_users():
    assert roles_with(Capability.MANAGE_USERS) == {UserRole.admin}
    assert roles_with(Capability.VIEW_USERS) == {UserRole.admin, UserRole.manager}


def test_recruiter_holds_no_capability():
    assert ROLE_CAPABILITIES[UserRole.recruiter] == frozenset()


def test_recruiter_cannot_list_users(client, login):
    login("recruiter")

    response = client.get("/api/users")

    assert response.status_code == 403
    assert response.json()["detail"] == "Forbidden: Insufficient permissions"


def test_manager_can_list_users_but_not_create(client, login):
    login("manager")

    assert client.get("/api/users").status_code == 200
    response = client.post("/api/users", json={
        "username": "newbie",
        "password": "secret123",
        "fullName": "New Bie",
        "email": "newbie@talentviz.com",
        "role": "recruiter",
    })
    assert response.status_code == 403


def test_gated_endpoint_without_session_is_unauthorized(client):
    assert client.get("/api/users").status_code == 401
    assert client.post("/api/stages", json={"name": "Test", "order": 7}).status_code == 401


def test_recruiter_cannot_create_requirement_or_stage(client, login):
    login("recruiter")

    response = client.post("/api/requirements", json={
        "title": "QA", "department": "Eng", "description": "Testing",
        "skills": [], "experience": 1, "location": "Berlin",
    })
    assert response.status_code == 403
    assert client.post("/api/stages", json={"name": "Test", "order": 7}).status_code == 403

def test_requirement_status_walkthrough(admin):
    assert admin.get("/api/requirements").json() == []

    response = admin.post("/api/requirements", json={
        "title": "Backend Engineer",
        "department": "Eng",
        "description": "Own the pipeline service",
        "skills": ["python", "fastapi", "postgres"],
        "experience": 5,
        "location": "Remote",
        "status": "draft",
    })
    assert response.status_code == 201
    requirement = response.json()
    assert requirement["id"] == 1
    assert requirement["priority"] == "medium"
    assert requirement["skills"] == ["python", "fastapi", "postgres"]
    me = admin.get("/api/auth/me").json()
    assert requirement["createdBy"] == me["id"]

    response = admin.patch("/api/requirements/1/status", json={"status": "pending"})
    assert response.status_code == 200
    assert response.json()["status"] == "pending"

    response = admin.patch("/api/requirements/1/status", json={"status": "approved"})
    assert response.status_code == 200
    assert admin.get("/api/requirements/1").json()["status"] == "approved"


def test_status_may_jump_between_any_values(admin, make_requirement):
    requirement = make_requirement(status="closed")

    response = admin.patch(f"/api/requirements/{requirement['id']}/status", json={"status": "draft"})

    assert response.status_code == 200
    assert response.json()["status"] == "draft"


def test_unknown_status_is_rejected(admin, make_requirement):
    requirement = make_requirement()

    response = admin.patch(f"/api/requirements/{requirement['id']}/status", json={"status": "archived"})

    assert response.status_code == 400
    assert admin.get(f"/api/requirements/{requirement['id']}").json()["status"] == "draft"


def test_status_of_unknown_requirement_is_not_found(admin):
    assert admin.patch("/api/requirements/42/status", json={"status": "closed"}).status_code == 404


def test_get_unknown_requirement_is_not_found(admin):
    assert admin.get("/api/requirements/42").status_code == 404


def test_missing_fields_are_reported(admin):
    response = admin.post("/api/requirements", json={"title": "Half a requirement"})

    assert response.status_code == 400
    missing = {tuple(err["loc"])[-1] for err in response.json()["errors"]}
    assert {"department", "description", "skills", "experience", "location"} <= missing


def test_recruiter_can_read_requirements(client_for, make_requirement):
    make_requirement()
    recruiter = client_for("recruiter")

    assert len(recruiter.get("/api/requirements").json()) == 1
    assert recruiter.patch("/api/requirements/1/status", json={"status": "closed"}).status_code == 403


def test_assign_recruiter_once(admin, make_requirement, storage):
    requirement = make_requirement()
    recruiter_id = next(u.id for u in storage.users.values() if u.username == "recruiter")
    url = f"/api/requirements/{requirement['id']}/recruiters"

    first = admin.post(url, json={"recruiterId": recruiter_id})
    second = admin.post(url, json={"recruiterId": recruiter_id})

    assert first.status_code == 201
    assert first.json()["recruiterId"] == recruiter_id
    assert second.status_code == 400
    assert len(storage.requirement_recruiters) == 1

    recruiters = admin.get(url).json()
    assert [r["username"] for r in recruiters] == ["recruiter"]
    assert "hashedPassword" not in recruiters[0]


def test_assign_unknown_recruiter_fails(admin, make_requirement):
    requirement = make_requirement()

    response = admin.post(f"/api/requirements/{requirement['id']}/recruiters", json={"recruiterId": 99})

    assert response.status_code == 400


def test_assign_to_unknown_requirement_is_not_found(admin):
    assert admin.post("/api/requirements/99/recruiters", json={"recruiterId": 3}).status_code == 404


def test_unassign_recruiter(admin, make_requirement, storage):
    requirement = make_requirement()
    url = f"/api/requirements/{requirement['id']}/recruiters"
    admin.post(url, json={"recruiterId": 3})

    response = admin.delete(f"{url}/3")

    assert response.status_code == 200
    assert storage.requirement_recruiters == {}
    assert admin.get(url).json() == []

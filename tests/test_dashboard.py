from datetime import datetime, timedelta, timezone


def test_dashboard_stats_on_empty_pipeline(admin):
    stats = admin.get("/api/dashboard/stats").json()

    assert stats["candidates"]["total"] == 0
    assert [s["count"] for s in stats["candidates"]["byStage"]] == [0] * 6
    assert stats["requirements"] == {"total": 0, "open": 0, "urgent": 0}
    assert stats["interviews"] == {"total": 0, "upcoming": 0, "today": 0}


def test_dashboard_stats_counts(admin, make_requirement, make_candidate):
    open_urgent = make_requirement(status="approved", priority="urgent")
    make_requirement(status="approved", priority="low")
    make_requirement(status="draft", priority="urgent")
    make_candidate(open_urgent["id"], stage_id=1)
    make_candidate(open_urgent["id"], stage_id=1, status="hired")
    c = make_candidate(open_urgent["id"], stage_id=2, status="rejected")

    now = datetime.now(timezone.utc)
    tomorrow = now + timedelta(days=1)
    for when in (tomorrow, now - timedelta(days=2)):
        admin.post("/api/interviews", json={
            "candidateId": c["id"],
            "requirementId": open_urgent["id"],
            "scheduledTime": when.isoformat(),
            "duration": 30,
            "interviewers": [],
            "type": "hr",
        })

    stats = admin.get("/api/dashboard/stats").json()

    assert stats["candidates"]["total"] == 3
    assert stats["candidates"]["active"] == 1
    assert stats["candidates"]["hired"] == 1
    assert stats["candidates"]["rejected"] == 1
    by_stage = {s["stageName"]: s["count"] for s in stats["candidates"]["byStage"]}
    assert by_stage["Applied"] == 2
    assert by_stage["Screening"] == 1
    assert stats["requirements"] == {"total": 3, "open": 2, "urgent": 1}
    assert stats["interviews"]["total"] == 2
    assert stats["interviews"]["upcoming"] == 1
    assert stats["interviews"]["today"] == 0


def test_dashboard_counts_interview_later_today(admin, make_requirement, make_candidate):
    requirement = make_requirement(status="approved")
    candidate = make_candidate(requirement["id"])
    when = datetime.now(timezone.utc) + timedelta(minutes=5)
    response = admin.post("/api/interviews", json={
        "candidateId": candidate["id"],
        "requirementId": requirement["id"],
        "scheduledTime": when.isoformat(),
        "duration": 45,
        "interviewers": [],
        "type": "technical",
    })
    assert response.status_code == 201

    stats = admin.get("/api/dashboard/stats").json()

    # only zero when the five minutes cross UTC midnight
    expected_today = 1 if when.date() == datetime.now(timezone.utc).date() else 0
    assert stats["interviews"]["upcoming"] == 1
    assert stats["interviews"]["today"] == expected_today

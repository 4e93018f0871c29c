import asyncio
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from talentviz.core.timeutils import utcnow
from talentviz.db.base import Base
from talentviz.repositories.db_storage import DatabaseStorage
from talentviz.services.seed_service import seed_defaults
import talentviz.models  # noqa: F401


def run_with_storage(scenario):
    async def _run():
        engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        Session = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
        try:
            async with Session() as session:
                storage = DatabaseStorage(session)
                await seed_defaults(storage)
                await scenario(storage)
        finally:
            await engine.dispose()
    asyncio.run(_run())


REQUIREMENT = {
    "title": "Data Engineer",
    "department": "Data",
    "description": "Pipelines",
    "skills": ["python", "airflow"],
    "experience": 2,
    "location": "Lisbon",
    "priority": "urgent",
    "status": "draft",
    "created_by": 1,
}


def test_seed_is_idempotent():
    async def scenario(storage):
        await seed_defaults(storage)
        stages = await storage.get_stages()
        assert [s.name for s in stages] == ["Applied", "Screening", "Interview", "Offer", "Hired", "Rejected"]
        assert len(await storage.get_users()) == 3

    run_with_storage(scenario)


def test_candidate_creation_and_moves_keep_history_consistent():
    async def scenario(storage):
        requirement = await storage.create_requirement(dict(REQUIREMENT))
        assert requirement.skills == ["python", "airflow"]
        candidate = await storage.create_candidate(
            {"name": "Ana", "email": "ana@mail.talentviz.com", "current_stage_id": 1,
             "requirement_id": requirement.id, "status": "active"},
            created_by=3,
            comments="Initial application",
        )

        history = await storage.get_stage_history(candidate.id)
        assert [(h.from_stage_id, h.to_stage_id) for h in history] == [(None, 1)]

        moved = await storage.update_candidate_stage(candidate.id, 3, moved_by=2, comments="Onsite")
        assert moved.current_stage_id == 3
        history = await storage.get_stage_history(candidate.id)
        assert [(h.from_stage_id, h.to_stage_id, h.moved_by) for h in history] == [(1, 3, 2), (None, 1, 3)]

        assert await storage.update_candidate_stage(999, 3, moved_by=2) is None
        assert [c.id for c in await storage.get_candidates_by_stage(3)] == [candidate.id]
        assert [c.id for c in await storage.get_candidates_by_requirement(requirement.id)] == [candidate.id]
        assert (await storage.get_candidate_by_email("ana@mail.talentviz.com")).id == candidate.id

    run_with_storage(scenario)


def test_requirement_status_and_recruiters():
    async def scenario(storage):
        requirement = await storage.create_requirement(dict(REQUIREMENT))
        updated = await storage.update_requirement_status(requirement.id, "closed")
        assert updated.status == "closed"
        assert await storage.update_requirement_status(999, "closed") is None

        await storage.create_requirement_recruiter(requirement.id, 3)
        assert [u.username for u in await storage.get_requirement_recruiters(requirement.id)] == ["recruiter"]

        await storage.delete_requirement_recruiter(requirement.id, 3)
        assert await storage.get_requirement_recruiters(requirement.id) == []

    run_with_storage(scenario)


def test_delete_user_drops_assignments_and_sessions():
    async def scenario(storage):
        requirement = await storage.create_requirement(dict(REQUIREMENT))
        await storage.create_requirement_recruiter(requirement.id, 3)
        await storage.create_session({
            "sid": "abc", "user_id": 3, "role": "recruiter", "expires_at": utcnow() + timedelta(hours=1),
        })
        assert (await storage.get_session("abc")).user_id == 3

        assert await storage.delete_user(3) is True
        await storage.delete_user_sessions(3)

        assert await storage.get_user(3) is None
        assert await storage.get_session("abc") is None
        assert await storage.get_requirement_recruiters(requirement.id) == []
        assert await storage.delete_user(3) is False

    run_with_storage(scenario)


def test_upcoming_interviews_and_feedback():
    async def scenario(storage):
        requirement = await storage.create_requirement(dict(REQUIREMENT))
        candidate = await storage.create_candidate(
            {"name": "Bo", "email": "bo@mail.talentviz.com", "current_stage_id": 1,
             "requirement_id": requirement.id, "status": "active"},
            created_by=1,
        )
        base = {"candidate_id": candidate.id, "requirement_id": requirement.id, "duration": 30,
                "interviewers": [1], "type": "screening", "status": "scheduled"}
        now = utcnow()
        future = await storage.create_interview({**base, "scheduled_time": now + timedelta(days=2)})
        soon = await storage.create_interview({**base, "scheduled_time": now + timedelta(hours=2)})
        await storage.create_interview({**base, "scheduled_time": now - timedelta(days=1)})
        done = await storage.create_interview({**base, "scheduled_time": now + timedelta(days=1)})
        await storage.update_interview_status(done.id, "completed")

        upcoming = await storage.get_upcoming_interviews()
        assert [i.id for i in upcoming] == [soon.id, future.id]

        await storage.create_feedback({"interview_id": soon.id, "provided_by": 2, "rating": 5,
                                       "recommendation": "strong_yes"})
        feedback = await storage.get_feedback_by_interview(soon.id)
        assert [f.rating for f in feedback] == [5]
        assert feedback[0].submitted_at is not None

    run_with_storage(scenario)


def test_comments_newest_first():
    async def scenario(storage):
        requirement = await storage.create_requirement(dict(REQUIREMENT))
        candidate = await storage.create_candidate(
            {"name": "Cy", "email": "cy@mail.talentviz.com", "current_stage_id": 1,
             "requirement_id": requirement.id, "status": "active"},
            created_by=1,
        )
        await storage.create_comment({"candidate_id": candidate.id, "user_id": 1, "text": "one"})
        await storage.create_comment({"candidate_id": candidate.id, "user_id": 2, "text": "two"})

        comments = await storage.get_comments_by_candidate(candidate.id)
        assert [c.text for c in comments] == ["two", "one"]

    run_with_storage(scenario)

"""
Database Storage - Data Access Layer
SQLAlchemy implementation of IStorage bound to one AsyncSession
"""
from typing import List, Optional
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from talentviz.core.timeutils import utcnow
from talentviz.models import (
    User, UserSession, Requirement, RequirementRecruiter, Stage, StageHistory,
    Candidate, Interview, Feedback, Comment, InterviewStatus,
)
from talentviz.repositories.StorageInterface import IStorage
import logging

logger = logging.getLogger(__name__)


class DatabaseStorage(IStorage):
    """Repository for all entities following Repository Pattern"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _add(self, row):
        try:
            self.db.add(row)
            await self.db.commit()
            await self.db.refresh(row)
            return row
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error inserting {type(row).__name__}: {str(e)}")
            raise

    async def _first(self, query):
        result = await self.db.execute(query)
        return result.scalars().first()

    async def _all(self, query):
        result = await self.db.execute(query)
        return list(result.scalars().all())

    # Users
    async def get_user(self, user_id: int) -> Optional[User]:
        return await self.db.get(User, user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self._first(select(User).where(User.username == username))

    async def get_users(self) -> List[User]:
        return await self._all(select(User).order_by(User.id))

    async def create_user(self, data: dict) -> User:
        return await self._add(User(**data))

    async def update_user(self, user_id: int, data: dict) -> Optional[User]:
        user = await self.get_user(user_id)
        if not user:
            return None
        for key, value in data.items():
            setattr(user, key, value)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def delete_user(self, user_id: int) -> bool:
        user = await self.get_user(user_id)
        if not user:
            return False
        try:
            await self.db.execute(
                delete(RequirementRecruiter).where(RequirementRecruiter.recruiter_id == user_id)
            )
            await self.db.delete(user)
            await self.db.commit()
            return True
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error deleting user {user_id}: {str(e)}")
            raise

    # Sessions
    async def create_session(self, data: dict) -> UserSession:
        return await self._add(UserSession(**data))

    async def get_session(self, sid: str) -> Optional[UserSession]:
        return await self.db.get(UserSession, sid)

    async def delete_session(self, sid: str) -> None:
        await self.db.execute(delete(UserSession).where(UserSession.sid == sid))
        await self.db.commit()

    async def delete_user_sessions(self, user_id: int) -> None:
        await self.db.execute(delete(UserSession).where(UserSession.user_id == user_id))
        await self.db.commit()

    # Requirements
    async def get_requirement(self, requirement_id: int) -> Optional[Requirement]:
        return await self.db.get(Requirement, requirement_id)

    async def get_requirements(self) -> List[Requirement]:
        return await self._all(select(Requirement).order_by(Requirement.id))

    async def create_requirement(self, data: dict) -> Requirement:
        return await self._add(Requirement(**data))

    async def update_requirement_status(self, requirement_id: int, status: str) -> Optional[Requirement]:
        requirement = await self.get_requirement(requirement_id)
        if not requirement:
            return None
        requirement.status = status
        await self.db.commit()
        await self.db.refresh(requirement)
        return requirement

    # Requirement recruiters
    async def get_requirement_recruiters(self, requirement_id: int) -> List[User]:
        query = (
            select(User)
            .join(RequirementRecruiter, RequirementRecruiter.recruiter_id == User.id)
            .where(RequirementRecruiter.requirement_id == requirement_id)
            .order_by(RequirementRecruiter.id)
        )
        return await self._all(query)

    async def create_requirement_recruiter(self, requirement_id: int, recruiter_id: int) -> RequirementRecruiter:
        return await self._add(
            RequirementRecruiter(requirement_id=requirement_id, recruiter_id=recruiter_id)
        )

    async def delete_requirement_recruiter(self, requirement_id: int, recruiter_id: int) -> None:
        await self.db.execute(
            delete(RequirementRecruiter).where(
                RequirementRecruiter.requirement_id == requirement_id,
                RequirementRecruiter.recruiter_id == recruiter_id,
            )
        )
        await self.db.commit()

    # Stages
    async def get_stage(self, stage_id: int) -> Optional[Stage]:
        return await self.db.get(Stage, stage_id)

    async def get_stages(self) -> List[Stage]:
        return await self._all(select(Stage).order_by(Stage.order, Stage.id))

    async def create_stage(self, data: dict) -> Stage:
        return await self._add(Stage(**data))

    # Candidates
    async def get_candidate(self, candidate_id: int) -> Optional[Candidate]:
        return await self.db.get(Candidate, candidate_id)

    async def get_candidate_by_email(self, email: str) -> Optional[Candidate]:
        return await self._first(select(Candidate).where(Candidate.email == email))

    async def get_candidates(self) -> List[Candidate]:
        return await self._all(select(Candidate).order_by(Candidate.id))

    async def get_candidates_by_requirement(self, requirement_id: int) -> List[Candidate]:
        return await self._all(
            select(Candidate).where(Candidate.requirement_id == requirement_id).order_by(Candidate.id)
        )

    async def get_candidates_by_stage(self, stage_id: int) -> List[Candidate]:
        return await self._all(
            select(Candidate).where(Candidate.current_stage_id == stage_id).order_by(Candidate.id)
        )

    async def create_candidate(self, data: dict, created_by: int, comments: Optional[str] = None) -> Candidate:
        candidate = Candidate(**data)
        try:
            self.db.add(candidate)
            await self.db.flush()
            self.db.add(StageHistory(
                candidate_id=candidate.id,
                from_stage_id=None,
                to_stage_id=candidate.current_stage_id,
                moved_by=created_by,
                comments=comments,
            ))
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error creating candidate: {str(e)}")
            raise
        await self.db.refresh(candidate)
        return candidate

    async def update_candidate_stage(
        self, candidate_id: int, stage_id: int, moved_by: int, comments: Optional[str] = None
    ) -> Optional[Candidate]:
        candidate = await self.get_candidate(candidate_id)
        if not candidate:
            return None
        previous = candidate.current_stage_id
        try:
            # Stage change and its history row commit together
            candidate.current_stage_id = stage_id
            self.db.add(StageHistory(
                candidate_id=candidate_id,
                from_stage_id=previous,
                to_stage_id=stage_id,
                moved_by=moved_by,
                comments=comments,
            ))
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Error moving candidate {candidate_id} to stage {stage_id}: {str(e)}")
            raise
        await self.db.refresh(candidate)
        return candidate

    # Stage history
    async def get_stage_history(self, candidate_id: int) -> List[StageHistory]:
        return await self._all(
            select(StageHistory)
            .where(StageHistory.candidate_id == candidate_id)
            .order_by(StageHistory.moved_at.desc(), StageHistory.id.desc())
        )

    # Interviews
    async def get_interview(self, interview_id: int) -> Optional[Interview]:
        return await self.db.get(Interview, interview_id)

    async def get_interviews(self) -> List[Interview]:
        return await self._all(select(Interview).order_by(Interview.id))

    async def get_upcoming_interviews(self) -> List[Interview]:
        query = (
            select(Interview)
            .where(
                Interview.scheduled_time > utcnow(),
                Interview.status == InterviewStatus.SCHEDULED.value,
            )
            .order_by(Interview.scheduled_time)
        )
        return await self._all(query)

    async def get_interviews_by_candidate(self, candidate_id: int) -> List[Interview]:
        return await self._all(
            select(Interview).where(Interview.candidate_id == candidate_id).order_by(Interview.id)
        )

    async def create_interview(self, data: dict) -> Interview:
        return await self._add(Interview(**data))

    async def update_interview_status(self, interview_id: int, status: str) -> Optional[Interview]:
        interview = await self.get_interview(interview_id)
        if not interview:
            return None
        interview.status = status
        await self.db.commit()
        await self.db.refresh(interview)
        return interview

    # Feedback
    async def get_feedback_by_interview(self, interview_id: int) -> List[Feedback]:
        return await self._all(
            select(Feedback).where(Feedback.interview_id == interview_id).order_by(Feedback.id)
        )

    async def create_feedback(self, data: dict) -> Feedback:
        return await self._add(Feedback(**data))

    # Comments
    async def get_comments_by_candidate(self, candidate_id: int) -> List[Comment]:
        return await self._all(
            select(Comment)
            .where(Comment.candidate_id == candidate_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )

    async def create_comment(self, data: dict) -> Comment:
        return await self._add(Comment(**data))

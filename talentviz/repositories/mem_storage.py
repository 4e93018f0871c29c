"""
In-memory storage used by the test-suite and by STORAGE_BACKEND=memory.
Rows are plain (transient) model instances kept in dicts keyed by id.
"""
from itertools import count
from typing import Dict, List, Optional

from talentviz.models import (
    User, UserSession, Requirement, RequirementRecruiter, Stage, StageHistory,
    Candidate, Interview, Feedback, Comment, InterviewStatus,
)
from talentviz.core.timeutils import as_utc, utcnow
from talentviz.repositories.StorageInterface import IStorage


class MemStorage(IStorage):
    def __init__(self):
        self.users: Dict[int, User] = {}
        self.sessions: Dict[str, UserSession] = {}
        self.requirements: Dict[int, Requirement] = {}
        self.requirement_recruiters: Dict[int, RequirementRecruiter] = {}
        self.stages: Dict[int, Stage] = {}
        self.candidates: Dict[int, Candidate] = {}
        self.stage_history: Dict[int, StageHistory] = {}
        self.interviews: Dict[int, Interview] = {}
        self.feedback: Dict[int, Feedback] = {}
        self.comments: Dict[int, Comment] = {}
        self._ids = {
            name: count(1)
            for name in (
                "users", "requirements", "requirement_recruiters", "stages", "candidates",
                "stage_history", "interviews", "feedback", "comments",
            )
        }

    def _next_id(self, table: str) -> int:
        return next(self._ids[table])

    # Users
    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    async def get_users(self) -> List[User]:
        return list(self.users.values())

    async def create_user(self, data: dict) -> User:
        user = User(id=self._next_id("users"), **data)
        self.users[user.id] = user
        return user

    async def update_user(self, user_id: int, data: dict) -> Optional[User]:
        user = self.users.get(user_id)
        if not user:
            return None
        for key, value in data.items():
            setattr(user, key, value)
        return user

    async def delete_user(self, user_id: int) -> bool:
        if user_id not in self.users:
            return False
        del self.users[user_id]
        self.requirement_recruiters = {
            k: a for k, a in self.requirement_recruiters.items() if a.recruiter_id != user_id
        }
        return True

    # Sessions
    async def create_session(self, data: dict) -> UserSession:
        session = UserSession(created_at=utcnow(), **data)
        self.sessions[session.sid] = session
        return session

    async def get_session(self, sid: str) -> Optional[UserSession]:
        return self.sessions.get(sid)

    async def delete_session(self, sid: str) -> None:
        self.sessions.pop(sid, None)

    async def delete_user_sessions(self, user_id: int) -> None:
        self.sessions = {k: s for k, s in self.sessions.items() if s.user_id != user_id}

    # Requirements
    async def get_requirement(self, requirement_id: int) -> Optional[Requirement]:
        return self.requirements.get(requirement_id)

    async def get_requirements(self) -> List[Requirement]:
        return list(self.requirements.values())

    async def create_requirement(self, data: dict) -> Requirement:
        requirement = Requirement(
            id=self._next_id("requirements"), created_at=utcnow(), **data
        )
        self.requirements[requirement.id] = requirement
        return requirement

    async def update_requirement_status(self, requirement_id: int, status: str) -> Optional[Requirement]:
        requirement = self.requirements.get(requirement_id)
        if not requirement:
            return None
        requirement.status = status
        return requirement

    # Requirement recruiters
    async def get_requirement_recruiters(self, requirement_id: int) -> List[User]:
        return [
            self.users[a.recruiter_id]
            for a in self.requirement_recruiters.values()
            if a.requirement_id == requirement_id and a.recruiter_id in self.users
        ]

    async def create_requirement_recruiter(self, requirement_id: int, recruiter_id: int) -> RequirementRecruiter:
        assignment = RequirementRecruiter(
            id=self._next_id("requirement_recruiters"),
            requirement_id=requirement_id,
            recruiter_id=recruiter_id,
        )
        self.requirement_recruiters[assignment.id] = assignment
        return assignment

    async def delete_requirement_recruiter(self, requirement_id: int, recruiter_id: int) -> None:
        self.requirement_recruiters = {
            k: a for k, a in self.requirement_recruiters.items()
            if not (a.requirement_id == requirement_id and a.recruiter_id == recruiter_id)
        }

    # Stages
    async def get_stage(self, stage_id: int) -> Optional[Stage]:
        return self.stages.get(stage_id)

    async def get_stages(self) -> List[Stage]:
        return sorted(self.stages.values(), key=lambda s: (s.order, s.id))

    async def create_stage(self, data: dict) -> Stage:
        stage = Stage(id=self._next_id("stages"), **data)
        self.stages[stage.id] = stage
        return stage

    # Candidates
    async def get_candidate(self, candidate_id: int) -> Optional[Candidate]:
        return self.candidates.get(candidate_id)

    async def get_candidate_by_email(self, email: str) -> Optional[Candidate]:
        return next((c for c in self.candidates.values() if c.email == email), None)

    async def get_candidates(self) -> List[Candidate]:
        return list(self.candidates.values())

    async def get_candidates_by_requirement(self, requirement_id: int) -> List[Candidate]:
        return [c for c in self.candidates.values() if c.requirement_id == requirement_id]

    async def get_candidates_by_stage(self, stage_id: int) -> List[Candidate]:
        return [c for c in self.candidates.values() if c.current_stage_id == stage_id]

    async def create_candidate(self, data: dict, created_by: int, comments: Optional[str] = None) -> Candidate:
        candidate = Candidate(
            id=self._next_id("candidates"), created_at=utcnow(), **data
        )
        self.candidates[candidate.id] = candidate
        self._append_history(candidate.id, None, candidate.current_stage_id, created_by, comments)
        return candidate

    async def update_candidate_stage(
        self, candidate_id: int, stage_id: int, moved_by: int, comments: Optional[str] = None
    ) -> Optional[Candidate]:
        candidate = self.candidates.get(candidate_id)
        if not candidate:
            return None
        previous = candidate.current_stage_id
        candidate.current_stage_id = stage_id
        self._append_history(candidate_id, previous, stage_id, moved_by, comments)
        return candidate

    def _append_history(self, candidate_id, from_stage_id, to_stage_id, moved_by, comments):
        entry = StageHistory(
            id=self._next_id("stage_history"),
            candidate_id=candidate_id,
            from_stage_id=from_stage_id,
            to_stage_id=to_stage_id,
            moved_by=moved_by,
            moved_at=utcnow(),
            comments=comments,
        )
        self.stage_history[entry.id] = entry
        return entry

    async def get_stage_history(self, candidate_id: int) -> List[StageHistory]:
        return sorted(
            (h for h in self.stage_history.values() if h.candidate_id == candidate_id),
            key=lambda h: (h.moved_at, h.id),
            reverse=True,
        )

    # Interviews
    async def get_interview(self, interview_id: int) -> Optional[Interview]:
        return self.interviews.get(interview_id)

    async def get_interviews(self) -> List[Interview]:
        return list(self.interviews.values())

    async def get_upcoming_interviews(self) -> List[Interview]:
        now = utcnow()
        upcoming = [
            i for i in self.interviews.values()
            if as_utc(i.scheduled_time) > now and i.status == InterviewStatus.SCHEDULED.value
        ]
        return sorted(upcoming, key=lambda i: as_utc(i.scheduled_time))

    async def get_interviews_by_candidate(self, candidate_id: int) -> List[Interview]:
        return [i for i in self.interviews.values() if i.candidate_id == candidate_id]

    async def create_interview(self, data: dict) -> Interview:
        interview = Interview(id=self._next_id("interviews"), **data)
        self.interviews[interview.id] = interview
        return interview

    async def update_interview_status(self, interview_id: int, status: str) -> Optional[Interview]:
        interview = self.interviews.get(interview_id)
        if not interview:
            return None
        interview.status = status
        return interview

    # Feedback
    async def get_feedback_by_interview(self, interview_id: int) -> List[Feedback]:
        return [f for f in self.feedback.values() if f.interview_id == interview_id]

    async def create_feedback(self, data: dict) -> Feedback:
        feedback = Feedback(
            id=self._next_id("feedback"), submitted_at=utcnow(), **data
        )
        self.feedback[feedback.id] = feedback
        return feedback

    # Comments
    async def get_comments_by_candidate(self, candidate_id: int) -> List[Comment]:
        return sorted(
            (c for c in self.comments.values() if c.candidate_id == candidate_id),
            key=lambda c: (c.created_at, c.id),
            reverse=True,
        )

    async def create_comment(self, data: dict) -> Comment:
        comment = Comment(
            id=self._next_id("comments"), created_at=utcnow(), **data
        )
        self.comments[comment.id] = comment
        return comment

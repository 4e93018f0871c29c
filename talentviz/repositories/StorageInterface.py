from abc import ABC, abstractmethod
from typing import List, Optional

from talentviz.models import (
    User, UserSession, Requirement, RequirementRecruiter, Stage, StageHistory,
    Candidate, Interview, Feedback, Comment,
)


class IStorage(ABC):
    """Persistence operations used by the services.

    Implementations return model instances; ``None`` means the row does not exist.
    """

    # Users
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_users(self) -> List[User]:
        pass

    @abstractmethod
    async def create_user(self, data: dict) -> User:
        pass

    @abstractmethod
    async def update_user(self, user_id: int, data: dict) -> Optional[User]:
        pass

    @abstractmethod
    async def delete_user(self, user_id: int) -> bool:
        pass

    # Sessions
    @abstractmethod
    async def create_session(self, data: dict) -> UserSession:
        pass

    @abstractmethod
    async def get_session(self, sid: str) -> Optional[UserSession]:
        pass

    @abstractmethod
    async def delete_session(self, sid: str) -> None:
        pass

    @abstractmethod
    async def delete_user_sessions(self, user_id: int) -> None:
        pass

    # Requirements
    @abstractmethod
    async def get_requirement(self, requirement_id: int) -> Optional[Requirement]:
        pass

    @abstractmethod
    async def get_requirements(self) -> List[Requirement]:
        pass

    @abstractmethod
    async def create_requirement(self, data: dict) -> Requirement:
        pass

    @abstractmethod
    async def update_requirement_status(self, requirement_id: int, status: str) -> Optional[Requirement]:
        pass

    # Requirement recruiters
    @abstractmethod
    async def get_requirement_recruiters(self, requirement_id: int) -> List[User]:
        pass

    @abstractmethod
    async def create_requirement_recruiter(self, requirement_id: int, recruiter_id: int) -> RequirementRecruiter:
        pass

    @abstractmethod
    async def delete_requirement_recruiter(self, requirement_id: int, recruiter_id: int) -> None:
        pass

    # Stages
    @abstractmethod
    async def get_stage(self, stage_id: int) -> Optional[Stage]:
        pass

    @abstractmethod
    async def get_stages(self) -> List[Stage]:
        """All stages sorted by pipeline order."""

    @abstractmethod
    async def create_stage(self, data: dict) -> Stage:
        pass

    # Candidates
    @abstractmethod
    async def get_candidate(self, candidate_id: int) -> Optional[Candidate]:
        pass

    @abstractmethod
    async def get_candidate_by_email(self, email: str) -> Optional[Candidate]:
        pass

    @abstractmethod
    async def get_candidates(self) -> List[Candidate]:
        pass

    @abstractmethod
    async def get_candidates_by_requirement(self, requirement_id: int) -> List[Candidate]:
        pass

    @abstractmethod
    async def get_candidates_by_stage(self, stage_id: int) -> List[Candidate]:
        pass

    @abstractmethod
    async def create_candidate(self, data: dict, created_by: int, comments: Optional[str] = None) -> Candidate:
        """Insert the candidate and its initial history row (from_stage_id NULL)."""

    @abstractmethod
    async def update_candidate_stage(
        self, candidate_id: int, stage_id: int, moved_by: int, comments: Optional[str] = None
    ) -> Optional[Candidate]:
        """Set the current stage and append a history row from the previous one."""

    # Stage history
    @abstractmethod
    async def get_stage_history(self, candidate_id: int) -> List[StageHistory]:
        """History rows newest first."""

    # Interviews
    @abstractmethod
    async def get_interview(self, interview_id: int) -> Optional[Interview]:
        pass

    @abstractmethod
    async def get_interviews(self) -> List[Interview]:
        pass

    @abstractmethod
    async def get_upcoming_interviews(self) -> List[Interview]:
        """Scheduled interviews in the future, soonest first."""

    @abstractmethod
    async def get_interviews_by_candidate(self, candidate_id: int) -> List[Interview]:
        pass

    @abstractmethod
    async def create_interview(self, data: dict) -> Interview:
        pass

    @abstractmethod
    async def update_interview_status(self, interview_id: int, status: str) -> Optional[Interview]:
        pass

    # Feedback
    @abstractmethod
    async def get_feedback_by_interview(self, interview_id: int) -> List[Feedback]:
        pass

    @abstractmethod
    async def create_feedback(self, data: dict) -> Feedback:
        pass

    # Comments
    @abstractmethod
    async def get_comments_by_candidate(self, candidate_id: int) -> List[Comment]:
        """Comments newest first."""

    @abstractmethod
    async def create_comment(self, data: dict) -> Comment:
        pass

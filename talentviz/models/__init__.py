# Models module
from .user import User, UserRole
from .session import UserSession
from .requirement import Requirement, RequirementRecruiter, RequirementPriority, RequirementStatus
from .stage import Stage, StageHistory
from .candidate import Candidate, CandidateStatus
from .interview import Interview, InterviewType, InterviewStatus, Feedback, Recommendation
from .comment import Comment

__all__ = [
    "User",
    "UserRole",
    "UserSession",
    "Requirement",
    "RequirementRecruiter",
    "RequirementPriority",
    "RequirementStatus",
    "Stage",
    "StageHistory",
    "Candidate",
    "CandidateStatus",
    "Interview",
    "InterviewType",
    "InterviewStatus",
    "Feedback",
    "Recommendation",
    "Comment"
]

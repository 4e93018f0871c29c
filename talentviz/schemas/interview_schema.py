from datetime import datetime, timezone
from pydantic import Field, field_validator
from typing import Optional, List
from talentviz.models.interview import InterviewType, InterviewStatus, Recommendation
from talentviz.schemas.base_schema import CamelModel


class InterviewCreate(CamelModel):
    candidate_id: int
    requirement_id: int
    scheduled_time: datetime
    duration: int = Field(..., gt=0, description="Length in minutes")
    interviewers: List[int] = Field(default_factory=list, description="User ids")
    type: InterviewType
    location: Optional[str] = None
    status: InterviewStatus = InterviewStatus.SCHEDULED

    @field_validator('scheduled_time')
    @classmethod
    def normalize_scheduled_time(cls, v):
        # Naive times are taken as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class InterviewStatusUpdate(CamelModel):
    status: InterviewStatus


class InterviewResponse(CamelModel):
    id: int
    candidate_id: int
    requirement_id: int
    scheduled_time: datetime
    duration: int
    interviewers: List[int]
    type: InterviewType
    location: Optional[str] = None
    status: InterviewStatus


class FeedbackCreate(CamelModel):
    """Interview feedback; the author comes from the session"""
    interview_id: int
    rating: int = Field(..., ge=1, le=5)
    strengths: Optional[List[str]] = None
    weaknesses: Optional[List[str]] = None
    comments: Optional[str] = None
    recommendation: Recommendation


class FeedbackResponse(CamelModel):
    id: int
    interview_id: int
    provided_by: int
    rating: int
    strengths: Optional[List[str]] = None
    weaknesses: Optional[List[str]] = None
    comments: Optional[str] = None
    recommendation: Recommendation
    submitted_at: datetime

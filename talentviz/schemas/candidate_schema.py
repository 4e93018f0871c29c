from datetime import datetime
from pydantic import EmailStr, Field
from typing import Optional, List
from talentviz.models.candidate import CandidateStatus
from talentviz.schemas.base_schema import CamelModel


class CandidateCreate(CamelModel):
    """Schema for adding a candidate to a requirement's pipeline"""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    phone: Optional[str] = None
    current_title: Optional[str] = None
    experience: Optional[int] = Field(None, ge=0, description="Years of experience")
    skills: Optional[List[str]] = None
    resume_url: Optional[str] = None
    resume_text: Optional[str] = Field(None, description="Resume text content")
    current_stage_id: int = Field(..., description="Stage the candidate enters the pipeline at")
    requirement_id: int
    match_percentage: Optional[int] = Field(None, ge=0, le=100)
    status: CandidateStatus = CandidateStatus.ACTIVE
    notes: Optional[str] = None


class CandidateResponse(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    current_title: Optional[str] = None
    experience: Optional[int] = None
    skills: Optional[List[str]] = None
    resume_url: Optional[str] = None
    resume_text: Optional[str] = None
    current_stage_id: int
    requirement_id: int
    match_percentage: Optional[int] = None
    status: CandidateStatus
    created_at: datetime
    notes: Optional[str] = None


class CommentCreate(CamelModel):
    candidate_id: int
    text: str = Field(..., min_length=1)


class CommentResponse(CamelModel):
    id: int
    candidate_id: int
    user_id: int
    text: str
    created_at: datetime

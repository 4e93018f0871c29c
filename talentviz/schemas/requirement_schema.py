from datetime import datetime
from pydantic import Field
from typing import List
from talentviz.models.requirement import RequirementPriority, RequirementStatus
from talentviz.schemas.base_schema import CamelModel


class RequirementCreate(CamelModel):
    """Schema for creating a requirement; the creator comes from the session"""
    title: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    skills: List[str] = Field(..., description="Required skills, in display order")
    experience: int = Field(..., ge=0, description="Years of experience")
    location: str = Field(..., min_length=1, max_length=200)
    priority: RequirementPriority = RequirementPriority.MEDIUM
    status: RequirementStatus = RequirementStatus.DRAFT


class RequirementStatusUpdate(CamelModel):
    status: RequirementStatus


class RequirementResponse(CamelModel):
    id: int
    title: str
    department: str
    description: str
    skills: List[str]
    experience: int
    location: str
    priority: RequirementPriority
    status: RequirementStatus
    created_by: int
    created_at: datetime


class RecruiterAssign(CamelModel):
    recruiter_id: int = Field(..., gt=0)


class RequirementRecruiterResponse(CamelModel):
    id: int
    requirement_id: int
    recruiter_id: int

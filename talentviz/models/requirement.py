from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, ForeignKey
from datetime import datetime, timezone
from talentviz.db.base import Base
from enum import Enum


class RequirementPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class RequirementStatus(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    CLOSED = "closed"


class Requirement(Base):
    __tablename__ = "requirements"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    department = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    skills = Column(JSON, nullable=False, default=list)
    experience = Column(Integer, nullable=False)
    location = Column(String(200), nullable=False)

    # Free-form workflow: any status may be set from any other
    priority = Column(String(20), nullable=False, default=RequirementPriority.MEDIUM.value)
    status = Column(String(20), nullable=False, default=RequirementStatus.DRAFT.value)

    created_by = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)


class RequirementRecruiter(Base):
    __tablename__ = "requirement_recruiters"

    id = Column(Integer, primary_key=True, index=True)
    requirement_id = Column(Integer, ForeignKey("requirements.id"), nullable=False, index=True)
    recruiter_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

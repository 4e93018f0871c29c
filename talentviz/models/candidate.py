from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, ForeignKey
from datetime import datetime, timezone
from talentviz.db.base import Base
from enum import Enum


class CandidateStatus(str, Enum):
    ACTIVE = "active"
    HIRED = "hired"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class Candidate(Base):
    __tablename__ = "candidates"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    email = Column(String(200), unique=True, nullable=False, index=True)
    phone = Column(String(64), nullable=True)
    current_title = Column(String(200), nullable=True)
    experience = Column(Integer, nullable=True)
    skills = Column(JSON, nullable=True)

    resume_url = Column(String, nullable=True)
    resume_text = Column(Text, nullable=True)

    current_stage_id = Column(Integer, ForeignKey("stages.id"), nullable=False, index=True)
    requirement_id = Column(Integer, ForeignKey("requirements.id"), nullable=False, index=True)
    match_percentage = Column(Integer, nullable=True)
    status = Column(String(20), nullable=False, default=CandidateStatus.ACTIVE.value)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    notes = Column(Text, nullable=True)

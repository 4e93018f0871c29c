from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, ForeignKey
from datetime import datetime, timezone
from talentviz.db.base import Base


class Stage(Base):
    __tablename__ = "stages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    order = Column(Integer, nullable=False)
    is_default = Column(Boolean, nullable=False, default=False)


class StageHistory(Base):
    """Append-only record of a candidate entering a stage."""
    __tablename__ = "stage_history"

    id = Column(Integer, primary_key=True, index=True)
    candidate_id = Column(Integer, ForeignKey("candidates.id"), nullable=False, index=True)
    # NULL on the initial placement
    from_stage_id = Column(Integer, nullable=True)
    to_stage_id = Column(Integer, nullable=False)
    moved_by = Column(Integer, nullable=False)
    moved_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    comments = Column(Text, nullable=True)

from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime, timezone
from talentviz.db.base import Base

class UserSession(Base):
    """Server-side session referenced by the signed session cookie."""
    __tablename__ = "sessions"
    sid = Column(String(64), primary_key=True)
    user_id = Column(Integer, nullable=False, index=True)
    role = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)

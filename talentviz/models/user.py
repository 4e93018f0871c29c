from sqlalchemy import Column, Integer, String
from talentviz.db.base import Base
import enum

class UserRole(str, enum.Enum):
    admin = "admin"
    manager = "manager"
    recruiter = "recruiter"

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String(200), nullable=False)
    email = Column(String(200), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.recruiter.value)
    avatar = Column(String, nullable=True)

from pydantic import EmailStr, Field, field_validator
from typing import Optional
from talentviz.models.user import UserRole
from talentviz.schemas.base_schema import CamelModel


class UserLogin(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=255)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        if not v.strip():
            raise ValueError('Username cannot be empty')
        return v.strip()


class UserCreate(CamelModel):
    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=6, max_length=255)
    full_name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    role: UserRole = UserRole.recruiter
    avatar: Optional[str] = None

    @field_validator('username', 'full_name')
    @classmethod
    def strip_text(cls, v):
        if not v.strip():
            raise ValueError('Value cannot be blank')
        return v.strip()

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return v.lower().strip()


class UserUpdate(CamelModel):
    """Partial update; only the fields sent are applied."""
    username: Optional[str] = Field(None, min_length=3, max_length=100)
    password: Optional[str] = Field(None, min_length=6, max_length=255)
    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    avatar: Optional[str] = None

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return v.lower().strip() if v is not None else v


class UserResponse(CamelModel):
    id: int
    username: str
    full_name: str
    email: str
    role: UserRole
    avatar: Optional[str] = None

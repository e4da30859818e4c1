"""
Authentication Pydantic schemas
"""
from typing import Optional, List
from pydantic import EmailStr, Field, field_validator
from datetime import datetime

from recruitment.core.schemas import CamelModel
from recruitment.models.user import RoleName


class UserResponse(CamelModel):
    """User response schema"""
    id: int
    full_name: str
    email: str
    username: str
    roles: List[str]
    status: str
    created_at: datetime


class AuthResponse(CamelModel):
    """Login / registration response"""
    success: bool
    message: str
    token: Optional[str] = None
    user: Optional[UserResponse] = None


class RegisterRequest(CamelModel):
    """User registration schema"""
    full_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=6, max_length=100)
    roles: List[RoleName] = Field(..., min_length=1)

    @field_validator("roles")
    @classmethod
    def unique_roles(cls, roles: List[RoleName]) -> List[RoleName]:
        return list(dict.fromkeys(roles))


class LoginRequest(CamelModel):
    """Login request schema"""
    username: str
    password: str

"""User Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.enums import UserRole

# bcrypt only hashes the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72


class UserBase(BaseModel):
    """Base user schema."""

    email: EmailStr
    name: str = Field(min_length=1, max_length=100)
    phone: str | None = None


class UserCreate(UserBase):
    """Schema for registering a new user."""

    password: str = Field(min_length=6)
    role: UserRole = UserRole.BUYER

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserResponse(UserBase):
    """Schema for user response."""

    id: str
    role: UserRole
    created_at: datetime

    model_config = {"from_attributes": True}


class Token(BaseModel):
    """Schema for JWT token response."""

    access_token: str
    token_type: str


class TokenData(BaseModel):
    """Schema for token payload data."""

    user_id: str
    role: UserRole | None = None


class LoginRequest(BaseModel):
    """Schema for login request."""

    email: EmailStr
    password: str

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .users import MIN_PASSWORD_LENGTH


class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: str
    createdAt: str


class AuthResponse(BaseModel):
    success: bool = True
    message: str
    user: UserOut

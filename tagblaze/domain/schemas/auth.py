"""Pydantic schemas for User, Auth and token claims."""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)
    # Known gap: open registration accepts "admin" as well (listed in DESIGN.md)
    role: Literal["agent", "admin"] = "agent"


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    role: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"


class Claims(BaseModel):
    """Decoded token payload: subject (user email) and expiry (unix seconds)."""
    sub: str
    exp: int


class Identity(BaseModel):
    """The caller as established by a valid token, before any DB lookup."""
    subject: str

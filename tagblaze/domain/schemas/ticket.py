"""Pydantic schemas for Ticket domain."""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class TicketCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[str] = Field(default=None, max_length=50)


class TicketUpdate(BaseModel):
    """Partial update: only the fields present (and non-null) are applied."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[str] = Field(default=None, max_length=50)


class TicketRead(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    status: str
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

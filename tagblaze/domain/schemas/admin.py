"""Pydantic schemas for the admin reset endpoint."""

from pydantic import BaseModel


class SeedSummary(BaseModel):
    reset: bool = True
    users_seeded: int = 0
    tags_seeded: int = 0
    tickets_seeded: int = 0
    relations_seeded: int = 0

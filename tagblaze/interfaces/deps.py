"""
API Dependencies — repository providers bound to the request session.
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from tagblaze.infrastructure.database import get_db
from tagblaze.domain.models.tag import Tag
from tagblaze.domain.models.ticket import Ticket
from tagblaze.domain.repositories.tag_repository import TagRepository
from tagblaze.domain.repositories.ticket_repository import TicketRepository
from tagblaze.domain.repositories.ticket_tag_repository import TicketTagRepository
from tagblaze.infrastructure.repositories.tag_repository import SQLAlchemyTagRepository
from tagblaze.infrastructure.repositories.ticket_repository import SQLAlchemyTicketRepository
from tagblaze.infrastructure.repositories.ticket_tag_repository import SQLAlchemyTicketTagRepository

# Ids are 32-bit Integer columns
MAX_ID = 2**31 - 1
TicketId = Annotated[int, Path(ge=1, le=MAX_ID)]
TagId = Annotated[int, Path(ge=1, le=MAX_ID)]


def get_ticket_repository(db: Session = Depends(get_db)) -> TicketRepository:
    """Get ticket repository instance."""
    return SQLAlchemyTicketRepository(db, Ticket)


def get_tag_repository(db: Session = Depends(get_db)) -> TagRepository:
    """Get tag repository instance."""
    return SQLAlchemyTagRepository(db, Tag)


def get_ticket_tag_repository(db: Session = Depends(get_db)) -> TicketTagRepository:
    """Get ticket-tag relation repository instance."""
    return SQLAlchemyTicketTagRepository(db)

"""Ticket service — ownership-aware ticket operations."""

from typing import List

import structlog

from tagblaze.core.clock import utcnow
from tagblaze.core.exceptions import EntityNotFoundException, ForbiddenException
from tagblaze.domain.models.ticket import DEFAULT_STATUS, Ticket
from tagblaze.domain.models.user import User
from tagblaze.domain.policies import user_can_access
from tagblaze.domain.repositories.ticket_repository import TicketRepository
from tagblaze.domain.schemas.ticket import TicketCreate, TicketUpdate

logger = structlog.get_logger(__name__)


def create_ticket(repo: TicketRepository, user: User, body: TicketCreate) -> Ticket:
    now = utcnow()
    ticket = repo.create({
        "title": body.title,
        "description": body.description,
        "status": body.status or DEFAULT_STATUS,
        "user_id": user.id,
        "created_at": now,
        "updated_at": now,
    })
    logger.info("Ticket created", ticket_id=ticket.id, user_id=user.id)
    return ticket


def list_tickets(repo: TicketRepository, user: User) -> List[Ticket]:
    """Admins see every ticket; everyone else sees only their own."""
    if user.is_admin:
        return repo.list()
    return repo.list_by_owner(user.id)


def get_ticket(repo: TicketRepository, user: User, ticket_id: int) -> Ticket:
    ticket = repo.get_by_id(ticket_id)
    if ticket is None:
        raise EntityNotFoundException("Ticket not found", {"ticket_id": ticket_id})

    if not user_can_access(user, ticket.user_id):
        logger.info("Ticket access denied", ticket_id=ticket_id, user_id=user.id)
        raise ForbiddenException("Not allowed to access this ticket")
    return ticket


def update_ticket(repo: TicketRepository, ticket: Ticket, body: TicketUpdate) -> Ticket:
    """Apply only the fields present in the payload. updated_at always moves."""
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    changes["updated_at"] = utcnow()
    ticket = repo.update(ticket, changes)
    logger.info("Ticket updated", ticket_id=ticket.id, fields=sorted(changes))
    return ticket


def delete_ticket(repo: TicketRepository, ticket: Ticket) -> None:
    ticket_id = ticket.id
    repo.delete(ticket)
    logger.info("Ticket deleted", ticket_id=ticket_id)

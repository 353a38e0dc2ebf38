"""Tickets API routes — CRUD gated by the owner-or-admin rule."""

from fastapi import APIRouter, Depends, Response, status

from tagblaze.application.services import ticket_service
from tagblaze.domain.models.ticket import Ticket
from tagblaze.domain.models.user import User
from tagblaze.domain.repositories.ticket_repository import TicketRepository
from tagblaze.domain.schemas.ticket import TicketCreate, TicketRead, TicketUpdate
from tagblaze.interfaces.api.deps import get_accessible_ticket, get_current_user
from tagblaze.interfaces.deps import get_ticket_repository

router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.post("", response_model=TicketRead, status_code=status.HTTP_201_CREATED)
def create_ticket(
    body: TicketCreate,
    repo: TicketRepository = Depends(get_ticket_repository),
    user: User = Depends(get_current_user),
):
    return TicketRead.model_validate(ticket_service.create_ticket(repo, user, body))


@router.get("", response_model=list[TicketRead])
def list_tickets(
    repo: TicketRepository = Depends(get_ticket_repository),
    user: User = Depends(get_current_user),
):
    return [TicketRead.model_validate(t) for t in ticket_service.list_tickets(repo, user)]


@router.get("/{ticket_id}", response_model=TicketRead)
def get_ticket(ticket: Ticket = Depends(get_accessible_ticket)):
    return TicketRead.model_validate(ticket)


@router.put("/{ticket_id}", response_model=TicketRead)
def update_ticket(
    body: TicketUpdate,
    ticket: Ticket = Depends(get_accessible_ticket),
    repo: TicketRepository = Depends(get_ticket_repository),
):
    return TicketRead.model_validate(ticket_service.update_ticket(repo, ticket, body))


@router.delete("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ticket(
    ticket: Ticket = Depends(get_accessible_ticket),
    repo: TicketRepository = Depends(get_ticket_repository),
):
    ticket_service.delete_ticket(repo, ticket)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

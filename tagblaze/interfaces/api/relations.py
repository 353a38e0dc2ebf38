"""Relations API routes — tags attached to tickets."""

from fastapi import APIRouter, Depends, Response, status

from tagblaze.application.services import relation_service
from tagblaze.domain.models.user import User
from tagblaze.domain.repositories.tag_repository import TagRepository
from tagblaze.domain.repositories.ticket_repository import TicketRepository
from tagblaze.domain.repositories.ticket_tag_repository import TicketTagRepository
from tagblaze.domain.schemas.tag import TagRead
from tagblaze.interfaces.api.deps import get_current_user
from tagblaze.interfaces.deps import (
    TagId,
    TicketId,
    get_tag_repository,
    get_ticket_repository,
    get_ticket_tag_repository,
)

router = APIRouter(prefix="/relations", tags=["Relations"])


@router.post("/{ticket_id}/tags/{tag_id}", status_code=status.HTTP_201_CREATED)
def attach_tag(
    ticket_id: TicketId,
    tag_id: TagId,
    relations: TicketTagRepository = Depends(get_ticket_tag_repository),
    tickets: TicketRepository = Depends(get_ticket_repository),
    tags: TagRepository = Depends(get_tag_repository),
    user: User = Depends(get_current_user),
):
    relation_service.attach_tag(relations, tickets, tags, ticket_id, tag_id)
    return {"ticket_id": ticket_id, "tag_id": tag_id}


@router.delete("/{ticket_id}/tags/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
def detach_tag(
    ticket_id: TicketId,
    tag_id: TagId,
    relations: TicketTagRepository = Depends(get_ticket_tag_repository),
    user: User = Depends(get_current_user),
):
    relation_service.detach_tag(relations, ticket_id, tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{ticket_id}/tags", response_model=list[TagRead])
def list_ticket_tags(ticket_id: TicketId, tags: TagRepository = Depends(get_tag_repository)):
    return [TagRead.model_validate(t) for t in relation_service.tags_for_ticket(tags, ticket_id)]

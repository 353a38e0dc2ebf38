"""Relation service — attach/detach tags on tickets."""

from typing import List

import structlog
from sqlalchemy.exc import IntegrityError

from tagblaze.core.exceptions import ConflictException, EntityNotFoundException
from tagblaze.domain.models.tag import Tag
from tagblaze.domain.repositories.tag_repository import TagRepository
from tagblaze.domain.repositories.ticket_repository import TicketRepository
from tagblaze.domain.repositories.ticket_tag_repository import TicketTagRepository

logger = structlog.get_logger(__name__)


def attach_tag(
    relations: TicketTagRepository,
    tickets: TicketRepository,
    tags: TagRepository,
    ticket_id: int,
    tag_id: int,
) -> None:
    if tickets.get_by_id(ticket_id) is None:
        raise EntityNotFoundException("Ticket not found", {"ticket_id": ticket_id})
    if tags.get_by_id(tag_id) is None:
        raise EntityNotFoundException("Tag not found", {"tag_id": tag_id})

    # The pair key decides races: exactly one concurrent insert wins.
    try:
        relations.add(ticket_id, tag_id)
    except IntegrityError:
        logger.info("Relation already exists", ticket_id=ticket_id, tag_id=tag_id)
        raise ConflictException(
            "Tag already attached to ticket",
            {"ticket_id": ticket_id, "tag_id": tag_id},
        )
    logger.info("Tag attached", ticket_id=ticket_id, tag_id=tag_id)


def detach_tag(relations: TicketTagRepository, ticket_id: int, tag_id: int) -> None:
    """Idempotent: removing a relation that does not exist still succeeds."""
    removed = relations.remove(ticket_id, tag_id)
    logger.info("Tag detached", ticket_id=ticket_id, tag_id=tag_id, removed=removed)


def tags_for_ticket(tags: TagRepository, ticket_id: int) -> List[Tag]:
    return tags.list_for_ticket(ticket_id)

"""Tag service. Tags have no owner, so no access policy applies here."""

from typing import List

import structlog

from tagblaze.core.clock import utcnow
from tagblaze.core.exceptions import BadRequestException, EntityNotFoundException
from tagblaze.domain.models.tag import Tag
from tagblaze.domain.repositories.tag_repository import TagRepository
from tagblaze.domain.schemas.tag import TagCreate, TagUpdate

logger = structlog.get_logger(__name__)


def create_tag(repo: TagRepository, body: TagCreate) -> Tag:
    now = utcnow()
    tag = repo.create({"name": body.name, "created_at": now, "updated_at": now})
    logger.info("Tag created", tag_id=tag.id)
    return tag


def list_tags(repo: TagRepository) -> List[Tag]:
    return repo.list()


def get_tag(repo: TagRepository, tag_id: int) -> Tag:
    tag = repo.get_by_id(tag_id)
    if tag is None:
        raise EntityNotFoundException("Tag not found", {"tag_id": tag_id})
    return tag


def update_tag(repo: TagRepository, tag_id: int, body: TagUpdate) -> Tag:
    tag = get_tag(repo, tag_id)
    if body.name is None:
        raise BadRequestException("No updatable field supplied", {"fields": ["name"]})

    tag = repo.update(tag, {"name": body.name, "updated_at": utcnow()})
    logger.info("Tag updated", tag_id=tag.id)
    return tag


def delete_tag(repo: TagRepository, tag_id: int) -> None:
    repo.delete(get_tag(repo, tag_id))
    logger.info("Tag deleted", tag_id=tag_id)

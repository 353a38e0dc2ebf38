"""Tags API routes. Reads are public; mutations need an authenticated caller."""

from fastapi import APIRouter, Depends, Response, status

from tagblaze.application.services import tag_service
from tagblaze.domain.models.user import User
from tagblaze.domain.repositories.tag_repository import TagRepository
from tagblaze.domain.schemas.tag import TagCreate, TagRead, TagUpdate
from tagblaze.interfaces.api.deps import get_current_user
from tagblaze.interfaces.deps import TagId, get_tag_repository

router = APIRouter(prefix="/tags", tags=["Tags"])


@router.post("", response_model=TagRead, status_code=status.HTTP_201_CREATED)
def create_tag(
    body: TagCreate,
    repo: TagRepository = Depends(get_tag_repository),
    user: User = Depends(get_current_user),
):
    return TagRead.model_validate(tag_service.create_tag(repo, body))


@router.get("", response_model=list[TagRead])
def list_tags(repo: TagRepository = Depends(get_tag_repository)):
    return [TagRead.model_validate(t) for t in tag_service.list_tags(repo)]


@router.get("/{tag_id}", response_model=TagRead)
def get_tag(tag_id: TagId, repo: TagRepository = Depends(get_tag_repository)):
    return TagRead.model_validate(tag_service.get_tag(repo, tag_id))


@router.put("/{tag_id}", response_model=TagRead)
def update_tag(
    tag_id: TagId,
    body: TagUpdate,
    repo: TagRepository = Depends(get_tag_repository),
    user: User = Depends(get_current_user),
):
    return TagRead.model_validate(tag_service.update_tag(repo, tag_id, body))


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tag(
    tag_id: TagId,
    repo: TagRepository = Depends(get_tag_repository),
    user: User = Depends(get_current_user),
):
    tag_service.delete_tag(repo, tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

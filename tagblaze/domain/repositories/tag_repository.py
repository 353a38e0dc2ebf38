"""
Tag Repository Interface.
"""

from typing import List

from tagblaze.domain.repositories.base import BaseRepository
from tagblaze.domain.models.tag import Tag


class TagRepository(BaseRepository[Tag]):
    """Interface for Tag-specific operations."""

    def list_for_ticket(self, ticket_id: int) -> List[Tag]:
        """Get the tags attached to a ticket."""
        ...

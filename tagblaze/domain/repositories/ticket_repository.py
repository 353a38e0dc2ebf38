"""
Ticket Repository Interface.
"""

from typing import List

from tagblaze.domain.repositories.base import BaseRepository
from tagblaze.domain.models.ticket import Ticket


class TicketRepository(BaseRepository[Ticket]):
    """Interface for Ticket-specific operations."""

    def list_by_owner(self, owner_id: int) -> List[Ticket]:
        """Get the tickets owned by one user."""
        ...

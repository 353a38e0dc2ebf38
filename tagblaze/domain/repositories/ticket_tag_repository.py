"""
Ticket-Tag relation Repository Interface.
"""

from typing import Protocol

from tagblaze.domain.models.ticket_tag import TicketTag


class TicketTagRepository(Protocol):
    """Interface for the ticket/tag join rows."""

    def add(self, ticket_id: int, tag_id: int) -> TicketTag:
        """Insert a relation. Raises sqlalchemy IntegrityError if the pair exists."""
        ...

    def remove(self, ticket_id: int, tag_id: int) -> int:
        """Delete a relation, returning the number of rows removed."""
        ...

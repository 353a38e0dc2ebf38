"""
SQLAlchemy Implementation of Ticket Repository.
"""

from typing import List

from tagblaze.domain.models.ticket import Ticket
from tagblaze.domain.models.ticket_tag import TicketTag
from tagblaze.domain.repositories.ticket_repository import TicketRepository
from tagblaze.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyTicketRepository(SQLAlchemyRepository[Ticket], TicketRepository):
    """Ticket repository implementation using SQLAlchemy."""

    def list_by_owner(self, owner_id: int) -> List[Ticket]:
        return (
            self.db.query(Ticket)
            .filter(Ticket.user_id == owner_id)
            .order_by(Ticket.id)
            .all()
        )

    def delete(self, db_obj: Ticket) -> None:
        # Not every backend enforces ON DELETE CASCADE (SQLite without the pragma)
        self.db.query(TicketTag).filter(TicketTag.ticket_id == db_obj.id).delete(synchronize_session=False)
        self.db.delete(db_obj)
        self.db.commit()

"""
SQLAlchemy Implementation of the Ticket-Tag relation Repository.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tagblaze.domain.models.ticket_tag import TicketTag
from tagblaze.domain.repositories.ticket_tag_repository import TicketTagRepository


class SQLAlchemyTicketTagRepository(TicketTagRepository):
    """Relation repository. Pair uniqueness is left to the primary key."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, ticket_id: int, tag_id: int) -> TicketTag:
        link = TicketTag(ticket_id=ticket_id, tag_id=tag_id)
        self.db.add(link)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        return link

    def remove(self, ticket_id: int, tag_id: int) -> int:
        removed = (
            self.db.query(TicketTag)
            .filter(TicketTag.ticket_id == ticket_id, TicketTag.tag_id == tag_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return removed

"""
SQLAlchemy Implementation of Tag Repository.
"""

from typing import List

from tagblaze.domain.models.tag import Tag
from tagblaze.domain.models.ticket_tag import TicketTag
from tagblaze.domain.repositories.tag_repository import TagRepository
from tagblaze.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyTagRepository(SQLAlchemyRepository[Tag], TagRepository):
    """Tag repository implementation using SQLAlchemy."""

    def list_for_ticket(self, ticket_id: int) -> List[Tag]:
        return (
            self.db.query(Tag)
            .join(TicketTag, TicketTag.tag_id == Tag.id)
            .filter(TicketTag.ticket_id == ticket_id)
            .order_by(Tag.id)
            .all()
        )

    def delete(self, db_obj: Tag) -> None:
        self.db.query(TicketTag).filter(TicketTag.tag_id == db_obj.id).delete(synchronize_session=False)
        self.db.delete(db_obj)
        self.db.commit()

"""Ticket <-> Tag join table. The composite key allows one row per pair."""

from sqlalchemy import Column, Integer, ForeignKey, PrimaryKeyConstraint

from tagblaze.infrastructure.database import Base


class TicketTag(Base):
    __tablename__ = "ticket_tags"

    ticket_id = Column(Integer, ForeignKey("tickets.id", ondelete="CASCADE"), nullable=False)
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint("ticket_id", "tag_id"),
    )

    def __repr__(self):
        return f"<TicketTag {self.ticket_id}:{self.tag_id}>"

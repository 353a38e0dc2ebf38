"""Ticket domain model — maps to the 'tickets' table."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from tagblaze.core.clock import utcnow
from tagblaze.infrastructure.database import Base

DEFAULT_STATUS = "open"


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(50), nullable=False, default=DEFAULT_STATUS)

    # Nullable: a ticket may outlive or predate its owner
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow)

    owner = relationship("User", back_populates="tickets")

    def __repr__(self):
        return f"<Ticket {self.id} - {self.title}>"

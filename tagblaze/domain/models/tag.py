"""Tag domain model — maps to the 'tags' table."""

from sqlalchemy import Column, Integer, String, DateTime

from tagblaze.core.clock import utcnow
from tagblaze.infrastructure.database import Base


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow)

    def __repr__(self):
        return f"<Tag {self.name}>"

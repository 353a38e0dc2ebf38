"""User domain model — maps to the 'users' table."""

import enum

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from tagblaze.core.clock import utcnow
from tagblaze.infrastructure.database import Base


class Role(str, enum.Enum):
    AGENT = "agent"
    ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default=Role.AGENT.value)  # agent, admin
    created_at = Column(DateTime(timezone=True), default=utcnow)

    tickets = relationship("Ticket", back_populates="owner")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    def __repr__(self):
        return f"<User {self.email}>"

"""Admin service — destructive reset of all domain tables plus fixed seed data.

Each stage commits on its own. A failing stage does not undo earlier ones
(the truncation included); the error reports how far seeding got.
"""

from typing import List, Optional

import structlog
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tagblaze.application.services.auth_service import hash_password
from tagblaze.core.clock import utcnow
from tagblaze.core.exceptions import HashingError, SeedingError
from tagblaze.domain.models.tag import Tag
from tagblaze.domain.models.ticket import Ticket
from tagblaze.domain.models.ticket_tag import TicketTag
from tagblaze.domain.models.user import Role, User
from tagblaze.domain.schemas.admin import SeedSummary

logger = structlog.get_logger(__name__)

SEED_PASSWORD = "devpass123"

SEED_USERS = [
    {"email": "zoya@tagblaze.dev", "name": "Zoya", "role": Role.AGENT.value},
    {"email": "ankit@tagblaze.dev", "name": "Ankit", "role": Role.ADMIN.value},
    {"email": "divya@tagblaze.dev", "name": "Divya Singh", "role": Role.AGENT.value},
]

SEED_TAGS = ["Bug", "Feature", "Urgent"]

# owner is an index into SEED_USERS
SEED_TICKETS = [
    {"title": "Fix navbar overflow bug", "description": "Navbar overlaps on mobile screens", "owner": 0},
    {"title": "Add dark mode toggle", "description": "Users should be able to switch themes", "owner": 1},
]

# (ticket index, tag index)
SEED_RELATIONS = [(0, 0), (0, 2), (1, 1)]

# Children first, so plain DELETEs never trip a foreign key
DOMAIN_MODELS = (TicketTag, Ticket, Tag, User)


def truncate_all(db: Session) -> None:
    if db.get_bind().dialect.name == "postgresql":
        db.execute(text("TRUNCATE users, tags, tickets, ticket_tags RESTART IDENTITY CASCADE"))
    else:
        for model in DOMAIN_MODELS:
            db.query(model).delete(synchronize_session=False)
    db.commit()
    # Loaded rows (the calling admin, for one) are gone; their ids get reused
    db.expunge_all()


def _seed_users(db: Session) -> List[User]:
    hashed = hash_password(SEED_PASSWORD)
    now = utcnow()
    users = [User(password_hash=hashed, created_at=now, **row) for row in SEED_USERS]
    db.add_all(users)
    db.commit()
    return users


def _seed_tags(db: Session) -> List[Tag]:
    now = utcnow()
    tags = [Tag(name=name, created_at=now, updated_at=now) for name in SEED_TAGS]
    db.add_all(tags)
    db.commit()
    return tags


def _seed_tickets(db: Session, users: List[User]) -> List[Ticket]:
    now = utcnow()
    tickets = [
        Ticket(
            title=row["title"],
            description=row["description"],
            user_id=users[row["owner"]].id,
            created_at=now,
            updated_at=now,
        )
        for row in SEED_TICKETS
    ]
    db.add_all(tickets)
    db.commit()
    return tickets


def _seed_relations(db: Session, tickets: List[Ticket], tags: List[Tag]) -> List[TicketTag]:
    relations = [
        TicketTag(ticket_id=tickets[ticket_idx].id, tag_id=tags[tag_idx].id)
        for ticket_idx, tag_idx in SEED_RELATIONS
    ]
    db.add_all(relations)
    db.commit()
    return relations


def _fail(db: Session, stage: str, summary: SeedSummary, exc: Exception, message: Optional[str] = None) -> SeedingError:
    db.rollback()
    logger.error("Database reset failed", stage=stage, error=repr(exc), **summary.model_dump(exclude={"reset"}))
    details = summary.model_dump()
    details.update(reset=False, failed_stage=stage)
    return SeedingError(stage, message, details)


def reset_database(db: Session) -> SeedSummary:
    summary = SeedSummary()

    try:
        truncate_all(db)
    except SQLAlchemyError as exc:
        raise _fail(db, "truncate", summary, exc, "Database reset failed") from exc
    logger.warning("Domain tables truncated")

    try:
        users = _seed_users(db)
    except (SQLAlchemyError, HashingError) as exc:
        raise _fail(db, "users", summary, exc) from exc
    summary.users_seeded = len(users)

    try:
        tags = _seed_tags(db)
    except SQLAlchemyError as exc:
        raise _fail(db, "tags", summary, exc) from exc
    summary.tags_seeded = len(tags)

    try:
        tickets = _seed_tickets(db, users)
    except SQLAlchemyError as exc:
        raise _fail(db, "tickets", summary, exc) from exc
    summary.tickets_seeded = len(tickets)

    try:
        relations = _seed_relations(db, tickets, tags)
    except SQLAlchemyError as exc:
        raise _fail(db, "relations", summary, exc) from exc
    summary.relations_seeded = len(relations)

    logger.info("Database reset and seeded", **summary.model_dump())
    return summary

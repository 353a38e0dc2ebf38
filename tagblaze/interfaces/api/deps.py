"""FastAPI dependencies — the authorization guard shared by every protected route.

Routes pick one of these by classification:
    public                 no dependency
    authenticated          get_current_user
    owner-or-admin         get_accessible_ticket
    admin only             require_admin
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tagblaze.application.services.auth_service import (
    INVALID_TOKEN,
    TokenService,
    get_token_service,
    get_user_by_email,
)
from tagblaze.application.services.ticket_service import get_ticket
from tagblaze.core.exceptions import ForbiddenException, UnauthorizedException
from tagblaze.domain.models.ticket import Ticket
from tagblaze.domain.models.user import User
from tagblaze.domain.repositories.ticket_repository import TicketRepository
from tagblaze.domain.schemas.auth import Identity
from tagblaze.infrastructure.database import get_db
from tagblaze.interfaces.deps import TicketId, get_ticket_repository

BEARER_PREFIX = "Bearer "

# Only advertises the scheme in OpenAPI; parsing below is stricter than HTTPBearer.
security = HTTPBearer(auto_error=False)


def get_bearer_token(
    request: Request,
    _: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Return the raw token from an `Authorization: Bearer <token>` header.

    The prefix is matched literally: case-sensitive, exactly one space.
    """
    header = request.headers.get("Authorization")
    if not header or not header.startswith(BEARER_PREFIX):
        raise UnauthorizedException(INVALID_TOKEN)

    token = header[len(BEARER_PREFIX):]
    if not token:
        raise UnauthorizedException(INVALID_TOKEN)
    return token


def get_current_identity(
    token: str = Depends(get_bearer_token),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """Validate the bearer token. The identity carries only the subject."""
    claims = tokens.validate(token)
    return Identity(subject=claims.sub)


def get_current_user(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the identity to a stored user; role is always read fresh."""
    user = get_user_by_email(db, identity.subject)
    if user is None:
        # Valid signature, but the subject no longer exists
        raise UnauthorizedException(INVALID_TOKEN)
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Require admin role."""
    if not user.is_admin:
        raise ForbiddenException("Admin role required")
    return user


def get_accessible_ticket(
    ticket_id: TicketId,
    user: User = Depends(get_current_user),
    repo: TicketRepository = Depends(get_ticket_repository),
) -> Ticket:
    """Load a ticket the caller owns (or any ticket, for admins)."""
    return get_ticket(repo, user, ticket_id)

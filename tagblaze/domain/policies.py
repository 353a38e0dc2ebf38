"""Access policy — the owner-or-admin rule for owned resources."""

from typing import Optional

from tagblaze.domain.models.user import Role, User


def can_access(role: str, user_id: int, owner_id: Optional[int]) -> bool:
    """True if the caller is an admin or owns the resource.

    An ownerless resource (owner_id None) never matches a caller id, so only
    admins reach it.
    """
    if role == Role.ADMIN.value:
        return True
    return owner_id is not None and owner_id == user_id


def user_can_access(user: User, owner_id: Optional[int]) -> bool:
    return can_access(user.role, user.id, owner_id)

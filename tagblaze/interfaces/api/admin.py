"""Admin API routes — development database reset."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tagblaze.application.services.admin_service import reset_database
from tagblaze.domain.models.user import User
from tagblaze.domain.schemas.admin import SeedSummary
from tagblaze.infrastructure.database import get_db
from tagblaze.interfaces.api.deps import require_admin

router = APIRouter(prefix="/admin/dev", tags=["Admin"])


@router.post("/reset-db", response_model=SeedSummary)
def reset_db(
    db: Session = Depends(get_db),
    user: User = Depends(require_admin),
):
    """Wipe users, tickets, tags and relations, then load the seed data set.

    Restricted to admins. The caller's own account is wiped too; log in again
    with one of the seeded accounts afterwards.
    """
    return reset_database(db)

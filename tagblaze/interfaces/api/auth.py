"""Auth API routes — register, login, me."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tagblaze.infrastructure.database import get_db
from tagblaze.application.services.auth_service import TokenService, create_user, get_token_service, login
from tagblaze.domain.schemas.auth import Identity, LoginRequest, TokenResponse, UserCreate, UserRead
from tagblaze.interfaces.api.deps import get_current_identity

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, db: Session = Depends(get_db)):
    user = create_user(
        db=db,
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
    )
    return UserRead.model_validate(user)


@router.post("/login", response_model=TokenResponse)
def login_user(
    body: LoginRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    return TokenResponse(token=login(db, tokens, body.email, body.password))


@router.get("/me", response_model=Identity)
def get_me(identity: Identity = Depends(get_current_identity)):
    return identity

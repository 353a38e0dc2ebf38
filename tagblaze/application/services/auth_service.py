"""Auth service — password hashing, JWT issuance/validation and user lookup."""

from datetime import datetime, timedelta
from functools import lru_cache
from typing import Callable, Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tagblaze.config import get_settings
from tagblaze.core.clock import utcnow
from tagblaze.core.exceptions import (
    BadRequestException,
    ConflictException,
    HashingError,
    UnauthorizedException,
)
from tagblaze.domain.models.user import User
from tagblaze.domain.schemas.auth import Claims

settings = get_settings()
logger = structlog.get_logger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

# One message for every token failure: callers learn nothing about why.
INVALID_TOKEN = "Invalid or expired token"
INVALID_CREDENTIALS = "Invalid email or password"


def hash_password(password: str) -> str:
    try:
        return pwd_context.hash(password)
    except PasswordValueError as exc:
        # bcrypt rejects NUL bytes
        raise BadRequestException("Password contains unsupported characters") from exc
    except Exception as exc:
        raise HashingError() from exc


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # A digest passlib cannot parse is a mismatch, not a crash
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


class TokenService:
    """Issues and validates signed, time-limited identity tokens.

    The clock is injectable so expiry can be exercised without waiting.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utcnow,
    ):
        if not secret:
            raise ValueError("A token signing secret is required")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl
        self.clock = clock

    def issue(self, subject: str) -> str:
        expires_at = self.clock() + self.ttl
        payload = {"sub": subject, "exp": int(expires_at.timestamp())}
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def validate(self, token: str) -> Claims:
        try:
            # Expiry is checked below against self.clock, not the wall clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
            claims = Claims.model_validate(payload)
        except (JWTError, ValidationError):
            raise UnauthorizedException(INVALID_TOKEN)

        if claims.exp <= self.clock().timestamp():
            raise UnauthorizedException(INVALID_TOKEN)
        return claims


@lru_cache
def get_token_service() -> TokenService:
    return TokenService(
        secret=settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        ttl=timedelta(minutes=settings.JWT_EXPIRATION_MINUTES),
    )


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user


def login(db: Session, tokens: TokenService, email: str, password: str) -> str:
    user = authenticate_user(db, email, password)
    if not user:
        logger.info("Login rejected", email=email)
        raise UnauthorizedException(INVALID_CREDENTIALS)
    return tokens.issue(user.email)


def create_user(db: Session, name: str, email: str, password: str, role: str = "agent") -> User:
    if get_user_by_email(db, email):
        raise ConflictException("Email already registered")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise ConflictException("Email already registered")
    db.refresh(user)
    logger.info("User registered", user_id=user.id, role=user.role)
    return user

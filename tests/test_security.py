"""Tests for password hashing and the token service."""
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from tagblaze.application.services.auth_service import (
    TokenService,
    hash_password,
    verify_password,
)
from tagblaze.core.exceptions import BadRequestException, UnauthorizedException

SECRET = "unit-test-secret"


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def tokens(clock: FakeClock) -> TokenService:
    return TokenService(SECRET, clock=clock)


# =============================================================================
# Credential hasher
# =============================================================================

@pytest.mark.parametrize("plaintext", ["pw123", "", "correct horse battery staple", "pässwörd"])
def test_hash_verifies(plaintext):
    assert verify_password(plaintext, hash_password(plaintext))


def test_hash_is_salted():
    first = hash_password("pw123")
    second = hash_password("pw123")
    assert first != second
    assert verify_password("pw123", first)
    assert verify_password("pw123", second)


def test_hash_never_contains_plaintext():
    assert "pw123" not in hash_password("pw123")


def test_wrong_password_does_not_verify():
    assert not verify_password("nope", hash_password("pw123"))


@pytest.mark.parametrize("digest", ["", "not-a-hash", "$2b$12$short"])
def test_malformed_digest_is_a_mismatch(digest):
    assert verify_password("pw123", digest) is False


# =============================================================================
# Token service
# =============================================================================

def test_issue_then_validate_returns_subject(tokens):
    claims = tokens.validate(tokens.issue("a@x.com"))
    assert claims.sub == "a@x.com"


def test_token_expires_after_24_hours(tokens, clock):
    token = tokens.issue("a@x.com")
    issued_at = clock.now

    assert tokens.validate(token).exp == int((issued_at + timedelta(hours=24)).timestamp())

    clock.advance(timedelta(hours=23, minutes=59))
    assert tokens.validate(token).sub == "a@x.com"

    clock.advance(timedelta(minutes=1))
    with pytest.raises(UnauthorizedException):
        tokens.validate(token)


def test_token_signed_with_other_secret_is_rejected(tokens, clock):
    forged = TokenService("another-secret", clock=clock).issue("a@x.com")
    with pytest.raises(UnauthorizedException):
        tokens.validate(forged)


def test_tampered_payload_is_rejected(tokens):
    header, payload, signature = tokens.issue("a@x.com").split(".")
    other_payload = tokens.issue("admin@x.com").split(".")[1]
    with pytest.raises(UnauthorizedException):
        tokens.validate(".".join([header, other_payload, signature]))


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "a.b"])
def test_malformed_token_is_rejected(tokens, token):
    with pytest.raises(UnauthorizedException):
        tokens.validate(token)


def test_token_without_expiry_is_rejected(tokens):
    token = jwt.encode({"sub": "a@x.com"}, SECRET, algorithm="HS256")
    with pytest.raises(UnauthorizedException):
        tokens.validate(token)


def test_token_without_subject_is_rejected(tokens, clock):
    exp = int((clock.now + timedelta(hours=1)).timestamp())
    token = jwt.encode({"exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(UnauthorizedException):
        tokens.validate(token)


def test_failures_share_one_message(tokens, clock):
    expired = tokens.issue("a@x.com")
    clock.advance(timedelta(days=2))
    forged = TokenService("another-secret", clock=clock).issue("a@x.com")

    messages = set()
    for token in (expired, forged, "garbage"):
        with pytest.raises(UnauthorizedException) as exc_info:
            tokens.validate(token)
        messages.add(exc_info.value.message)
    assert len(messages) == 1


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService("")


def test_unhashable_password_is_bad_request_not_hashing_error():
    with pytest.raises(BadRequestException):
        hash_password("ab\u0000cd")


def test_nul_byte_password_never_verifies():
    assert verify_password("ab\u0000cd", hash_password("abcd")) is False

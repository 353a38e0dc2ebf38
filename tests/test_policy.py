"""Tests for the owner-or-admin access rule."""
import pytest

from tagblaze.domain.policies import can_access


@pytest.mark.parametrize(
    "role, user_id, owner_id, expected",
    [
        ("agent", 1, 1, True),
        ("agent", 1, 2, False),
        ("agent", 1, None, False),
        ("admin", 1, 2, True),
        ("admin", 1, None, True),
        ("Admin", 1, 2, False),
    ],
)
def test_can_access(role, user_id, owner_id, expected):
    assert can_access(role, user_id, owner_id) is expected

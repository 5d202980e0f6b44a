"""Unit tests for the Invite entity."""

from datetime import timedelta
from uuid import uuid4

import pytest

from echofinder.domain.error import InviteStateError
from echofinder.domain.model import Invite
from echofinder.domain.value import (
    Email,
    InviteId,
    InviteState,
    TokenHash,
    UserId,
    UserRole,
)


@pytest.fixture
def invite(now) -> Invite:
    return Invite(
        id=InviteId(uuid4()),
        email=Email("friend@example.org"),
        token_hash=TokenHash("a" * 64),
        inviter_id=UserId(uuid4()),
        expires_at=now + timedelta(days=7),
        created_at=now,
    )


class TestValidity:
    """Tests for is_valid and state."""

    def test_new_invite_is_valid(self, invite, now):
        assert invite.is_valid(now)
        assert invite.state(now) == InviteState.PENDING

    def test_defaults_to_user_role(self, invite):
        assert invite.invited_role == UserRole.USER

    def test_used_invite_is_not_valid(self, invite, now):
        used = invite.mark_used(now)
        assert not used.is_valid(now)
        assert used.state(now) == InviteState.USED

    def test_revoked_invite_is_not_valid(self, invite, now):
        revoked = invite.mark_revoked(now)
        assert not revoked.is_valid(now)
        assert revoked.state(now) == InviteState.REVOKED

    def test_invite_expires_exactly_at_expires_at(self, invite):
        """expires_at is exclusive."""
        assert invite.is_valid(invite.expires_at - timedelta(microseconds=1))
        assert not invite.is_valid(invite.expires_at)
        assert invite.state(invite.expires_at) == InviteState.EXPIRED

    def test_validity_is_evaluated_at_call_time(self, invite, now):
        assert invite.is_valid(now)
        assert not invite.is_valid(now + timedelta(days=8))

    def test_used_wins_over_revoked_and_expired(self, invite, now):
        both = invite.mark_revoked(now).mark_used(now)
        assert both.state(now + timedelta(days=30)) == InviteState.USED

    def test_revoked_wins_over_expired(self, invite, now):
        revoked = invite.mark_revoked(now)
        assert revoked.state(now + timedelta(days=30)) == InviteState.REVOKED


class TestMarkers:
    """Tests for mark_used and mark_revoked."""

    def test_mark_used_returns_copy(self, invite, now):
        used = invite.mark_used(now)
        assert used.used_at == now
        assert invite.used_at is None

    def test_mark_used_twice_raises(self, invite, now):
        used = invite.mark_used(now)
        with pytest.raises(InviteStateError):
            used.mark_used(now + timedelta(minutes=1))

    def test_mark_revoked_keeps_first_timestamp(self, invite, now):
        revoked = invite.mark_revoked(now)
        again = revoked.mark_revoked(now + timedelta(hours=1))
        assert again.revoked_at == now

    def test_invite_is_immutable(self, invite, now):
        with pytest.raises(Exception):
            invite.used_at = now

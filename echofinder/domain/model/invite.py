"""Invite entity.

Invites are how new accounts are provisioned. The invitee receives a raw
token out of band; only its salted hash is ever stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import AwareDatetime, Field

from echofinder.domain.error import InviteStateError
from echofinder.domain.model.common import DomainModel
from echofinder.domain.value import (
    Email,
    InviteId,
    InviteState,
    TokenHash,
    UserId,
    UserRole,
)
from echofinder.util.clock import utc_now


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - token_hash is globally unique (enforced by persistence)
    - used_at and revoked_at are set at most once and never cleared
    - An invite is valid only while unused, unrevoked and unexpired
    - inviter_id is a weak reference; look the inviter up via UserRepository
    """

    id: InviteId
    email: Email
    token_hash: TokenHash
    invited_role: UserRole = UserRole.USER
    inviter_id: UserId
    expires_at: AwareDatetime
    used_at: Optional[AwareDatetime] = None
    revoked_at: Optional[AwareDatetime] = None
    created_at: AwareDatetime = Field(default_factory=utc_now)

    def is_valid(self, now: datetime | None = None) -> bool:
        """Whether the invite can still be redeemed.

        Evaluated on every call since expiry depends on the current time.
        """
        now = now or utc_now()
        return self.used_at is None and self.revoked_at is None and self.expires_at > now

    def is_expired(self, now: datetime | None = None) -> bool:
        return self.expires_at <= (now or utc_now())

    def state(self, now: datetime | None = None) -> InviteState:
        """Derived state for display. Stored markers win over expiry."""
        if self.used_at is not None:
            return InviteState.USED
        if self.revoked_at is not None:
            return InviteState.REVOKED
        if self.is_expired(now):
            return InviteState.EXPIRED
        return InviteState.PENDING

    def mark_used(self, now: datetime | None = None) -> "Invite":
        """Return a copy with used_at set.

        Validity is the caller's precondition; this only guards against
        overwriting an existing marker.

        Raises:
            InviteStateError: If the invite was already used
        """
        if self.used_at is not None:
            raise InviteStateError(f"Invite {self.id} was already used")
        return self.model_copy(update={"used_at": now or utc_now()})

    def mark_revoked(self, now: datetime | None = None) -> "Invite":
        """Return a copy with revoked_at set.

        An existing revocation timestamp is kept as is.
        """
        if self.revoked_at is not None:
            return self
        return self.model_copy(update={"revoked_at": now or utc_now()})

"""Shared invite response models."""

from datetime import datetime

from pydantic import BaseModel

from echofinder.domain.model import Invite
from echofinder.domain.value import InviteState, UserRole


class InviteItem(BaseModel):
    """Invite as exposed by the API. Never carries the token or its hash."""

    invite_id: str
    email: str
    invited_role: UserRole
    inviter_id: str
    state: InviteState
    expires_at: datetime
    used_at: datetime | None = None
    revoked_at: datetime | None = None
    created_at: datetime

    @classmethod
    def from_invite(cls, invite: Invite, now: datetime) -> "InviteItem":
        return cls(
            invite_id=str(invite.id),
            email=invite.email.root,
            invited_role=invite.invited_role,
            inviter_id=str(invite.inviter_id),
            state=invite.state(now),
            expires_at=invite.expires_at,
            used_at=invite.used_at,
            revoked_at=invite.revoked_at,
            created_at=invite.created_at,
        )

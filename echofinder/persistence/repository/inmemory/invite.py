"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Optional

from echofinder.domain.error import ConflictError
from echofinder.domain.model.invite import Invite
from echofinder.domain.repository.invite import InviteRepository
from echofinder.domain.value import InviteId, TokenHash, UserId


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self) -> None:
        self._invites: dict[InviteId, Invite] = {}

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        return self._invites.get(invite_id)

    async def find_by_token_hash(self, token_hash: TokenHash) -> Optional[Invite]:
        """Find an invite by the hash of its token."""
        for invite in self._invites.values():
            if invite.token_hash == token_hash:
                return invite
        return None

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update).

        Raises:
            ConflictError: If another invite already has this token hash
        """
        for existing in self._invites.values():
            if existing.id != invite.id and existing.token_hash == invite.token_hash:
                raise ConflictError("Invite", "token hash")

        self._invites[invite.id] = invite
        return invite

    async def mark_used(self, invite_id: InviteId, now: datetime) -> Optional[Invite]:
        """Atomically redeem an invite.

        No await between the check and the write, so this cannot interleave
        with another coroutine.
        """
        invite = self._invites.get(invite_id)
        if invite is None or not invite.is_valid(now):
            return None

        redeemed = invite.mark_used(now)
        self._invites[invite_id] = redeemed
        return redeemed

    async def find_by_inviter(
        self,
        inviter_id: UserId,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """Find invites by inviter with pagination."""
        matches = [
            invite
            for invite in self._invites.values()
            if invite.inviter_id == inviter_id
        ]

        # Sort by created_at descending
        matches.sort(key=lambda inv: inv.created_at, reverse=True)

        return matches[offset : offset + limit]

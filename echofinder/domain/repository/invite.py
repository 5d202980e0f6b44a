"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from echofinder.domain.model.invite import Invite
from echofinder.domain.value import InviteId, TokenHash, UserId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token_hash(self, token_hash: TokenHash) -> Invite | None:
        """Find an invite by the hash of its token.

        Used when an invitee opens an invite link.

        Args:
            token_hash: Hash of the raw invite token

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update).

        Args:
            invite: The invite to save

        Returns:
            The saved invite

        Raises:
            ConflictError: If another invite already has this token hash
        """
        pass

    @abstractmethod
    async def mark_used(self, invite_id: InviteId, now: datetime) -> Invite | None:
        """Atomically set used_at if the invite is still valid at `now`.

        Of several concurrent calls for the same invite at most one
        succeeds.

        Args:
            invite_id: The invite to redeem
            now: Redemption time

        Returns:
            The updated invite, or None if it was missing or no longer valid
        """
        pass

    @abstractmethod
    async def find_by_inviter(
        self,
        inviter_id: UserId,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """Find invites issued by a user, newest first.

        Args:
            inviter_id: The inviter's ID
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        pass

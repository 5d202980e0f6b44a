"""Invite domain service."""

from dataclasses import dataclass
from datetime import timedelta
from uuid import uuid4

import logfire

from echofinder.domain.error import InviteNotValidError, NotFoundError
from echofinder.domain.model.invite import Invite
from echofinder.domain.repository import InviteRepository
from echofinder.domain.value import Email, InviteId, InviteState, TokenHash, UserId, UserRole
from echofinder.util.clock import Clock

from .base import Service
from .token_hasher import TokenHasher


@dataclass(frozen=True)
class IssuedInvite:
    """A freshly issued invite and its raw token.

    This is the only place the raw token exists; it is handed to the
    invitee and never persisted.
    """

    invite: Invite
    raw_token: str


class InviteService(Service):
    """Domain service for the invite lifecycle."""

    def __init__(
        self,
        invite_repository: InviteRepository,
        token_hasher: TokenHasher,
        clock: Clock,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            token_hasher: Hasher for invite tokens
            clock: Source of the current time
        """
        self.invite_repository = invite_repository
        self.token_hasher = token_hasher
        self.clock = clock

    async def issue_invite(
        self,
        inviter_id: UserId,
        email: Email,
        role: UserRole,
        expires_in: timedelta,
    ) -> IssuedInvite:
        """Issue a new invite.

        Args:
            inviter_id: User issuing the invite
            email: Invitee email
            role: Role the invitee gets on acceptance
            expires_in: Lifetime of the invite

        Returns:
            The saved invite together with its raw token

        Raises:
            ConflictError: If the token hash collides with an existing invite
        """
        with logfire.span(
            "invite_service.issue_invite",
            inviter_id=str(inviter_id),
            role=role.value,
        ):
            raw_token = self.token_hasher.generate_token()
            now = self.clock.now()

            invite = Invite(
                id=InviteId(uuid4()),
                email=email,
                token_hash=TokenHash(self.token_hasher.hash(raw_token)),
                invited_role=role,
                inviter_id=inviter_id,
                expires_at=now + expires_in,
                created_at=now,
            )

            saved = await self.invite_repository.save(invite)
            logfire.info(
                "Invite issued",
                invite_id=str(saved.id),
                inviter_id=str(inviter_id),
                expires_at=saved.expires_at.isoformat(),
            )
            return IssuedInvite(invite=saved, raw_token=raw_token)

    async def get_by_id(self, invite_id: InviteId) -> Invite:
        """Get invite by ID.

        Raises:
            NotFoundError: If invite not found
        """
        with logfire.span("invite_service.get_by_id", invite_id=str(invite_id)):
            invite = await self.invite_repository.find_by_id(invite_id)
            if not invite:
                logfire.warn("Invite not found", invite_id=str(invite_id))
                raise NotFoundError("Invite", str(invite_id))
            return invite

    async def get_by_token(self, raw_token: str) -> Invite | None:
        """Get invite by its raw token.

        Args:
            raw_token: Token presented by the invitee

        Returns:
            Invite if found, None otherwise

        Raises:
            ValidationError: If the token is blank
        """
        token_hash = TokenHash(self.token_hasher.hash(raw_token))
        with logfire.span("invite_service.get_by_token", token_hash=token_hash.short()):
            invite = await self.invite_repository.find_by_token_hash(token_hash)
            if invite:
                logfire.info(
                    "Invite found",
                    invite_id=str(invite.id),
                    state=invite.state(self.clock.now()).value,
                )
            else:
                logfire.warn("Invite not found", token_hash=token_hash.short())
            return invite

    async def redeem(self, invite: Invite) -> Invite:
        """Mark an invite as used.

        The check-and-set happens atomically in the repository, so only one
        of several concurrent redemptions wins.

        Raises:
            InviteNotValidError: If the invite is used, revoked or expired
        """
        with logfire.span("invite_service.redeem", invite_id=str(invite.id)):
            now = self.clock.now()
            redeemed = await self.invite_repository.mark_used(invite.id, now)
            if redeemed is None:
                current = await self.invite_repository.find_by_id(invite.id) or invite
                state = current.state(now)
                logfire.warn(
                    "Invite redemption rejected",
                    invite_id=str(invite.id),
                    state=state.value,
                )
                raise InviteNotValidError(str(invite.id), state.value.lower())

            logfire.info("Invite redeemed", invite_id=str(invite.id))
            return redeemed

    async def revoke(self, invite_id: InviteId) -> Invite:
        """Revoke an invite.

        Revoking twice is a no-op. Revoking a used invite is rejected.

        Raises:
            NotFoundError: If invite not found
            InviteNotValidError: If the invite was already used
        """
        with logfire.span("invite_service.revoke", invite_id=str(invite_id)):
            invite = await self.get_by_id(invite_id)

            if invite.used_at is not None:
                logfire.warn("Cannot revoke used invite", invite_id=str(invite_id))
                raise InviteNotValidError(str(invite_id), InviteState.USED.value.lower())

            if invite.revoked_at is not None:
                logfire.info("Invite already revoked", invite_id=str(invite_id))
                return invite

            saved = await self.invite_repository.save(
                invite.mark_revoked(self.clock.now())
            )
            logfire.info("Invite revoked", invite_id=str(invite_id))
            return saved

    async def list_invites(
        self,
        inviter_id: UserId,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """List invites issued by a user, newest first."""
        with logfire.span(
            "invite_service.list_invites",
            inviter_id=str(inviter_id),
            limit=limit,
            offset=offset,
        ):
            invites = await self.invite_repository.find_by_inviter(
                inviter_id, limit, offset
            )
            logfire.info(
                "Invites listed",
                inviter_id=str(inviter_id),
                count=len(invites),
            )
            return invites

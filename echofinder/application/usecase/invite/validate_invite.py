"""Validate invite use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from echofinder.domain.error import NotFoundError
from echofinder.domain.service import InviteService, UserService
from echofinder.domain.value import InviteState, UserRole
from echofinder.util.clock import Clock

_MESSAGES = {
    InviteState.PENDING: "Valid invite",
    InviteState.USED: "Invite has already been used",
    InviteState.REVOKED: "Invite has been revoked",
    InviteState.EXPIRED: "Invite has expired",
}


class ValidateInviteRequest(BaseModel):
    """Validate invite request."""

    token: str


class ValidateInviteResponse(BaseModel):
    """Validate invite response."""

    valid: bool
    state: InviteState | None = None
    email: str | None = None
    invited_role: UserRole | None = None
    inviter_email: str | None = None
    expires_at: datetime | None = None
    message: str


class ValidateInviteUseCase:
    """Use case for validating an invite token.

    This allows the frontend to check an invite link before asking the
    invitee to accept it. Unknown tokens are reported, not raised.
    """

    def __init__(
        self,
        invite_service: InviteService,
        user_service: UserService,
        clock: Clock,
    ) -> None:
        """Initialize validate invite use case.

        Args:
            invite_service: Invite domain service
            user_service: User domain service
            clock: Source of the current time
        """
        self.invite_service = invite_service
        self.user_service = user_service
        self.clock = clock

    async def execute(self, request: ValidateInviteRequest) -> ValidateInviteResponse:
        """Validate an invite token.

        Args:
            request: Validation request with token

        Returns:
            Validation response with invite details or the reason it is invalid
        """
        with logfire.span("validate_invite.execute"):
            invite = await self.invite_service.get_by_token(request.token)

            if not invite:
                return ValidateInviteResponse(valid=False, message="Invite not found")

            state = invite.state(self.clock.now())
            if state != InviteState.PENDING:
                logfire.info(
                    "Invite not usable",
                    invite_id=str(invite.id),
                    state=state.value,
                )
                return ValidateInviteResponse(
                    valid=False,
                    state=state,
                    message=_MESSAGES[state],
                )

            try:
                inviter = await self.user_service.get_by_id(invite.inviter_id)
                inviter_email = inviter.email.root
            except NotFoundError:
                # Inviter references are weak
                inviter_email = None

            logfire.info("Valid invite found", invite_id=str(invite.id))

            return ValidateInviteResponse(
                valid=True,
                state=state,
                email=invite.email.root,
                invited_role=invite.invited_role,
                inviter_email=inviter_email,
                expires_at=invite.expires_at,
                message=_MESSAGES[state],
            )

"""Create invite use case."""

from datetime import timedelta
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from echofinder.application.usecase.base import BaseUseCase, parse_value
from echofinder.application.usecase.invite.common import InviteItem
from echofinder.config import InvitationSettings
from echofinder.domain.error import BusinessRuleViolationError, ValidationError
from echofinder.domain.service import InviteService, UserService
from echofinder.domain.value import Email, UserId, UserRole, UserStatus
from echofinder.util.clock import Clock


class CreateInviteRequest(BaseModel):
    """Request to create an invite."""

    inviter_id: UUID
    email: str
    role: UserRole = UserRole.USER
    expires_in_days: int | None = Field(default=None, ge=1)


class CreateInviteResponse(BaseModel):
    """Response after creating an invite.

    `token` is the raw invite token. It is returned here once and cannot be
    recovered later.
    """

    invite: InviteItem
    token: str


class CreateInviteUseCase(BaseUseCase):
    """Use case for issuing an invite on behalf of an existing user."""

    def __init__(
        self,
        invite_service: InviteService,
        user_service: UserService,
        invitation_settings: InvitationSettings,
        clock: Clock,
    ) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            user_service: User domain service
            invitation_settings: Invite expiry bounds
            clock: Source of the current time
        """
        self.invite_service = invite_service
        self.user_service = user_service
        self.invitation_settings = invitation_settings
        self.clock = clock

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Execute create invite use case.

        Args:
            request: Create invite request

        Returns:
            The created invite and its raw token

        Raises:
            ValidationError: If the email or expiry is invalid
            NotFoundError: If the inviter does not exist
            BusinessRuleViolationError: If the inviter is disabled
            ConflictError: If the generated token collides
        """
        inviter_id = UserId(request.inviter_id)
        email = parse_value(Email, request.email, "email")
        expires_in_days = self._expiry_days(request.expires_in_days)

        with logfire.span(
            "create_invite",
            inviter_id=str(inviter_id),
            role=request.role.value,
            expires_in_days=expires_in_days,
        ):
            inviter = await self.user_service.get_by_id(inviter_id)
            if inviter.status == UserStatus.DISABLED:
                logfire.warn("Disabled user tried to invite", inviter_id=str(inviter_id))
                raise BusinessRuleViolationError("Disabled users cannot issue invites")

            issued = await self.invite_service.issue_invite(
                inviter_id=inviter_id,
                email=email,
                role=request.role,
                expires_in=timedelta(days=expires_in_days),
            )

            return CreateInviteResponse(
                invite=InviteItem.from_invite(issued.invite, self.clock.now()),
                token=issued.raw_token,
            )

    def _expiry_days(self, requested: int | None) -> int:
        """Resolve the requested expiry against configured bounds."""
        invitations = self.invitation_settings
        if requested is None:
            return invitations.expiry_days
        if requested > invitations.max_expiry_days:
            raise ValidationError(
                "Invite expiry is too long",
                details={
                    "expires_in_days": f"must be at most {invitations.max_expiry_days}"
                },
            )
        return requested

"""Accept invite use case."""

import logfire
from pydantic import BaseModel

from echofinder.application.usecase.base import BaseUseCase, parse_value
from echofinder.application.usecase.user.common import UserItem
from echofinder.domain.error import ConflictError, InviteNotValidError, NotFoundError
from echofinder.domain.service import InviteService, UserService
from echofinder.domain.value import DisplayName, UserStatus
from echofinder.util.clock import Clock


class AcceptInviteRequest(BaseModel):
    """Accept invite request."""

    token: str
    display_name: str | None = None


class AcceptInviteResponse(BaseModel):
    """Accept invite response."""

    invite_id: str
    user: UserItem


class AcceptInviteUseCase(BaseUseCase):
    """Use case for redeeming an invite and provisioning its user.

    Redemption and user creation share the request's transaction, so a
    failure while creating the user also rolls back the redemption.
    """

    def __init__(
        self,
        invite_service: InviteService,
        user_service: UserService,
        clock: Clock,
    ) -> None:
        """Initialize accept invite use case.

        Args:
            invite_service: Invite domain service
            user_service: User domain service
            clock: Source of the current time
        """
        self.invite_service = invite_service
        self.user_service = user_service
        self.clock = clock

    async def execute(self, request: AcceptInviteRequest) -> AcceptInviteResponse:
        """Execute accept invite flow.

        Steps:
        1. Look up the invite by token
        2. Check it is still valid and its email is free
        3. Atomically mark it used
        4. Create an active user with the invited email and role

        Raises:
            ValidationError: If the token or display name is invalid
            NotFoundError: If no invite matches the token
            InviteNotValidError: If the invite is used, revoked or expired
            ConflictError: If a user with the invited email already exists
        """
        display_name = (
            parse_value(DisplayName, request.display_name, "display_name")
            if request.display_name is not None
            else None
        )

        with logfire.span("accept_invite.execute"):
            invite = await self.invite_service.get_by_token(request.token)
            if not invite:
                raise NotFoundError("Invite", "token")

            now = self.clock.now()
            if not invite.is_valid(now):
                state = invite.state(now)
                logfire.warn(
                    "Invite not valid for acceptance",
                    invite_id=str(invite.id),
                    state=state.value,
                )
                raise InviteNotValidError(str(invite.id), state.value.lower())

            if await self.user_service.get_user_by_email(invite.email):
                logfire.warn("Invited email already registered", invite_id=str(invite.id))
                raise ConflictError("User", "email")

            redeemed = await self.invite_service.redeem(invite)
            user = await self.user_service.create_user(
                email=redeemed.email,
                role=redeemed.invited_role,
                status=UserStatus.ACTIVE,
                display_name=display_name,
            )

            logfire.info(
                "Invite accepted",
                invite_id=str(redeemed.id),
                user_id=str(user.id),
            )

            return AcceptInviteResponse(
                invite_id=str(redeemed.id),
                user=UserItem.from_user(user),
            )

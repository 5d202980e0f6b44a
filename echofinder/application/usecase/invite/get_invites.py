"""Get invites use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from echofinder.application.usecase.base import BaseUseCase
from echofinder.application.usecase.invite.common import InviteItem
from echofinder.domain.service import InviteService, UserService
from echofinder.domain.value import UserId
from echofinder.util.clock import Clock


class GetInvitesRequest(BaseModel):
    """Get invites request."""

    inviter_id: UUID
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class GetInvitesResponse(BaseModel):
    """Get invites response."""

    invites: list[InviteItem]
    total: int


class GetInvitesUseCase(BaseUseCase):
    """Use case for listing invites issued by a user."""

    def __init__(
        self,
        invite_service: InviteService,
        user_service: UserService,
        clock: Clock,
    ) -> None:
        """Initialize get invites use case.

        Args:
            invite_service: Invite service
            user_service: User service
            clock: Source of the current time
        """
        self.invite_service = invite_service
        self.user_service = user_service
        self.clock = clock

    async def execute(self, request: GetInvitesRequest) -> GetInvitesResponse:
        """Execute get invites flow.

        Raises:
            NotFoundError: If the inviter does not exist
        """
        inviter_id = UserId(request.inviter_id)

        # Unknown inviters are a 404, not an empty page
        await self.user_service.get_by_id(inviter_id)

        invites = await self.invite_service.list_invites(
            inviter_id=inviter_id,
            limit=request.limit,
            offset=request.offset,
        )

        now = self.clock.now()
        invite_items = [InviteItem.from_invite(invite, now) for invite in invites]

        return GetInvitesResponse(invites=invite_items, total=len(invite_items))

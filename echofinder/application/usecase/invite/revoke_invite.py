"""Revoke invite use case."""

from uuid import UUID

from pydantic import BaseModel

from echofinder.application.usecase.base import BaseUseCase
from echofinder.application.usecase.invite.common import InviteItem
from echofinder.domain.service import InviteService
from echofinder.domain.value import InviteId
from echofinder.util.clock import Clock


class RevokeInviteRequest(BaseModel):
    """Revoke invite request."""

    invite_id: UUID


class RevokeInviteResponse(BaseModel):
    """Revoke invite response."""

    invite: InviteItem


class RevokeInviteUseCase(BaseUseCase):
    """Use case for revoking an outstanding invite."""

    def __init__(self, invite_service: InviteService, clock: Clock) -> None:
        self.invite_service = invite_service
        self.clock = clock

    async def execute(self, request: RevokeInviteRequest) -> RevokeInviteResponse:
        """Revoke the invite.

        Raises:
            NotFoundError: If the invite does not exist
            InviteNotValidError: If the invite was already used
        """
        invite = await self.invite_service.revoke(InviteId(request.invite_id))
        return RevokeInviteResponse(
            invite=InviteItem.from_invite(invite, self.clock.now())
        )

"""Invite routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status

from echofinder.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    GetInvitesRequest,
    GetInvitesResponse,
    GetInvitesUseCase,
    RevokeInviteRequest,
    RevokeInviteResponse,
    RevokeInviteUseCase,
    ValidateInviteRequest,
    ValidateInviteResponse,
    ValidateInviteUseCase,
)

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


@router.post(
    "", response_model=CreateInviteResponse, status_code=status.HTTP_201_CREATED
)
async def create_invite(
    request: CreateInviteRequest,
    create_invite_use_case: FromDishka[CreateInviteUseCase],
) -> CreateInviteResponse:
    """Issue an invite.

    The response carries the raw token. It is not retrievable afterwards.

    Example:
        POST /api/invites
        {"inviter_id": "...", "email": "new@example.org", "role": "USER"}
    """
    return await create_invite_use_case.execute(request)


@router.get("", response_model=GetInvitesResponse)
async def get_invites(
    get_invites_use_case: FromDishka[GetInvitesUseCase],
    inviter_id: UUID = Query(...),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> GetInvitesResponse:
    """List invites issued by a user, newest first."""
    return await get_invites_use_case.execute(
        GetInvitesRequest(inviter_id=inviter_id, limit=limit, offset=offset)
    )


@router.post("/validate", response_model=ValidateInviteResponse)
async def validate_invite(
    request: ValidateInviteRequest,
    validate_invite_use_case: FromDishka[ValidateInviteUseCase],
) -> ValidateInviteResponse:
    """Check whether an invite token can still be accepted.

    The token travels in the body so it never appears in a URL or access log.
    Unknown tokens return 200 with valid=false.
    """
    return await validate_invite_use_case.execute(request)


@router.post(
    "/accept",
    response_model=AcceptInviteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def accept_invite(
    request: AcceptInviteRequest,
    accept_invite_use_case: FromDishka[AcceptInviteUseCase],
) -> AcceptInviteResponse:
    """Accept an invite and create the invited user."""
    return await accept_invite_use_case.execute(request)


@router.post("/{invite_id}/revoke", response_model=RevokeInviteResponse)
async def revoke_invite(
    invite_id: UUID,
    revoke_invite_use_case: FromDishka[RevokeInviteUseCase],
) -> RevokeInviteResponse:
    """Revoke an outstanding invite. Revoking twice is a no-op."""
    return await revoke_invite_use_case.execute(RevokeInviteRequest(invite_id=invite_id))

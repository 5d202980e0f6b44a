"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from echofinder.application.usecase.user import (
    GetUserRequest,
    GetUserUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserItem,
)
from echofinder.domain.value import UserRole, UserStatus

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(BaseModel):
    """API request for updating a user.

    Omitted fields are left unchanged. A null display_name clears it.
    """

    email: str | None = None
    display_name: str | None = None
    role: UserRole | None = None
    status: UserStatus | None = None


@router.get("/{user_id}", response_model=UserItem)
async def get_user(
    user_id: UUID,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserItem:
    """Get a user by ID."""
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.patch("/{user_id}", response_model=UserItem)
async def update_user(
    user_id: UUID,
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
) -> UserItem:
    """Update a user's email, display name, role or status.

    Send `"display_name": null` to clear the display name.
    """
    # Only forward fields the client sent, so null and omitted stay distinct
    return await update_user_use_case.execute(
        UpdateUserRequest(user_id=user_id, **request.model_dump(exclude_unset=True))
    )

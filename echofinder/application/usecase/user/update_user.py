"""Update user use case."""

from uuid import UUID

from pydantic import BaseModel

from echofinder.application.usecase.base import parse_value
from echofinder.application.usecase.user.common import UserItem
from echofinder.domain.service import UserService
from echofinder.domain.value import DisplayName, Email, UserId, UserRole, UserStatus


class UpdateUserRequest(BaseModel):
    """Update user request.

    Fields left unset are not changed. An explicit null display_name
    clears it.
    """

    user_id: UUID
    email: str | None = None
    display_name: str | None = None
    role: UserRole | None = None
    status: UserStatus | None = None


class UpdateUserUseCase:
    """Use case for updating a user.

    Every change refreshes the user's updated_at.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserItem:
        """Execute update user flow.

        Args:
            request: Request with user ID and fields to update

        Returns:
            The updated user

        Raises:
            ValidationError: If a new value is invalid
            NotFoundError: If user not found
            ConflictError: If the new email belongs to another user
        """
        email = (
            parse_value(Email, request.email, "email")
            if request.email is not None
            else None
        )
        display_name = (
            parse_value(DisplayName, request.display_name, "display_name")
            if request.display_name is not None
            else None
        )

        user = await self.user_service.update_user(
            UserId(request.user_id),
            email=email,
            display_name=display_name,
            role=request.role,
            status=request.status,
            clear_display_name=(
                "display_name" in request.model_fields_set
                and request.display_name is None
            ),
        )
        return UserItem.from_user(user)

"""Get user use case."""

from uuid import UUID

from pydantic import BaseModel

from echofinder.application.usecase.user.common import UserItem
from echofinder.domain.service import UserService
from echofinder.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: UUID


class GetUserUseCase:
    """Use case for getting a user by ID."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserItem:
        """Execute get user flow.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return UserItem.from_user(user)

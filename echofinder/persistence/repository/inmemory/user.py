"""In-memory user repository for testing."""

from typing import Optional

from echofinder.domain.error import ConflictError
from echofinder.domain.model.user import User
from echofinder.domain.repository.user import UserRepository
from echofinder.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email, ignoring case."""
        for user in self._users.values():
            if user.email.normalized == email.normalized:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            ConflictError: If another user has the same email ignoring case
        """
        existing = await self.find_by_email(user.email)
        if existing and existing.id != user.id:
            raise ConflictError("User", "email")

        self._users[user.id] = user
        return user

"""User domain service."""

from uuid import uuid4

import logfire

from echofinder.domain.error import ConflictError, NotFoundError
from echofinder.domain.model import User
from echofinder.domain.repository import UserRepository
from echofinder.domain.value import DisplayName, Email, UserId, UserRole, UserStatus
from echofinder.util.clock import Clock

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository, clock: Clock) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            clock: Source of the current time
        """
        self.user_repository = user_repository
        self.clock = clock

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id))
            return user

    async def get_user_by_email(self, email: Email) -> User | None:
        """Get user by email, ignoring case.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found", user_id=str(user.id))
            else:
                logfire.info("No user with this email")
            return user

    async def create_user(
        self,
        email: Email,
        role: UserRole = UserRole.USER,
        status: UserStatus = UserStatus.PENDING,
        display_name: DisplayName | None = None,
    ) -> User:
        """Create a new user.

        Args:
            email: User email
            role: Initial role
            status: Initial status
            display_name: Optional display name

        Returns:
            Saved user

        Raises:
            ConflictError: If a user with this email already exists
        """
        with logfire.span("user_service.create_user", role=role.value, status=status.value):
            if await self.user_repository.find_by_email(email):
                logfire.warn("User email already taken")
                raise ConflictError("User", "email")

            now = self.clock.now()
            user = User(
                id=UserId(uuid4()),
                email=email,
                display_name=display_name,
                role=role,
                status=status,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id))
            return saved

    async def update_user(
        self,
        user_id: UserId,
        *,
        email: Email | None = None,
        display_name: DisplayName | None = None,
        role: UserRole | None = None,
        status: UserStatus | None = None,
        clear_display_name: bool = False,
    ) -> User:
        """Apply the given changes to a user.

        Fields left as None are not touched. Pass clear_display_name to
        remove the display name.

        Raises:
            NotFoundError: If user not found
            ConflictError: If the new email belongs to another user
        """
        with logfire.span("user_service.update_user", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            now = self.clock.now()

            if email is not None and email.normalized != user.email.normalized:
                existing = await self.user_repository.find_by_email(email)
                if existing and existing.id != user.id:
                    logfire.warn("User email already taken", user_id=str(user_id))
                    raise ConflictError("User", "email")
                user = user.with_email(email, now)
            elif email is not None:
                user = user.with_email(email, now)

            if display_name is not None:
                user = user.with_display_name(display_name, now)
            elif clear_display_name:
                user = user.with_display_name(None, now)
            if role is not None:
                user = user.with_role(role, now)
            if status is not None:
                user = user.with_status(status, now)

            saved = await self.user_repository.save(user)
            logfire.info("User updated", user_id=str(saved.id))
            return saved

"""Shared user response models."""

from datetime import datetime

from pydantic import BaseModel

from echofinder.domain.model import User
from echofinder.domain.value import UserRole, UserStatus


class UserItem(BaseModel):
    """User as exposed by the API."""

    user_id: str
    email: str
    display_name: str | None
    role: UserRole
    status: UserStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserItem":
        return cls(
            user_id=str(user.id),
            email=user.email.root,
            display_name=user.display_name.root if user.display_name else None,
            role=user.role,
            status=user.status,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

"""User use cases."""

from .common import UserItem
from .get_user import GetUserRequest, GetUserUseCase
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "GetUserRequest",
    "GetUserUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserItem",
]

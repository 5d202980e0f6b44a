"""Domain services."""

from .base import Service
from .invite_service import InviteService, IssuedInvite
from .token_hasher import TokenHasher
from .user_service import UserService

__all__ = [
    "InviteService",
    "IssuedInvite",
    "Service",
    "TokenHasher",
    "UserService",
]

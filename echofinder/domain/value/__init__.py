"""Domain value objects for EchoFinder."""

from echofinder.domain.value.identifiers import InviteId, UserId
from echofinder.domain.value.types import (
    DisplayName,
    Email,
    InviteState,
    TokenHash,
    UserRole,
    UserStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "InviteId",
    # Types
    "DisplayName",
    "Email",
    "InviteState",
    "TokenHash",
    "UserRole",
    "UserStatus",
]

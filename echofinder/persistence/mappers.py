"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from echofinder.domain.model import Invite, User
from echofinder.domain.value import (
    DisplayName,
    Email,
    InviteId,
    TokenHash,
    UserId,
    UserRole,
    UserStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    display_name = row.get("display_name")
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        display_name=DisplayName(display_name) if display_name else None,
        role=UserRole(row["role"]),
        status=UserStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "email": user.email.root,
        "display_name": user.display_name.root if user.display_name else None,
        "role": user.role.value,
        "status": user.status.value,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(_uuid(row["id"])),
        email=Email(row["email"]),
        token_hash=TokenHash(row["token_hash"]),
        invited_role=UserRole(row["invited_role"]),
        inviter_id=UserId(_uuid(row["inviter_id"])),
        expires_at=row["expires_at"],
        used_at=row.get("used_at"),
        revoked_at=row.get("revoked_at"),
        created_at=row["created_at"],
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict."""
    return {
        "id": invite.id,
        "email": invite.email.root,
        "token_hash": invite.token_hash.root,
        "invited_role": invite.invited_role.value,
        "inviter_id": invite.inviter_id,
        "expires_at": invite.expires_at,
        "used_at": invite.used_at,
        "revoked_at": invite.revoked_at,
        "created_at": invite.created_at,
    }

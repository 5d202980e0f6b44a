"""Domain value objects for EchoFinder.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from echofinder.domain.value.common import RootValueObject

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")


class UserRole(str, Enum):
    """Authorization level of a user (and of the role an invite grants)."""

    USER = "USER"
    ADMIN = "ADMIN"


class UserStatus(str, Enum):
    """Account usability.

    No transition graph is enforced here; guarding transitions is up to
    the owning service.
    """

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"


class InviteState(str, Enum):
    """Derived state of an invite at a point in time.

    Only used_at and revoked_at are stored. EXPIRED is computed from
    expires_at when the state is queried.
    """

    PENDING = "PENDING"
    USED = "USED"
    REVOKED = "REVOKED"
    EXPIRED = "EXPIRED"


class Email(RootValueObject[str]):
    """Email address.

    Stored exactly as given. Equality for uniqueness and lookup is
    case-insensitive, see `normalized`.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email shape and length."""
        v = v.strip()
        if len(v) < 3 or len(v) > 320:
            raise ValueError("Email must be 3-320 characters")
        if not _EMAIL_PATTERN.match(v):
            raise ValueError("Email must look like local@domain")
        return v

    @property
    def normalized(self) -> str:
        """Case-folded form used for uniqueness and lookups."""
        return self.root.lower()


class TokenHash(RootValueObject[str]):
    """Stored fingerprint of an invite token. Never the raw token."""

    @field_validator("root")
    @classmethod
    def validate_token_hash(cls, v: str) -> str:
        """Validate hash is not empty."""
        if not v.strip() or len(v) > 255:
            raise ValueError("Token hash must be 1-255 characters")
        return v

    def short(self) -> str:
        """Prefix safe to put in logs."""
        return self.root[:8] + "..."


class DisplayName(RootValueObject[str]):
    """Optional human-readable name of a user."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate display name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Display name must be 1-255 characters")
        return v

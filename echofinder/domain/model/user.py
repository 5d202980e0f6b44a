"""User aggregate root.

Users are provisioned from accepted invites and are never physically
deleted; an account is switched off through its status instead.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import AwareDatetime, Field

from echofinder.domain.model.common import DomainModel
from echofinder.domain.value import DisplayName, Email, UserId, UserRole, UserStatus
from echofinder.util.clock import utc_now


class User(DomainModel):
    """User aggregate root.

    Role and status are independent axes. Every mutation goes through one
    of the `with_*` methods, which refresh `updated_at`. `created_at` is
    never changed after construction.
    """

    id: UserId
    email: Email
    display_name: Optional[DisplayName] = None
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.PENDING
    created_at: AwareDatetime = Field(default_factory=utc_now)
    updated_at: AwareDatetime = Field(default_factory=utc_now)

    def with_email(self, email: Email, now: datetime | None = None) -> "User":
        return self._touch({"email": email}, now)

    def with_display_name(
        self, display_name: DisplayName | None, now: datetime | None = None
    ) -> "User":
        return self._touch({"display_name": display_name}, now)

    def with_role(self, role: UserRole, now: datetime | None = None) -> "User":
        return self._touch({"role": role}, now)

    def with_status(self, status: UserStatus, now: datetime | None = None) -> "User":
        return self._touch({"status": status}, now)

    def _touch(self, update: dict[str, Any], now: datetime | None) -> "User":
        update["updated_at"] = now or utc_now()
        return self.model_copy(update=update)

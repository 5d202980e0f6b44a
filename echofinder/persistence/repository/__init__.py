"""PostgreSQL repository implementations."""

from echofinder.persistence.repository.invite import PostgresInviteRepository
from echofinder.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresInviteRepository",
    "PostgresUserRepository",
]

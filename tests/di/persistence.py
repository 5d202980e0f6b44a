"""Mock persistence providers for testing."""

from dishka import Scope, provide

from echofinder.domain.repository import InviteRepository, UserRepository
from echofinder.persistence.repository.inmemory import (
    InMemoryInviteRepository,
    InMemoryUserRepository,
)
from echofinder.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so data survives across requests of one
    container. Every test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_invite_repository(self) -> InviteRepository:
        """Provide in-memory invite repository."""
        return InMemoryInviteRepository()

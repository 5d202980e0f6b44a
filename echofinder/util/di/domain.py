"""Domain layer DI providers."""

from dishka import Scope, provide

from echofinder.domain.repository import InviteRepository, UserRepository
from echofinder.domain.service import InviteService, TokenHasher, UserService
from echofinder.util.clock import Clock
from echofinder.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        token_hasher: TokenHasher,
        clock: Clock,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository,
            token_hasher=token_hasher,
            clock=clock,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository, clock: Clock) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, clock=clock)

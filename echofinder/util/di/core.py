"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from echofinder.config import InvitationSettings, Settings
from echofinder.domain.service import TokenHasher
from echofinder.util.clock import Clock
from echofinder.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_clock(self) -> Clock:
        """Provide the system clock."""
        return Clock()

    @provide(scope=Scope.APP)
    def provide_token_hasher(self, settings: Settings) -> TokenHasher:
        """Provide token hasher.

        Resolved lazily: missing salts fail the first request that needs
        the hasher, not application startup.
        """
        return TokenHasher(
            prefix_salt=settings.hash.prefix_salt,
            suffix_salt=settings.hash.suffix_salt,
        )

"""Application layer DI providers."""

from dishka import Scope, provide

from echofinder.application.usecase.invite import (
    AcceptInviteUseCase,
    CreateInviteUseCase,
    GetInvitesUseCase,
    RevokeInviteUseCase,
    ValidateInviteUseCase,
)
from echofinder.application.usecase.user import GetUserUseCase, UpdateUserUseCase
from echofinder.config import InvitationSettings
from echofinder.domain.service import InviteService, UserService
from echofinder.util.clock import Clock
from echofinder.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invite_use_case(
        self,
        invite_service: InviteService,
        user_service: UserService,
        invitation_settings: InvitationSettings,
        clock: Clock,
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(
            invite_service=invite_service,
            user_service=user_service,
            invitation_settings=invitation_settings,
            clock=clock,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_invites_use_case(
        self,
        invite_service: InviteService,
        user_service: UserService,
        clock: Clock,
    ) -> GetInvitesUseCase:
        """Provide get invites use case."""
        return GetInvitesUseCase(
            invite_service=invite_service, user_service=user_service, clock=clock
        )

    @provide(scope=Scope.REQUEST)
    def get_validate_invite_use_case(
        self, invite_service: InviteService, user_service: UserService, clock: Clock
    ) -> ValidateInviteUseCase:
        """Provide validate invite use case."""
        return ValidateInviteUseCase(
            invite_service=invite_service, user_service=user_service, clock=clock
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_invite_use_case(
        self, invite_service: InviteService, user_service: UserService, clock: Clock
    ) -> AcceptInviteUseCase:
        """Provide accept invite use case."""
        return AcceptInviteUseCase(
            invite_service=invite_service, user_service=user_service, clock=clock
        )

    @provide(scope=Scope.REQUEST)
    def get_revoke_invite_use_case(
        self, invite_service: InviteService, clock: Clock
    ) -> RevokeInviteUseCase:
        """Provide revoke invite use case."""
        return RevokeInviteUseCase(invite_service=invite_service, clock=clock)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(self, user_service: UserService) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service)

"""Unit tests for CreateInviteUseCase."""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest

from echofinder.application.usecase.invite import (
    CreateInviteRequest,
    CreateInviteUseCase,
)
from echofinder.config import InvitationSettings
from echofinder.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from echofinder.domain.repository import InviteRepository
from echofinder.domain.service import InviteService, TokenHasher, UserService
from echofinder.domain.value import Email, InviteId, InviteState, UserRole, UserStatus
from echofinder.util.clock import FixedClock
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateInviteUseCase:
    """Tests for CreateInviteUseCase."""

    @pytest.mark.asyncio
    async def test_create_invite_returns_token_once(self, unit_env):
        """Response carries the raw token, which resolves to the stored invite."""
        # Arrange
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(CreateInviteUseCase)
        invite_repo = await unit_env.get(InviteRepository)
        hasher = await unit_env.get(TokenHasher)
        clock = await unit_env.get(FixedClock)
        inviter = await user_service.create_user(
            Email("admin@example.org"), status=UserStatus.ACTIVE
        )

        # Act
        response = await use_case.execute(
            CreateInviteRequest(
                inviter_id=inviter.id,
                email="new@example.org",
                role=UserRole.ADMIN,
            )
        )

        # Assert
        assert response.token
        assert response.invite.state == InviteState.PENDING
        assert response.invite.invited_role == UserRole.ADMIN
        assert response.invite.expires_at == clock.now() + timedelta(days=7)
        assert "token" not in response.invite.model_dump()

        saved = await invite_repo.find_by_id(InviteId(UUID(response.invite.invite_id)))
        assert saved is not None
        assert hasher.verify(response.token, saved.token_hash.root)

    @pytest.mark.asyncio
    async def test_custom_expiry(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(CreateInviteUseCase)
        clock = await unit_env.get(FixedClock)
        inviter = await user_service.create_user(Email("admin@example.org"))

        response = await use_case.execute(
            CreateInviteRequest(
                inviter_id=inviter.id, email="new@example.org", expires_in_days=30
            )
        )

        assert response.invite.expires_at == clock.now() + timedelta(days=30)

    @pytest.mark.asyncio
    async def test_expiry_above_maximum_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(CreateInviteUseCase)
        inviter = await user_service.create_user(Email("admin@example.org"))

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateInviteRequest(
                    inviter_id=inviter.id, email="new@example.org", expires_in_days=31
                )
            )
        assert "expires_in_days" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_invalid_email_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(CreateInviteUseCase)
        inviter = await user_service.create_user(Email("admin@example.org"))

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateInviteRequest(inviter_id=inviter.id, email="not-an-email")
            )
        assert "email" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_unknown_inviter(self, unit_env):
        use_case = await unit_env.get(CreateInviteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateInviteRequest(inviter_id=uuid4(), email="new@example.org")
            )

    @pytest.mark.asyncio
    async def test_disabled_inviter(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(CreateInviteUseCase)
        inviter = await user_service.create_user(
            Email("admin@example.org"), status=UserStatus.DISABLED
        )

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(
                CreateInviteRequest(inviter_id=inviter.id, email="new@example.org")
            )

    @pytest.mark.asyncio
    async def test_expiry_bounds_come_from_invitation_settings(self, unit_env):
        """Default and maximum expiry follow the injected invitation settings."""
        # Arrange
        user_service = await unit_env.get(UserService)
        clock = await unit_env.get(FixedClock)
        use_case = CreateInviteUseCase(
            invite_service=await unit_env.get(InviteService),
            user_service=user_service,
            invitation_settings=InvitationSettings(expiry_days=3, max_expiry_days=5),
            clock=clock,
        )
        inviter = await user_service.create_user(
            Email("admin@example.org"), status=UserStatus.ACTIVE
        )

        # Act
        response = await use_case.execute(
            CreateInviteRequest(inviter_id=inviter.id, email="new@example.org")
        )

        # Assert
        assert response.invite.expires_at == clock.now() + timedelta(days=3)
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateInviteRequest(
                    inviter_id=inviter.id, email="late@example.org", expires_in_days=6
                )
            )

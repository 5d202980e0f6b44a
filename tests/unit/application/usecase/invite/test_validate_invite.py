"""Unit tests for ValidateInviteUseCase."""

from datetime import timedelta

import pytest

from echofinder.application.usecase.invite import (
    ValidateInviteRequest,
    ValidateInviteUseCase,
)
from echofinder.domain.service import InviteService, UserService
from echofinder.domain.value import Email, InviteState, UserRole
from echofinder.util.clock import FixedClock
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _issue(unit_env):
    user_service = await unit_env.get(UserService)
    invite_service = await unit_env.get(InviteService)
    inviter = await user_service.create_user(Email("admin@example.org"))
    return await invite_service.issue_invite(
        inviter_id=inviter.id,
        email=Email("new@example.org"),
        role=UserRole.USER,
        expires_in=timedelta(days=7),
    )


class TestValidateInviteUseCase:
    """Tests for ValidateInviteUseCase."""

    @pytest.mark.asyncio
    async def test_valid_invite(self, unit_env):
        issued = await _issue(unit_env)
        use_case = await unit_env.get(ValidateInviteUseCase)

        response = await use_case.execute(ValidateInviteRequest(token=issued.raw_token))

        assert response.valid is True
        assert response.state == InviteState.PENDING
        assert response.email == "new@example.org"
        assert response.inviter_email == "admin@example.org"
        assert response.expires_at == issued.invite.expires_at

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        use_case = await unit_env.get(ValidateInviteUseCase)

        response = await use_case.execute(ValidateInviteRequest(token="nope"))

        assert response.valid is False
        assert response.state is None
        assert response.message == "Invite not found"

    @pytest.mark.asyncio
    async def test_used_invite(self, unit_env):
        issued = await _issue(unit_env)
        invite_service = await unit_env.get(InviteService)
        await invite_service.redeem(issued.invite)
        use_case = await unit_env.get(ValidateInviteUseCase)

        response = await use_case.execute(ValidateInviteRequest(token=issued.raw_token))

        assert response.valid is False
        assert response.state == InviteState.USED

    @pytest.mark.asyncio
    async def test_expired_invite(self, unit_env):
        issued = await _issue(unit_env)
        clock = await unit_env.get(FixedClock)
        clock.advance(timedelta(days=8))
        use_case = await unit_env.get(ValidateInviteUseCase)

        response = await use_case.execute(ValidateInviteRequest(token=issued.raw_token))

        assert response.valid is False
        assert response.state == InviteState.EXPIRED

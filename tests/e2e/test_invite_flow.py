"""End-to-end tests for the invite lifecycle over HTTP."""

from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from echofinder.domain.model import User
from echofinder.domain.repository import InviteRepository, UserRepository
from echofinder.domain.service import TokenHasher
from echofinder.domain.value import Email, TokenHash, UserId, UserRole, UserStatus
from echofinder.interface.api.app import create_app
from tests.di import build_test_container
from tests.di.clock import TEST_NOW


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app(container=container)
    with TestClient(app_instance) as client:
        yield client


@pytest.fixture
def inviter(client, container) -> User:
    """An active admin who can issue invites."""

    async def _seed() -> User:
        repo = await container.get(UserRepository)
        return await repo.save(
            User(
                id=UserId(uuid4()),
                email=Email("admin@example.org"),
                role=UserRole.ADMIN,
                status=UserStatus.ACTIVE,
                created_at=TEST_NOW,
                updated_at=TEST_NOW,
            )
        )

    return client.portal.call(_seed)


def _create_invite(client, inviter: User, email: str = "new@example.org") -> dict:
    response = client.post(
        "/api/invites",
        json={"inviter_id": str(inviter.id), "email": email},
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestInviteScenario:
    """Issue, validate, accept, and try to accept again."""

    def test_full_invite_scenario(self, client, container, inviter):
        # Issue
        created = _create_invite(client, inviter)
        token = created["token"]
        invite_id = created["invite"]["invite_id"]
        assert created["invite"]["state"] == "PENDING"

        # Validate
        response = client.post("/api/invites/validate", json={"token": token})
        assert response.status_code == 200
        validation = response.json()
        assert validation["valid"] is True
        assert validation["email"] == "new@example.org"
        assert validation["inviter_email"] == "admin@example.org"

        # Accept
        response = client.post(
            "/api/invites/accept", json={"token": token, "display_name": "New Person"}
        )
        assert response.status_code == 201, response.text
        accepted = response.json()
        assert accepted["invite_id"] == invite_id
        assert accepted["user"]["status"] == "ACTIVE"
        assert accepted["user"]["role"] == "USER"

        # Second accept is rejected
        response = client.post("/api/invites/accept", json={"token": token})
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

        # The stored hash resolves to the same invite
        async def _lookup():
            hasher = await container.get(TokenHasher)
            repo = await container.get(InviteRepository)
            return await repo.find_by_token_hash(TokenHash(hasher.hash(token)))

        invite = client.portal.call(_lookup)
        assert invite is not None
        assert invite.id == UUID(invite_id)
        assert invite.used_at is not None

        # Validation now reports the invite as used
        response = client.post("/api/invites/validate", json={"token": token})
        assert response.json()["valid"] is False
        assert response.json()["state"] == "USED"

        # The new user can be fetched
        user_id = accepted["user"]["user_id"]
        response = client.get(f"/api/users/{user_id}")
        assert response.status_code == 200
        assert response.json()["display_name"] == "New Person"

    def test_validate_unknown_token(self, client):
        response = client.post("/api/invites/validate", json={"token": "unknown-token"})

        assert response.status_code == 200
        assert response.json()["valid"] is False

    def test_accept_unknown_token(self, client):
        response = client.post("/api/invites/accept", json={"token": "unknown"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_validate_token_not_in_path(self, client, inviter):
        token = _create_invite(client, inviter)["token"]

        response = client.get(f"/api/invites/validate/{token}")

        assert response.status_code in (404, 405)


class TestInviteManagement:
    def test_list_invites(self, client, inviter):
        _create_invite(client, inviter, "a@example.org")
        _create_invite(client, inviter, "b@example.org")

        response = client.get("/api/invites", params={"inviter_id": str(inviter.id)})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert {i["email"] for i in body["invites"]} == {"a@example.org", "b@example.org"}
        assert all("token" not in i for i in body["invites"])

    def test_revoke_then_accept(self, client, inviter):
        created = _create_invite(client, inviter)
        invite_id = created["invite"]["invite_id"]

        response = client.post(f"/api/invites/{invite_id}/revoke")
        assert response.status_code == 200
        assert response.json()["invite"]["state"] == "REVOKED"

        # Revoking again is a no-op
        response = client.post(f"/api/invites/{invite_id}/revoke")
        assert response.status_code == 200

        response = client.post("/api/invites/accept", json={"token": created["token"]})
        assert response.status_code == 409

    def test_expiry_too_long(self, client, inviter):
        response = client.post(
            "/api/invites",
            json={
                "inviter_id": str(inviter.id),
                "email": "new@example.org",
                "expires_in_days": 90,
            },
        )

        assert response.status_code == 400
        assert "expires_in_days" in response.json()["error"]["details"]

    def test_unknown_inviter(self, client):
        response = client.post(
            "/api/invites",
            json={"inviter_id": str(uuid4()), "email": "new@example.org"},
        )

        assert response.status_code == 404


class TestUsers:
    def test_update_user(self, client, inviter):
        response = client.patch(
            f"/api/users/{inviter.id}", json={"display_name": "Admin", "status": "DISABLED"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["display_name"] == "Admin"
        assert body["status"] == "DISABLED"
        assert body["role"] == "ADMIN"

    def test_disabled_user_cannot_invite(self, client, inviter):
        client.patch(f"/api/users/{inviter.id}", json={"status": "DISABLED"})

        response = client.post(
            "/api/invites",
            json={"inviter_id": str(inviter.id), "email": "new@example.org"},
        )

        assert response.status_code == 409

    def test_get_unknown_user(self, client):
        response = client.get(f"/api/users/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_null_display_name_clears_it(self, client, inviter):
        client.patch(f"/api/users/{inviter.id}", json={"display_name": "Admin"})

        kept = client.patch(f"/api/users/{inviter.id}", json={"role": "USER"})
        cleared = client.patch(f"/api/users/{inviter.id}", json={"display_name": None})

        assert kept.json()["display_name"] == "Admin"
        assert cleared.status_code == 200
        assert cleared.json()["display_name"] is None

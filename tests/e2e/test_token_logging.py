"""End-to-end tests that raw invite tokens stay out of telemetry."""

import json
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from logfire.testing import CaptureLogfire

from echofinder.domain.model import User
from echofinder.domain.repository import UserRepository
from echofinder.domain.value import Email, UserId, UserRole, UserStatus
from echofinder.interface.api.app import create_app
from tests.di import build_test_container
from tests.di.clock import TEST_NOW


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(capfire: CaptureLogfire, container):
    """Test client built after capfire so FastAPI spans are captured."""
    app_instance = create_app(container=container)
    with TestClient(app_instance) as client:
        yield client


@pytest.fixture
def inviter_id(client, container) -> str:
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

    return str(client.portal.call(_seed).id)


def _exported_text(capfire: CaptureLogfire) -> str:
    return json.dumps(capfire.exporter.exported_spans_as_dict(), default=str)


class TestTokenTelemetry:
    def test_token_never_exported(self, client, capfire, inviter_id):
        # Act
        response = client.post(
            "/api/invites",
            json={"inviter_id": inviter_id, "email": "new@example.org"},
        )
        token = response.json()["token"]
        client.post("/api/invites/validate", json={"token": token})
        client.post("/api/invites/accept", json={"token": token})
        client.post("/api/invites/accept", json={"token": token})

        # Assert
        exported = _exported_text(capfire)
        assert "/api/invites/validate" in exported
        assert token not in exported

    def test_unknown_token_never_exported(self, client, capfire):
        secret = "RAWTOKEN-SECRET-abc123"

        # Act
        client.post("/api/invites/validate", json={"token": secret})
        client.post("/api/invites/accept", json={"token": secret, "display_name": 5})
        client.post("/api/invites/accept", json={"token": secret})

        # Assert
        assert secret not in _exported_text(capfire)

"""End-to-end tests for invitation endpoints."""

import io
from urllib.parse import quote
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from gatepass.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container.

    Persistence is real so the working set survives across requests.
    """
    test_container = build_test_container(unmock={"persistence"}, fastapi=True)
    app_instance = create_app(container=test_container)
    return TestClient(app_instance)


def _create(client, name="Ana Torres", guest_count=3) -> dict:
    response = client.post(
        "/invitations", json={"name": name, "guest_count": guest_count}
    )
    assert response.status_code == 201
    return response.json()["invitation"]


class TestHealthEndpoint:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestInvitationEndpoints:
    """End-to-end tests for invitation API endpoints."""

    def test_create_invitation(self, client):
        """Should create an invitation with the community title."""
        # Act
        invitation = _create(client)

        # Assert
        assert invitation["name"] == "Ana Torres"
        assert invitation["guest_count"] == 3
        assert invitation["title"] == "Jardines de La Perla"

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "Ana Torres", "guest_count": 11},
            {"name": "A", "guest_count": 1},
            {"guest_count": 1},
        ],
    )
    def test_create_invalid_invitation(self, client, body):
        """Should return 422 and create nothing."""
        response = client.post("/invitations", json=body)

        assert response.status_code == 422
        assert client.get("/invitations").json()["total"] == 0

    def test_list_and_delete(self, client):
        """Deleted invitations leave the working set."""
        # Arrange
        kept = _create(client, "Ana Torres")
        removed = _create(client, "Luis Gómez", 0)

        # Act
        delete_response = client.delete(f"/invitations/{removed['id']}")
        list_response = client.get("/invitations")

        # Assert
        assert delete_response.status_code == 204
        assert [i["id"] for i in list_response.json()["invitations"]] == [kept["id"]]

    def test_delete_unknown_invitation(self, client):
        response = client.delete(f"/invitations/{uuid4()}")

        assert response.status_code == 404

    def test_download_artifact(self, client):
        """Should return the image with an attachment file name."""
        invitation = _create(client, "María Pérez")

        response = client.get(f"/invitations/{invitation['id']}/artifact")

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.headers["content-disposition"] == (
            f"attachment; filename*=UTF-8''{quote('maría-pérez.png')}"
        )
        assert Image.open(io.BytesIO(response.content)).size == (600, 900)

    def test_download_artifact_as_webp(self, client):
        invitation = _create(client)

        response = client.get(
            f"/invitations/{invitation['id']}/artifact",
            params={"format": "webp", "quality": 80},
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/webp"

    def test_download_unknown_artifact(self, client):
        response = client.get(f"/invitations/{uuid4()}/artifact")

        assert response.status_code == 404

    def test_invalid_quality(self, client):
        invitation = _create(client)

        response = client.get(
            f"/invitations/{invitation['id']}/artifact", params={"quality": 0}
        )

        assert response.status_code == 422

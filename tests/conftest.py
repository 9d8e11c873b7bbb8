"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire
import pytest

from gatepass.domain.model import Artifact, Invitation
from gatepass.domain.value import ImageFormat, InvitationId

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_invitation(
    name: str = "Ana Torres",
    guest_count: int = 3,
    invitation_id: InvitationId | None = None,
    created_at: datetime | None = None,
) -> Invitation:
    """Helper function to build a validated invitation for tests.

    Args:
        name: Guest name
        guest_count: Number of companions
        invitation_id: Optional fixed ID (random when omitted)
        created_at: Optional creation time (now when omitted)

    Returns:
        Invitation carrying the community title and description
    """
    return Invitation(
        id=invitation_id or InvitationId(uuid4()),
        name=name,
        guest_count=guest_count,
        title="Jardines de La Perla",
        description="código de invitación",
        created_at=created_at or datetime.now(),
    )


@pytest.fixture
def invitation() -> Invitation:
    """A valid invitation for Ana Torres with three companions."""
    return make_invitation()


def make_artifact(
    invitation: Invitation,
    image_format: ImageFormat = ImageFormat.PNG,
    data: bytes = b"artifact-bytes",
) -> Artifact:
    """Helper function to build an artifact without rendering one."""
    return Artifact(
        invitation_id=invitation.id,
        format=image_format,
        data=data,
        width=600,
        height=900,
        captions=(
            invitation.title,
            f"Para: {invitation.name}",
            f"Acompañantes: {invitation.guest_count}",
            invitation.description,
        ),
        token_text=f'{{"id":"{invitation.id}","name":"{invitation.name}","guests":{invitation.guest_count}}}',
    )

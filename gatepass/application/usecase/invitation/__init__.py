"""Invitation use cases."""

from gatepass.application.usecase.invitation.common import InvitationItem
from gatepass.application.usecase.invitation.create_invitation import (
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
)
from gatepass.application.usecase.invitation.delete_invitation import (
    DeleteInvitationRequest,
    DeleteInvitationResponse,
    DeleteInvitationUseCase,
)
from gatepass.application.usecase.invitation.generate_artifact import (
    GenerateArtifactRequest,
    GenerateArtifactResponse,
    GenerateArtifactUseCase,
)
from gatepass.application.usecase.invitation.list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)

__all__ = [
    "CreateInvitationRequest",
    "CreateInvitationResponse",
    "CreateInvitationUseCase",
    "DeleteInvitationRequest",
    "DeleteInvitationResponse",
    "DeleteInvitationUseCase",
    "GenerateArtifactRequest",
    "GenerateArtifactResponse",
    "GenerateArtifactUseCase",
    "InvitationItem",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
]

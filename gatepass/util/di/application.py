"""Application layer DI providers."""

from dishka import Scope, provide

from gatepass.application.session import InvitationSession
from gatepass.application.usecase.invitation import (
    CreateInvitationUseCase,
    DeleteInvitationUseCase,
    GenerateArtifactUseCase,
    ListInvitationsUseCase,
)
from gatepass.domain.service import (
    ArtifactService,
    CapabilityDetector,
    DistributionDispatcher,
    InvitationService,
    Notifier,
)
from gatepass.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> DeleteInvitationUseCase:
        """Provide delete invitation use case."""
        return DeleteInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_generate_artifact_use_case(
        self,
        invitation_service: InvitationService,
        artifact_service: ArtifactService,
    ) -> GenerateArtifactUseCase:
        """Provide generate artifact use case."""
        return GenerateArtifactUseCase(
            invitation_service=invitation_service,
            artifact_service=artifact_service,
        )

    # Session controller
    @provide(scope=Scope.REQUEST)
    def get_invitation_session(
        self,
        artifact_service: ArtifactService,
        capability_detector: CapabilityDetector,
        distribution_dispatcher: DistributionDispatcher,
        notifier: Notifier,
    ) -> InvitationSession:
        """Provide a fresh invitation session controller."""
        return InvitationSession(
            artifact_service=artifact_service,
            capability_detector=capability_detector,
            distribution_dispatcher=distribution_dispatcher,
            notifier=notifier,
        )

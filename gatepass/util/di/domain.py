"""Domain layer DI providers."""

from dishka import Scope, provide

from gatepass.config import (
    ArtifactSettings,
    InvitationSettings,
    RenderSettings,
    TokenSettings,
)
from gatepass.domain.repository import InvitationRepository
from gatepass.domain.service import (
    ArtifactCompositor,
    ArtifactService,
    CapabilityDetector,
    DistributionDispatcher,
    InvitationService,
    Notifier,
    ShareHost,
    TokenEncoder,
)
from gatepass.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The render services hold no per-request state and live for the whole
    application; the compositor keeps its font cache across requests.
    """

    @provide(scope=Scope.APP)
    def get_token_encoder(self, settings: TokenSettings) -> TokenEncoder:
        """Provide token encoder domain service."""
        return TokenEncoder(settings=settings)

    @provide(scope=Scope.APP)
    def get_artifact_compositor(self, settings: ArtifactSettings) -> ArtifactCompositor:
        """Provide artifact compositor domain service."""
        return ArtifactCompositor(settings=settings)

    @provide(scope=Scope.APP)
    def get_artifact_service(
        self,
        token_encoder: TokenEncoder,
        artifact_compositor: ArtifactCompositor,
        render_settings: RenderSettings,
    ) -> ArtifactService:
        """Provide render pipeline domain service."""
        return ArtifactService(
            token_encoder=token_encoder,
            artifact_compositor=artifact_compositor,
            render_settings=render_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_capability_detector(self, host: ShareHost) -> CapabilityDetector:
        """Provide capability detector domain service."""
        return CapabilityDetector(host=host)

    @provide(scope=Scope.REQUEST)
    def get_distribution_dispatcher(
        self, host: ShareHost, notifier: Notifier
    ) -> DistributionDispatcher:
        """Provide distribution dispatcher domain service."""
        return DistributionDispatcher(host=host, notifier=notifier)

    @provide(scope=Scope.REQUEST)
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository, settings=settings
        )

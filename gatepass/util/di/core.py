"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gatepass.config import (
    ArtifactSettings,
    InvitationSettings,
    RenderSettings,
    Settings,
    TokenSettings,
)
from gatepass.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_token_settings(self, settings: Settings) -> TokenSettings:
        """Provide token settings."""
        return settings.token

    @provide(scope=Scope.APP)
    def provide_artifact_settings(self, settings: Settings) -> ArtifactSettings:
        """Provide artifact settings."""
        return settings.artifact

    @provide(scope=Scope.APP)
    def provide_render_settings(self, settings: Settings) -> RenderSettings:
        return settings.render

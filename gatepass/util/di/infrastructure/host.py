"""Host infrastructure providers."""

from dishka import Scope, provide

from gatepass.adapter.host import LocalHost
from gatepass.adapter.notify import LogfireNotifier
from gatepass.config import Settings
from gatepass.domain.service import Notifier, ShareHost
from gatepass.util.di.base import ProviderBase


class HostProvider(ProviderBase):
    """Host component base."""

    __mock_component__ = "host"


class ProdHostProvider(HostProvider):
    """Production host provider using the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_share_host(self, settings: Settings) -> ShareHost:
        """Provide local share host.

        The local host has no share sheet or clipboard, so distribution
        falls back to downloads written under the configured directory.
        """
        return LocalHost(download_dir=settings.distribution.download_dir)

    @provide(scope=Scope.APP)
    def get_notifier(self) -> Notifier:
        """Provide notifier that reports through Logfire."""
        return LogfireNotifier()

"""Mock host providers for testing."""

from dishka import Scope, provide

from gatepass.adapter.host import MockHost
from gatepass.adapter.notify import RecordingNotifier
from gatepass.domain.service import Notifier, ShareHost
from gatepass.util.di.infrastructure.host import HostProvider


class MockHostProvider(HostProvider):
    """Mock host provider using a scriptable in-memory host.

    Uses REQUEST scope so each test gets a fresh host and notifier that
    tests can fetch and inspect.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_host(self) -> MockHost:
        """Provide mock host."""
        return MockHost()

    @provide(scope=Scope.REQUEST)
    def get_share_host(self, host: MockHost) -> ShareHost:
        """Expose the mock host under the domain interface."""
        return host

    @provide(scope=Scope.REQUEST)
    def get_recording_notifier(self) -> RecordingNotifier:
        """Provide recording notifier."""
        return RecordingNotifier()

    @provide(scope=Scope.REQUEST)
    def get_notifier(self, notifier: RecordingNotifier) -> Notifier:
        """Expose the recording notifier under the domain interface."""
        return notifier

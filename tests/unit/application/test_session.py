"""Unit tests for InvitationSession."""

import asyncio

import pytest

from gatepass.adapter.host import MockHost
from gatepass.adapter.notify import RecordingNotifier
from gatepass.application.session import (
    RENDER_FAILED_TITLE,
    InvitationSession,
    SessionState,
)
from gatepass.domain.error import (
    BusinessRuleViolationError,
    EncodingError,
    RenderError,
)
from gatepass.domain.service import CapabilityDetector, DistributionDispatcher
from gatepass.domain.value import DistributionStatus
from tests.conftest import make_artifact, make_invitation


class GatedArtifactService:
    """Artifact service whose renders finish only when released."""

    def __init__(self) -> None:
        self.gates: dict = {}
        self.failures: dict = {}
        self.calls: list = []

    def gate(self, invitation_id) -> asyncio.Event:
        return self.gates.setdefault(invitation_id, asyncio.Event())

    def release(self, invitation_id) -> None:
        self.gate(invitation_id).set()

    async def render(self, invitation, image_format=None, quality=None):
        self.calls.append(invitation.id)
        await self.gate(invitation.id).wait()
        if invitation.id in self.failures:
            raise self.failures[invitation.id]
        return make_artifact(invitation)


@pytest.fixture
def host() -> MockHost:
    return MockHost()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def renderer() -> GatedArtifactService:
    return GatedArtifactService()


@pytest.fixture
def session(renderer, host, notifier) -> InvitationSession:
    return InvitationSession(
        artifact_service=renderer,
        capability_detector=CapabilityDetector(host),
        distribution_dispatcher=DistributionDispatcher(host, notifier),
        notifier=notifier,
    )


class TestShow:
    """Tests for show and the render lifecycle."""

    @pytest.mark.asyncio
    async def test_render_reaches_ready(self, session, renderer, invitation):
        """A completed render caches the artifact and capabilities."""
        # Arrange
        renderer.release(invitation.id)

        # Act
        session.show(invitation)
        assert session.state == SessionState.RENDERING
        await session.wait()

        # Assert
        assert session.state == SessionState.READY
        assert session.artifact.invitation_id == invitation.id
        assert session.capabilities.native_share is True

    @pytest.mark.asyncio
    async def test_same_invitation_does_not_rerender(self, session, renderer, invitation):
        """Showing the current invitation again is a no-op."""
        renderer.release(invitation.id)
        session.show(invitation)
        await session.wait()

        task = session.show(invitation)

        assert task is None
        assert renderer.calls == [invitation.id]

    @pytest.mark.asyncio
    async def test_superseded_render_is_discarded(self, session, renderer):
        """Only the latest invitation's artifact is ever adopted."""
        # Arrange
        first = make_invitation(name="Ana Torres")
        second = make_invitation(name="Luis Gómez")

        # Act
        first_task = session.show(first)
        session.show(second)
        renderer.release(second.id)
        await session.wait()
        renderer.release(first.id)
        await first_task

        # Assert
        assert session.state == SessionState.READY
        assert session.invitation == second
        assert session.artifact.invitation_id == second.id

    @pytest.mark.asyncio
    async def test_stale_result_arriving_first_is_ignored(self, session, renderer):
        """An older render finishing early never reaches the session."""
        first = make_invitation(name="Ana Torres")
        second = make_invitation(name="Luis Gómez")

        first_task = session.show(first)
        session.show(second)
        renderer.release(first.id)
        await first_task

        assert session.state == SessionState.RENDERING
        assert session.artifact is None

        renderer.release(second.id)
        await session.wait()
        assert session.artifact.invitation_id == second.id

    @pytest.mark.asyncio
    async def test_drain_collects_superseded_renders(self, session, renderer):
        """Superseded renders stay tracked until they settle."""
        # Arrange
        first = make_invitation(name="Ana Torres")
        second = make_invitation(name="Luis Gómez")
        first_task = session.show(first)
        second_task = session.show(second)
        renderer.release(second.id)
        await session.wait()

        # Act
        assert session.pending_renders == 1
        renderer.release(first.id)
        await session.drain()

        # Assert
        assert first_task.done()
        assert second_task.done()
        assert session.pending_renders == 0
        assert session.artifact.invitation_id == second.id

    @pytest.mark.asyncio
    async def test_new_invitation_clears_previous_artifact(self, session, renderer):
        """A stale artifact is never shown next to new metadata."""
        first = make_invitation(name="Ana Torres")
        second = make_invitation(name="Luis Gómez")
        renderer.release(first.id)
        session.show(first)
        await session.wait()

        session.show(second)

        assert session.state == SessionState.RENDERING
        assert session.artifact is None
        assert session.capabilities is None

    @pytest.mark.asyncio
    async def test_reset_returns_to_idle(self, session, renderer, invitation):
        renderer.release(invitation.id)
        session.show(invitation)
        await session.wait()

        session.reset()

        assert session.state == SessionState.IDLE
        assert session.invitation is None
        assert session.artifact is None


class TestRenderFailure:
    """Tests for render failures."""

    @pytest.mark.asyncio
    async def test_failure_notifies_once(self, session, renderer, notifier, invitation):
        """A failed render moves to FAILED with one error notification."""
        # Arrange
        renderer.failures[invitation.id] = EncodingError("too large", invitation.id)
        renderer.release(invitation.id)

        # Act
        session.show(invitation)
        await session.wait()

        # Assert
        assert session.state == SessionState.FAILED
        assert isinstance(session.error, EncodingError)
        assert session.artifact is None
        assert [n.title for n in notifier.errors] == [RENDER_FAILED_TITLE]

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_render_error(
        self, session, renderer, notifier, invitation
    ):
        """Unexpected exceptions are contained as render failures."""
        renderer.failures[invitation.id] = RuntimeError("boom")
        renderer.release(invitation.id)

        session.show(invitation)
        await session.wait()

        assert session.state == SessionState.FAILED
        assert isinstance(session.error, RenderError)
        assert len(notifier.errors) == 1

    @pytest.mark.asyncio
    async def test_stale_failure_is_silent(self, session, renderer, notifier):
        """A superseded render failing does not notify or change state."""
        first = make_invitation(name="Ana Torres")
        second = make_invitation(name="Luis Gómez")
        renderer.failures[first.id] = EncodingError("too large", first.id)

        first_task = session.show(first)
        session.show(second)
        renderer.release(first.id)
        await first_task

        assert notifier.errors == []
        assert session.state == SessionState.RENDERING

        renderer.release(second.id)
        await session.wait()

    @pytest.mark.asyncio
    async def test_new_invitation_after_failure_renders(self, session, renderer):
        """A failed render is terminal only for that invitation."""
        first = make_invitation(name="Ana Torres")
        second = make_invitation(name="Luis Gómez")
        renderer.failures[first.id] = EncodingError("too large", first.id)
        renderer.release(first.id)
        renderer.release(second.id)
        session.show(first)
        await session.wait()

        session.show(second)
        await session.wait()

        assert session.state == SessionState.READY


class TestDistribution:
    """Tests for distribution through the session."""

    @pytest.mark.asyncio
    async def test_distribution_requires_ready_artifact(self, session, renderer, invitation):
        """Nothing can be distributed before the render completes."""
        session.show(invitation)

        with pytest.raises(BusinessRuleViolationError):
            await session.download()

        renderer.release(invitation.id)
        await session.wait()

    @pytest.mark.asyncio
    async def test_download_and_share_when_ready(self, session, renderer, host, invitation):
        """Actions use the cached artifact and detected capabilities."""
        renderer.release(invitation.id)
        session.show(invitation)
        await session.wait()

        download = await session.download()
        share = await session.share()
        copy = await session.copy()

        assert download.status == DistributionStatus.SUCCEEDED
        assert share.status == DistributionStatus.SUCCEEDED
        assert copy.status == DistributionStatus.SUCCEEDED
        assert host.downloads[0][0] == "ana-torres.png"
        # Distribution never touches the cached artifact
        assert session.state == SessionState.READY

"""Invitation session controller.

Drives the render pipeline for the invitation currently on screen and keeps
its artifact for distribution.

States::

    idle -> rendering -> ready
                      -> failed

``rendering`` is re-entered whenever a different invitation is shown, even if
a render is still in flight. There is no way to abort that render; its result
is dropped on arrival because the invitation it was started for is no longer
current.
"""

import asyncio
from enum import Enum

import logfire

from gatepass.domain.error import BusinessRuleViolationError, RenderError
from gatepass.domain.model import Artifact, Invitation
from gatepass.domain.service import (
    ArtifactService,
    CapabilityDetector,
    DistributionDispatcher,
    Notifier,
)
from gatepass.domain.value import Capabilities, DistributionResult, InvitationId

RENDER_FAILED_TITLE = "No se pudo generar el código QR"
RENDER_FAILED_DESCRIPTION = "Vuelva a crear la invitación para intentarlo de nuevo."


class SessionState(str, Enum):
    """Render state of an invitation session."""

    IDLE = "idle"
    RENDERING = "rendering"
    READY = "ready"
    FAILED = "failed"


class InvitationSession:
    """Controller owning the artifact of one on-screen invitation."""

    def __init__(
        self,
        artifact_service: ArtifactService,
        capability_detector: CapabilityDetector,
        distribution_dispatcher: DistributionDispatcher,
        notifier: Notifier,
    ) -> None:
        """Initialize session.

        Args:
            artifact_service: Render pipeline
            capability_detector: Capability detector for rendered artifacts
            distribution_dispatcher: Distribution dispatcher
            notifier: User-facing notifier for render failures
        """
        self.artifact_service = artifact_service
        self.capability_detector = capability_detector
        self.distribution_dispatcher = distribution_dispatcher
        self.notifier = notifier

        self.state = SessionState.IDLE
        self.invitation: Invitation | None = None
        self.artifact: Artifact | None = None
        self.capabilities: Capabilities | None = None
        self.error: RenderError | None = None
        self._task: asyncio.Task | None = None
        # Every render still in flight, superseded ones included
        self._tasks: set[asyncio.Task] = set()

    @property
    def current_id(self) -> InvitationId | None:
        return self.invitation.id if self.invitation else None

    def show(self, invitation: Invitation) -> asyncio.Task | None:
        """Display an invitation, rendering it if its identity changed.

        Must be called from a running event loop.

        Args:
            invitation: Invitation to display

        Returns:
            The render task started, or None when the invitation is already
            current
        """
        if self.state != SessionState.IDLE and invitation.id == self.current_id:
            return None

        if self.state == SessionState.RENDERING:
            logfire.info(
                "Render superseded",
                previous_id=str(self.current_id),
                invitation_id=str(invitation.id),
            )

        # Never show a stale artifact next to new metadata
        self.invitation = invitation
        self.artifact = None
        self.capabilities = None
        self.error = None
        self.state = SessionState.RENDERING

        self._task = asyncio.create_task(self._render(invitation))
        self._tasks.add(self._task)
        self._task.add_done_callback(self._tasks.discard)
        return self._task

    @property
    def pending_renders(self) -> int:
        return len(self._tasks)

    def reset(self) -> None:
        """Return to idle, e.g. when the form is cleared."""
        self.invitation = None
        self.artifact = None
        self.capabilities = None
        self.error = None
        self.state = SessionState.IDLE

    async def wait(self) -> None:
        """Wait for the most recently started render to settle."""
        if self._task is not None:
            await asyncio.shield(self._task)

    async def drain(self) -> None:
        """Wait for every render still in flight, superseded ones included."""
        if self._tasks:
            await asyncio.gather(*self._tasks)

    async def share(self) -> DistributionResult:
        invitation, artifact, capabilities = self._ready()
        return await self.distribution_dispatcher.share(invitation, artifact, capabilities)

    async def copy(self) -> DistributionResult:
        invitation, artifact, capabilities = self._ready()
        return await self.distribution_dispatcher.copy(invitation, artifact, capabilities)

    async def download(self) -> DistributionResult:
        invitation, artifact, _ = self._ready()
        return await self.distribution_dispatcher.download(invitation, artifact)

    def _ready(self) -> tuple[Invitation, Artifact, Capabilities]:
        if (
            self.state != SessionState.READY
            or self.invitation is None
            or self.artifact is None
            or self.capabilities is None
        ):
            raise BusinessRuleViolationError(
                f"No artifact ready to distribute (state: {self.state.value})"
            )
        return self.invitation, self.artifact, self.capabilities

    def _is_stale(self, invitation_id: InvitationId) -> bool:
        return invitation_id != self.current_id

    async def _render(self, invitation: Invitation) -> None:
        with logfire.span("invitation_session.render", invitation_id=str(invitation.id)):
            try:
                artifact = await self.artifact_service.render(invitation)
            except RenderError as e:
                self._fail(invitation, e)
                return
            except Exception as e:
                logfire.exception(
                    "Unexpected render failure", invitation_id=str(invitation.id)
                )
                self._fail(invitation, RenderError(str(e), invitation.id))
                return

            if self._is_stale(invitation.id):
                logfire.info("Stale render discarded", invitation_id=str(invitation.id))
                return

            self.capabilities = self.capability_detector.detect(artifact)
            self.artifact = artifact
            self.state = SessionState.READY
            logfire.info(
                "Invitation ready",
                invitation_id=str(invitation.id),
                content_type=artifact.content_type,
                size=artifact.size,
            )

    def _fail(self, invitation: Invitation, error: RenderError) -> None:
        if self._is_stale(invitation.id):
            logfire.info(
                "Stale render failure discarded", invitation_id=str(invitation.id)
            )
            return

        self.error = error
        self.state = SessionState.FAILED
        self.notifier.error(RENDER_FAILED_TITLE, RENDER_FAILED_DESCRIPTION)

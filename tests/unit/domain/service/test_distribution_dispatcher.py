"""Unit tests for DistributionDispatcher."""

import pytest

from gatepass.adapter.host import MockHost
from gatepass.adapter.notify import RecordingNotifier
from gatepass.domain.error import (
    ClipboardRejectedError,
    ShareAbortedError,
    SharePayloadRejectedError,
)
from gatepass.domain.service import DistributionDispatcher, download_filename
from gatepass.domain.service.notifier import NotificationLevel
from gatepass.domain.value import (
    Capabilities,
    DistributionAction,
    DistributionErrorKind,
    DistributionMethod,
    DistributionStatus,
    ImageFormat,
)
from tests.conftest import make_artifact
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALL = Capabilities(native_share=True, native_file_share=True, clipboard_write=True)
TEXT_ONLY = Capabilities(native_share=True, native_file_share=False, clipboard_write=True)
NONE = Capabilities()


class TestDownloadFilename:
    """Tests for download_filename."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Ana Torres", "ana-torres.png"),
            ("María  Pérez", "maría-pérez.png"),
            ("  Luis\tGómez  ", "luis-gómez.png"),
            ("a/b\\c", "a-b-c.png"),
            ("   ", "invitacion.png"),
            ("//", "invitacion.png"),
            ("/ Ana /", "ana.png"),
        ],
    )
    def test_filename_from_name(self, name, expected):
        """Name is lower-cased with whitespace runs collapsed to hyphens."""
        assert download_filename(name, "png") == expected


class TestShare:
    """Tests for share method."""

    @pytest.mark.asyncio
    async def test_share_file_when_supported(self, unit_env, invitation):
        """File share is preferred when the host accepts the file."""
        # Arrange
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        notifier = await unit_env.get(RecordingNotifier)
        artifact = make_artifact(invitation)

        # Act
        result = await dispatcher.share(invitation, artifact, ALL)

        # Assert
        assert result.ok
        assert result.method == DistributionMethod.FILE_SHARE
        assert len(host.shared) == 1
        shared_file = host.shared[0].files[0]
        assert shared_file.filename == "ana-torres.png"
        assert shared_file.content_type == "image/png"
        assert shared_file.data == artifact.data
        assert host.shared[0].title == "Jardines de La Perla"
        assert [n.level for n in notifier.notifications] == [NotificationLevel.SUCCESS]

    @pytest.mark.asyncio
    async def test_rejected_file_share_falls_back_to_text(self, unit_env, invitation):
        """A rejected file payload degrades to a text-only share."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        host.file_share_error = SharePayloadRejectedError("files not allowed")

        result = await dispatcher.share(invitation, make_artifact(invitation), ALL)

        assert result.ok
        assert result.method == DistributionMethod.TEXT_SHARE
        assert host.shared[0].files == ()
        assert host.shared[0].text == "código de invitación"

    @pytest.mark.asyncio
    async def test_text_share_without_file_capability(self, unit_env, invitation):
        """Without file share the dispatcher goes straight to text."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)

        result = await dispatcher.share(invitation, make_artifact(invitation), TEXT_ONLY)

        assert result.method == DistributionMethod.TEXT_SHARE
        assert len(host.shared) == 1

    @pytest.mark.asyncio
    async def test_share_unsupported(self, unit_env, invitation):
        """No native share fails with a single error notification."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        notifier = await unit_env.get(RecordingNotifier)

        result = await dispatcher.share(invitation, make_artifact(invitation), NONE)

        assert result.status == DistributionStatus.FAILED
        assert result.error_kind == DistributionErrorKind.UNSUPPORTED
        assert host.shared == []
        assert len(notifier.errors) == 1
        assert notifier.errors[0].title == "No se pudo compartir la invitación"

    @pytest.mark.asyncio
    async def test_share_cancelled_is_silent(self, unit_env, invitation):
        """Dismissing the share sheet is not an error and is not announced."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        notifier = await unit_env.get(RecordingNotifier)
        host.file_share_error = ShareAbortedError("dismissed")

        result = await dispatcher.share(invitation, make_artifact(invitation), ALL)

        assert result.status == DistributionStatus.CANCELLED
        assert result.error_kind == DistributionErrorKind.CANCELLED
        assert notifier.notifications == []
        # Cancelling the file share never triggers the text fallback
        assert host.shared == []

    @pytest.mark.asyncio
    async def test_text_share_cancelled_is_silent(self, unit_env, invitation):
        """Cancelling a text share is also silent."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        notifier = await unit_env.get(RecordingNotifier)
        host.share_error = ShareAbortedError("dismissed")

        result = await dispatcher.share(invitation, make_artifact(invitation), TEXT_ONLY)

        assert result.status == DistributionStatus.CANCELLED
        assert notifier.notifications == []

    @pytest.mark.asyncio
    async def test_text_share_rejected(self, unit_env, invitation):
        """A host refusing even text sharing reports unsupported."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        host.share_error = SharePayloadRejectedError("nope")

        result = await dispatcher.share(invitation, make_artifact(invitation), TEXT_ONLY)

        assert result.status == DistributionStatus.FAILED
        assert result.error_kind == DistributionErrorKind.UNSUPPORTED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("capabilities", [ALL, TEXT_ONLY])
    async def test_unexpected_host_failure_is_reported(
        self, unit_env, invitation, capabilities
    ):
        """A host bug during share becomes a failed result, never an exception."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        notifier = await unit_env.get(RecordingNotifier)
        host.file_share_error = RuntimeError("share sheet crashed")
        host.share_error = RuntimeError("share sheet crashed")

        result = await dispatcher.share(invitation, make_artifact(invitation), capabilities)

        assert result.status == DistributionStatus.FAILED
        assert result.error_kind == DistributionErrorKind.UNSUPPORTED
        assert "share sheet crashed" in result.message
        assert len(notifier.errors) == 1


class TestCopy:
    """Tests for copy method."""

    @pytest.mark.asyncio
    async def test_copy_writes_image_to_clipboard(self, unit_env, invitation):
        """The artifact is written keyed by its content type."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        artifact = make_artifact(invitation)

        result = await dispatcher.copy(invitation, artifact, ALL)

        assert result.ok
        assert result.method == DistributionMethod.CLIPBOARD
        assert host.clipboard == [{"image/png": artifact.data}]

    @pytest.mark.asyncio
    async def test_copy_without_clipboard(self, unit_env, invitation):
        """Missing clipboard support fails without touching the host."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        notifier = await unit_env.get(RecordingNotifier)

        result = await dispatcher.copy(invitation, make_artifact(invitation), NONE)

        assert result.status == DistributionStatus.FAILED
        assert result.error_kind == DistributionErrorKind.CLIPBOARD_UNAVAILABLE
        assert host.clipboard == []
        assert len(notifier.errors) == 1

    @pytest.mark.asyncio
    async def test_clipboard_rejects_image_type(self, unit_env, invitation):
        """A clipboard refusing the image type is clipboard-unavailable."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        host.clipboard_error = ClipboardRejectedError("image/webp not supported")

        result = await dispatcher.copy(
            invitation, make_artifact(invitation, ImageFormat.WEBP), ALL
        )

        assert result.error_kind == DistributionErrorKind.CLIPBOARD_UNAVAILABLE
        assert "image/webp" in result.message

    @pytest.mark.asyncio
    async def test_unexpected_clipboard_failure_is_reported(self, unit_env, invitation):
        """A host bug during copy becomes clipboard-unavailable."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        notifier = await unit_env.get(RecordingNotifier)
        host.clipboard_error = RuntimeError("clipboard crashed")

        result = await dispatcher.copy(invitation, make_artifact(invitation), ALL)

        assert result.status == DistributionStatus.FAILED
        assert result.error_kind == DistributionErrorKind.CLIPBOARD_UNAVAILABLE
        assert len(notifier.errors) == 1


class TestDownload:
    """Tests for download method."""

    @pytest.mark.asyncio
    async def test_download_saves_and_revokes(self, unit_env, invitation):
        """Download writes the bytes and releases the object URL."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        notifier = await unit_env.get(RecordingNotifier)
        artifact = make_artifact(invitation)

        result = await dispatcher.download(invitation, artifact)

        assert result.ok
        assert result.action == DistributionAction.DOWNLOAD
        assert result.filename == "ana-torres.png"
        assert host.downloads == [("ana-torres.png", artifact.data)]
        assert len(host.revoked) == 1
        assert host.open_object_urls == 0
        assert notifier.notifications[0].description == "ana-torres.png"

    @pytest.mark.asyncio
    async def test_download_uses_format_extension(self, unit_env, invitation):
        """JPEG artifacts download with a .jpg extension."""
        dispatcher = await unit_env.get(DistributionDispatcher)

        result = await dispatcher.download(
            invitation, make_artifact(invitation, ImageFormat.JPEG)
        )

        assert result.filename == "ana-torres.jpg"

    @pytest.mark.asyncio
    async def test_failed_download_still_revokes(self, unit_env, invitation):
        """The object URL is released even when the write fails."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        host.download_error = OSError("disk full")

        result = await dispatcher.download(invitation, make_artifact(invitation))

        assert result.status == DistributionStatus.FAILED
        assert result.error_kind == DistributionErrorKind.WRITE_FAILED
        assert host.open_object_urls == 0
        assert len(host.revoked) == 1

    @pytest.mark.asyncio
    async def test_failed_copy_does_not_block_download(self, unit_env, invitation):
        """Distribution failures are local to one action."""
        dispatcher = await unit_env.get(DistributionDispatcher)
        host = await unit_env.get(MockHost)
        artifact = make_artifact(invitation)

        copy_result = await dispatcher.copy(invitation, artifact, NONE)
        download_result = await dispatcher.download(invitation, artifact)

        assert copy_result.status == DistributionStatus.FAILED
        assert download_result.ok
        assert len(host.downloads) == 1

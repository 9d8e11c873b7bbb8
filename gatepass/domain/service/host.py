"""Host environment interface for distribution primitives."""

from gatepass.domain.value import HostPrimitive
from gatepass.domain.value.common import ValueObject


class ShareFile(ValueObject):
    """A file attached to a native share request."""

    filename: str
    content_type: str
    data: bytes


class ShareData(ValueObject):
    """Payload handed to the host's native share primitive."""

    title: str | None = None
    text: str | None = None
    files: tuple[ShareFile, ...] = ()


class ShareHost:
    """Generic host interface for share, clipboard and download primitives.

    Implementations signal outcomes with the host errors from
    ``gatepass.domain.error``: ``ShareAbortedError`` when the user dismisses
    the share sheet, ``SharePayloadRejectedError`` when a payload cannot be
    shared and ``ClipboardRejectedError`` when the clipboard refuses data.
    """

    def exposes(self, primitive: HostPrimitive) -> bool:
        """Check whether the host exposes a primitive at all.

        Args:
            primitive: Primitive to probe

        Returns:
            True if the primitive exists in this environment
        """
        raise NotImplementedError

    def can_share(self, data: ShareData) -> bool:
        """Ask the host whether it would accept a share payload.

        Args:
            data: Candidate payload

        Returns:
            True if the payload can be shared
        """
        raise NotImplementedError

    async def share(self, data: ShareData) -> None:
        """Open the native share sheet.

        Args:
            data: Payload to share
        """
        raise NotImplementedError

    async def write_clipboard(self, items: dict[str, bytes]) -> None:
        """Write items to the system clipboard.

        Args:
            items: Mapping of content type to bytes
        """
        raise NotImplementedError

    def create_object_url(self, data: bytes, content_type: str) -> str:
        """Create a transient reference to a byte stream.

        Args:
            data: Bytes to reference
            content_type: MIME type of the bytes

        Returns:
            Opaque reference URL
        """
        raise NotImplementedError

    def revoke_object_url(self, url: str) -> None:
        """Release a transient reference created by ``create_object_url``.

        Args:
            url: Reference to release
        """
        raise NotImplementedError

    def trigger_download(self, url: str, filename: str) -> None:
        """Trigger a save action for a transient reference.

        Args:
            url: Reference created by ``create_object_url``
            filename: Suggested file name
        """
        raise NotImplementedError

"""Local filesystem host.

Used by the API server and scripts: there is no share sheet and no system
clipboard, and downloads are written into a directory.
"""

from pathlib import Path
from uuid import uuid4

import logfire

from gatepass.domain.error import (
    ClipboardRejectedError,
    HostError,
    SharePayloadRejectedError,
)
from gatepass.domain.service.host import ShareData, ShareHost
from gatepass.domain.value import HostPrimitive


class LocalHost(ShareHost):
    """Host that can only download, into ``download_dir``.

    Object URLs are ``blob:`` references into an in-memory table, valid until
    revoked.
    """

    def __init__(self, download_dir: Path) -> None:
        """Initialize local host.

        Args:
            download_dir: Directory receiving downloaded files
        """
        self.download_dir = download_dir
        self._objects: dict[str, bytes] = {}

    @property
    def open_object_urls(self) -> int:
        return len(self._objects)

    def exposes(self, primitive: HostPrimitive) -> bool:
        return False

    def can_share(self, data: ShareData) -> bool:
        return False

    async def share(self, data: ShareData) -> None:
        raise SharePayloadRejectedError("No native share sheet on this host")

    async def write_clipboard(self, items: dict[str, bytes]) -> None:
        raise ClipboardRejectedError("No system clipboard on this host")

    def create_object_url(self, data: bytes, content_type: str) -> str:
        url = f"blob:gatepass/{uuid4()}"
        self._objects[url] = data
        return url

    def revoke_object_url(self, url: str) -> None:
        self._objects.pop(url, None)

    def trigger_download(self, url: str, filename: str) -> None:
        """Write the referenced bytes to ``download_dir / filename``.

        Raises:
            HostError: If the URL is unknown or the file cannot be written
        """
        data = self._objects.get(url)
        if data is None:
            raise HostError(f"Unknown or revoked object URL: {url}")

        # Only the final path component is honoured
        target = self.download_dir / Path(filename).name
        try:
            self.download_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            raise HostError(f"Cannot write {target}: {e}") from e

        logfire.info("Artifact saved", path=str(target), size=len(data))

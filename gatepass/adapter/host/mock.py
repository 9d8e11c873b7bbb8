"""Scriptable in-memory host for tests."""

import asyncio

from gatepass.domain.service.host import ShareData, ShareHost
from gatepass.domain.value import HostPrimitive


class MockHost(ShareHost):
    """Mock host recording every distribution call.

    Defaults to a fully capable environment that can share PNG files; tests
    narrow it by editing the public attributes.
    """

    def __init__(
        self,
        primitives: set[HostPrimitive] | None = None,
        shareable_types: set[str] | None = None,
    ) -> None:
        self.primitives = set(HostPrimitive) if primitives is None else primitives
        self.shareable_types = {"image/png"} if shareable_types is None else shareable_types

        # Errors raised by the next matching call, when set
        self.file_share_error: Exception | None = None
        self.share_error: Exception | None = None
        self.clipboard_error: Exception | None = None
        self.download_error: Exception | None = None
        self.probe_error: Exception | None = None

        self.shared: list[ShareData] = []
        self.clipboard: list[dict[str, bytes]] = []
        self.downloads: list[tuple[str, bytes]] = []
        self.revoked: list[str] = []
        self._objects: dict[str, bytes] = {}
        self._next_url = 0

    @property
    def open_object_urls(self) -> int:
        return len(self._objects)

    def exposes(self, primitive: HostPrimitive) -> bool:
        if self.probe_error:
            raise self.probe_error
        return primitive in self.primitives

    def can_share(self, data: ShareData) -> bool:
        if self.probe_error:
            raise self.probe_error
        return all(f.content_type in self.shareable_types for f in data.files)

    async def share(self, data: ShareData) -> None:
        await asyncio.sleep(0)
        error = self.file_share_error if data.files else self.share_error
        if error:
            raise error
        self.shared.append(data)

    async def write_clipboard(self, items: dict[str, bytes]) -> None:
        await asyncio.sleep(0)
        if self.clipboard_error:
            raise self.clipboard_error
        self.clipboard.append(items)

    def create_object_url(self, data: bytes, content_type: str) -> str:
        self._next_url += 1
        url = f"blob:mock/{self._next_url}"
        self._objects[url] = data
        return url

    def revoke_object_url(self, url: str) -> None:
        self._objects.pop(url, None)
        self.revoked.append(url)

    def trigger_download(self, url: str, filename: str) -> None:
        if self.download_error:
            raise self.download_error
        self.downloads.append((filename, self._objects[url]))

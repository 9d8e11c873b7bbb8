"""Capability detector domain service."""

import io
from functools import cache

import logfire
from PIL import Image

from gatepass.domain.model import Artifact
from gatepass.domain.value import Capabilities, HostPrimitive, ImageFormat

from .base import Service
from .host import ShareData, ShareFile, ShareHost

_PROBE_SIZE = (1, 1)


class CapabilityDetector(Service):
    """Domain service probing what the host can do with an artifact.

    Never raises: a failing probe reports the capability as unsupported.
    """

    def __init__(self, host: ShareHost) -> None:
        """Initialize capability detector.

        Args:
            host: Host environment to probe
        """
        self.host = host

    def detect(self, artifact: Artifact | None = None) -> Capabilities:
        """Detect distribution capabilities.

        File sharing depends on the file type, so it is probed with a file of
        the artifact's type each time.

        Args:
            artifact: Artifact about to be distributed, if any

        Returns:
            Detected capabilities
        """
        native_share = self._probe(
            "native_share",
            lambda: self.host.exposes(HostPrimitive.SHARE)
            and self.host.exposes(HostPrimitive.CAN_SHARE),
        )
        native_file_share = native_share and self._probe(
            "native_file_share",
            lambda: self.host.can_share(ShareData(files=(self._probe_file(artifact),))),
        )
        clipboard_write = self._probe(
            "clipboard_write",
            lambda: self.host.exposes(HostPrimitive.CLIPBOARD_WRITE),
        )

        capabilities = Capabilities(
            native_share=native_share,
            native_file_share=native_file_share,
            clipboard_write=clipboard_write,
        )
        logfire.info(
            "Capabilities detected",
            content_type=artifact.content_type if artifact else None,
            **capabilities.model_dump(),
        )
        return capabilities

    @staticmethod
    def _probe_file(artifact: Artifact | None) -> ShareFile:
        if artifact is None:
            return ShareFile(
                filename="probe.png",
                content_type=ImageFormat.PNG.content_type,
                data=_probe_png(),
            )
        return ShareFile(
            filename=f"probe.{artifact.format.extension}",
            content_type=artifact.content_type,
            data=artifact.data,
        )

    @staticmethod
    def _probe(name: str, check) -> bool:
        try:
            return bool(check())
        except Exception as e:
            logfire.warn("Capability probe failed", capability=name, error=str(e))
            return False


@cache
def _probe_png() -> bytes:
    """Tiny PNG used to probe file sharing when no artifact is at hand."""
    buffer = io.BytesIO()
    Image.new("RGBA", _PROBE_SIZE).save(buffer, format="PNG")
    return buffer.getvalue()

"""Distribution dispatcher domain service.

Each action returns a ``DistributionResult`` and reports its own outcome to
the user. No action raises for a distribution failure, and none of them
touch the artifact, so a failed copy never blocks a later download.
"""

import re
from collections.abc import Iterator
from contextlib import contextmanager

import logfire

from gatepass.domain.error import (
    DistributionError,
    HostError,
    ShareAbortedError,
)
from gatepass.domain.model import Artifact, Invitation
from gatepass.domain.value import (
    Capabilities,
    DistributionAction,
    DistributionErrorKind,
    DistributionMethod,
    DistributionResult,
    DistributionStatus,
)

from .base import Service
from .host import ShareData, ShareFile, ShareHost
from .notifier import Notifier

_SUCCESS_TITLES = {
    DistributionAction.SHARE: "Invitación compartida",
    DistributionAction.COPY: "Imagen copiada al portapapeles",
    DistributionAction.DOWNLOAD: "Imagen descargada",
}

_FAILURE_TITLES = {
    DistributionAction.SHARE: "No se pudo compartir la invitación",
    DistributionAction.COPY: "No se pudo copiar la imagen",
    DistributionAction.DOWNLOAD: "No se pudo descargar la imagen",
}


def download_filename(name: str, extension: str) -> str:
    """Derive the download file name from a guest name.

    Lower-cases the name, collapses whitespace runs into one ``-`` and
    replaces path separators. Names with nothing left fall back to
    ``invitacion``.

    Example:
        >>> download_filename("María  Pérez", "png")
        'maría-pérez.png'
    """
    stem = re.sub(r"\s+", "-", name.strip().lower())
    stem = re.sub(r"[\\/]+", "-", stem).strip("-") or "invitacion"
    return f"{stem}.{extension}"


@contextmanager
def object_url(host: ShareHost, data: bytes, content_type: str) -> Iterator[str]:
    """Scope a transient object URL: created on entry, revoked on every exit."""
    url = host.create_object_url(data, content_type)
    try:
        yield url
    finally:
        host.revoke_object_url(url)


class DistributionDispatcher(Service):
    """Domain service for sharing, copying and downloading artifacts."""

    def __init__(self, host: ShareHost, notifier: Notifier) -> None:
        """Initialize distribution dispatcher.

        Args:
            host: Host environment providing distribution primitives
            notifier: User-facing notifier
        """
        self.host = host
        self.notifier = notifier

    async def share(
        self, invitation: Invitation, artifact: Artifact, capabilities: Capabilities
    ) -> DistributionResult:
        """Share the artifact through the native share sheet.

        Tries the artifact as a file first, then a text-only share of the
        invitation title and description.

        Args:
            invitation: Invitation being shared
            artifact: Rendered artifact
            capabilities: Capabilities detected for this artifact

        Returns:
            Result of the share action
        """
        with logfire.span(
            "distribution_dispatcher.share",
            invitation_id=str(invitation.id),
            native_share=capabilities.native_share,
            native_file_share=capabilities.native_file_share,
        ):
            try:
                try:
                    method = await self._share(invitation, artifact, capabilities)
                except (ShareAbortedError, DistributionError):
                    raise
                except Exception as e:
                    logfire.exception(
                        "Unexpected share failure", invitation_id=str(invitation.id)
                    )
                    raise DistributionError(
                        DistributionErrorKind.UNSUPPORTED, f"Share failed: {e}"
                    ) from e
            except ShareAbortedError:
                logfire.info("Share cancelled by user", invitation_id=str(invitation.id))
                return self._report(
                    DistributionResult(
                        action=DistributionAction.SHARE,
                        status=DistributionStatus.CANCELLED,
                        error_kind=DistributionErrorKind.CANCELLED,
                    )
                )
            except DistributionError as e:
                return self._failed(DistributionAction.SHARE, e, invitation)

            return self._report(
                DistributionResult(
                    action=DistributionAction.SHARE,
                    status=DistributionStatus.SUCCEEDED,
                    method=method,
                )
            )

    async def copy(
        self, invitation: Invitation, artifact: Artifact, capabilities: Capabilities
    ) -> DistributionResult:
        """Copy the artifact image to the clipboard.

        Args:
            invitation: Invitation being copied
            artifact: Rendered artifact
            capabilities: Capabilities detected for this artifact

        Returns:
            Result of the copy action
        """
        with logfire.span(
            "distribution_dispatcher.copy",
            invitation_id=str(invitation.id),
            content_type=artifact.content_type,
        ):
            try:
                if not capabilities.clipboard_write:
                    raise DistributionError(
                        DistributionErrorKind.CLIPBOARD_UNAVAILABLE,
                        "Clipboard is not available",
                    )
                try:
                    await self.host.write_clipboard({artifact.content_type: artifact.data})
                except HostError as e:
                    raise DistributionError(
                        DistributionErrorKind.CLIPBOARD_UNAVAILABLE,
                        f"Clipboard rejected {artifact.content_type}: {e}",
                    ) from e
                except Exception as e:
                    logfire.exception(
                        "Unexpected clipboard failure", invitation_id=str(invitation.id)
                    )
                    raise DistributionError(
                        DistributionErrorKind.CLIPBOARD_UNAVAILABLE,
                        f"Clipboard write failed: {e}",
                    ) from e
            except DistributionError as e:
                return self._failed(DistributionAction.COPY, e, invitation)

            return self._report(
                DistributionResult(
                    action=DistributionAction.COPY,
                    status=DistributionStatus.SUCCEEDED,
                    method=DistributionMethod.CLIPBOARD,
                )
            )

    async def download(
        self, invitation: Invitation, artifact: Artifact
    ) -> DistributionResult:
        """Save the artifact locally.

        Args:
            invitation: Invitation being downloaded
            artifact: Rendered artifact

        Returns:
            Result of the download action, with the file name used
        """
        filename = download_filename(invitation.name, artifact.format.extension)

        with logfire.span(
            "distribution_dispatcher.download",
            invitation_id=str(invitation.id),
            filename=filename,
        ):
            try:
                with object_url(self.host, artifact.data, artifact.content_type) as url:
                    self.host.trigger_download(url, filename)
            except Exception as e:
                error = DistributionError(
                    DistributionErrorKind.WRITE_FAILED, f"Download failed: {e}"
                )
                return self._failed(DistributionAction.DOWNLOAD, error, invitation)

            return self._report(
                DistributionResult(
                    action=DistributionAction.DOWNLOAD,
                    status=DistributionStatus.SUCCEEDED,
                    method=DistributionMethod.DOWNLOAD,
                    filename=filename,
                )
            )

    async def _share(
        self, invitation: Invitation, artifact: Artifact, capabilities: Capabilities
    ) -> DistributionMethod:
        if not capabilities.native_share:
            raise DistributionError(
                DistributionErrorKind.UNSUPPORTED, "Native share is not available"
            )

        if capabilities.native_file_share:
            file_data = ShareData(
                title=invitation.title,
                text=invitation.description,
                files=(
                    ShareFile(
                        filename=download_filename(
                            invitation.name, artifact.format.extension
                        ),
                        content_type=artifact.content_type,
                        data=artifact.data,
                    ),
                ),
            )
            try:
                if self.host.can_share(file_data):
                    await self.host.share(file_data)
                    return DistributionMethod.FILE_SHARE
            except ShareAbortedError:
                raise
            except HostError as e:
                logfire.warn(
                    "File share rejected, falling back to text",
                    invitation_id=str(invitation.id),
                    error=str(e),
                )

        text_data = ShareData(title=invitation.title, text=invitation.description)
        try:
            await self.host.share(text_data)
        except ShareAbortedError:
            raise
        except HostError as e:
            raise DistributionError(
                DistributionErrorKind.UNSUPPORTED, f"Share rejected: {e}"
            ) from e
        return DistributionMethod.TEXT_SHARE

    def _failed(
        self,
        action: DistributionAction,
        error: DistributionError,
        invitation: Invitation,
    ) -> DistributionResult:
        logfire.warn(
            "Distribution failed",
            action=action.value,
            invitation_id=str(invitation.id),
            error_kind=error.kind.value,
            error=str(error),
        )
        return self._report(
            DistributionResult(
                action=action,
                status=DistributionStatus.FAILED,
                error_kind=error.kind,
                message=str(error),
            )
        )

    def _report(self, result: DistributionResult) -> DistributionResult:
        """Notify the user; cancellations stay silent."""
        if result.status == DistributionStatus.SUCCEEDED:
            self.notifier.success(_SUCCESS_TITLES[result.action], result.filename)
        elif result.status == DistributionStatus.FAILED:
            self.notifier.error(_FAILURE_TITLES[result.action], result.message)
        return result

"""Domain services."""

from .artifact_compositor import ArtifactCompositor
from .artifact_service import ArtifactService
from .base import Service
from .capability_detector import CapabilityDetector
from .distribution_dispatcher import DistributionDispatcher, download_filename
from .host import ShareData, ShareFile, ShareHost
from .invitation_service import InvitationService
from .notifier import Notification, NotificationLevel, Notifier
from .token_encoder import TokenEncoder

__all__ = [
    "ArtifactCompositor",
    "ArtifactService",
    "CapabilityDetector",
    "DistributionDispatcher",
    "InvitationService",
    "Notification",
    "NotificationLevel",
    "Notifier",
    "Service",
    "ShareData",
    "ShareFile",
    "ShareHost",
    "TokenEncoder",
    "download_filename",
]

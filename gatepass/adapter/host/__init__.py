"""Host environment adapters."""

from .local import LocalHost
from .mock import MockHost

__all__ = [
    "LocalHost",
    "MockHost",
]

"""Infrastructure providers."""

# Import bases
from .host import HostProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .host import ProdHostProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "HostProvider",
    "PersistenceProvider",
    "ProdHostProvider",
    "ProdPersistenceProvider",
]

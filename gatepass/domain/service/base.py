"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services keep no per-render state: everything about one invitation
    travels through arguments and return values. Caches of immutable
    resources, such as loaded fonts, are allowed.
    """

    pass

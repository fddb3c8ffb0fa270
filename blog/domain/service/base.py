"""Base class for domain services."""


class Service:
    """Marker base class for domain services."""

    pass

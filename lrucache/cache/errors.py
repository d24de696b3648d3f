"""Exceptions raised by the cache package."""


class InvalidArgument(ValueError):
    """Raised when an LRUCache is constructed with an unusable capacity."""

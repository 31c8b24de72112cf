"""Exceptions raised by the edge image engine."""

from __future__ import annotations


class EdgeImagesError(Exception):
    """Base exception for all engine failures."""
    pass


class InvalidSourceURL(EdgeImagesError):
    """Raised when a source URL is empty, unparsable or has no path."""

    def __init__(self, url: str, reason: str = "no path component"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid source URL {url!r}: {reason}")


class InvalidDimension(EdgeImagesError):
    """Raised when a width or height is not a positive integer."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive integer, got {value!r}")


class InvalidTransform(EdgeImagesError):
    """Raised when a transform parameter is not understood."""
    pass


class ConfigError(EdgeImagesError):
    """Raised when an EngineConfig fails validation."""
    pass


class UnknownSize(EdgeImagesError):
    """Raised when a named size cannot be resolved."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown image size: {name}")

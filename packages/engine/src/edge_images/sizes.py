"""
Named image sizes.

A size name ("thumbnail", "content", ...) maps to a factory that turns
a source and a render context into a TransformRequest. Registries are
built once at configuration time; lookups are plain dict access.
"""

from __future__ import annotations

import logging
from typing import Callable, Union

from .context import RenderContext
from .errors import UnknownSize
from .models import ImageSource, TransformRequest

logger = logging.getLogger(__name__)

SizeFactory = Callable[[ImageSource, RenderContext], TransformRequest]
SizeKey = Union[str, tuple[int, int]]

FALLBACK_SIZE = "large"


def fixed_size(width: int, height: int | None = None, crop: bool = False) -> SizeFactory:
    """Factory for a fixed box; crop=True fills the box instead of fitting in it."""
    fit = "cover" if crop else "contain"

    def factory(source: ImageSource, context: RenderContext) -> TransformRequest:
        return TransformRequest(width=width, height=height, fit=fit)

    return factory


def content_size(source: ImageSource, context: RenderContext) -> TransformRequest:
    """As wide as the content column allows, keeping the source's ratio."""
    width = context.ceiling
    if source.intrinsic_width:
        width = min(width, source.intrinsic_width)
    return TransformRequest(width=width, height=source.height_for(width))


def full_size(source: ImageSource, context: RenderContext) -> TransformRequest:
    """The source at its own size, capped at the ladder maximum."""
    width = source.intrinsic_width or context.config.width_max
    width = min(width, context.config.width_max)
    return TransformRequest(width=width, height=source.height_for(width))


DEFAULT_SIZES: dict[str, SizeFactory] = {
    "thumbnail": fixed_size(150, 150, crop=True),
    "medium": fixed_size(300, 300),
    "large": fixed_size(1024, 1024),
    "content": content_size,
    "full": full_size,
}


class SizeRegistry:
    """Maps size names to request factories."""

    def __init__(self, sizes: dict[str, SizeFactory] | None = None, fallback: str = FALLBACK_SIZE):
        self._sizes: dict[str, SizeFactory] = dict(DEFAULT_SIZES if sizes is None else sizes)
        self.fallback = fallback

    def register(self, name: str, factory: SizeFactory) -> None:
        """Add a size, replacing any existing one with the same name."""
        if name in self._sizes:
            logger.info("Overriding image size %s", name)
        self._sizes[name] = factory

    def __contains__(self, name: object) -> bool:
        return name in self._sizes

    def names(self) -> list[str]:
        return sorted(self._sizes)

    def get(self, name: str) -> SizeFactory:
        """
        Look up a size, falling back to the fallback size for unknown names.

        Raises UnknownSize: If neither the name nor the fallback is registered
        """
        factory = self._sizes.get(name)
        if factory is not None:
            return factory
        factory = self._sizes.get(self.fallback)
        if factory is None:
            raise UnknownSize(name)
        logger.debug("Unknown size %s, using %s", name, self.fallback)
        return factory

    def request_for(self, size: SizeKey, source: ImageSource, context: RenderContext) -> TransformRequest:
        """Build the request for a size name or an explicit (width, height) pair."""
        if isinstance(size, tuple):
            width, height = size
            return TransformRequest(width=width, height=height or None)
        return self.get(size)(source, context)

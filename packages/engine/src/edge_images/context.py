"""
Per-render state for the engine.

The content-width ceiling is the one value the engine caches between
calls. It lives on a RenderContext owned by whoever drives a render
(one per HTTP request in the service) and is dropped with it.
"""

from __future__ import annotations

import logging

from .config import DEFAULT_CONFIG, EngineConfig
from .errors import InvalidDimension
from .models import ContentWidthConstraint, ImageSource, TransformRequest
from .transform import SrcsetLadder, build_default_srcset_ladder, build_request_srcset_ladder

logger = logging.getLogger(__name__)


def _check_override(override: int | None) -> int | None:
    if override is not None and (isinstance(override, bool) or not isinstance(override, int) or override < 0):
        raise InvalidDimension("content_width", override)
    return override


def resolve_content_width_ceiling(
    override: int | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> int:
    """
    Pick the content width ceiling.

    An override is honoured when it's set and no wider than
    config.content_width; anything else falls back to content_width.
    """
    if not override or override > config.content_width:
        return config.content_width
    return override


class RenderContext:
    """State scoped to a single render or request."""

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG, content_width: int | None = None):
        self.config = config
        self._override = _check_override(content_width)
        self._ceiling: int | None = None

    def resolve_content_width_ceiling(self, override: int | None = None) -> int:
        """
        Resolve the ceiling once and reuse it for the rest of the render.

        The first call wins; later calls return the cached value until
        reset() is called.

        Raises InvalidDimension: If the override is negative
        """
        _check_override(override)
        if self._ceiling is None:
            if override is None:
                override = self._override
            self._ceiling = resolve_content_width_ceiling(override, self.config)
            logger.debug("Content width ceiling resolved to %d", self._ceiling)
        return self._ceiling

    @property
    def ceiling(self) -> int:
        return self.resolve_content_width_ceiling()

    @property
    def constraint(self) -> ContentWidthConstraint:
        return ContentWidthConstraint(self.ceiling)

    def srcset_ladder(self, source: ImageSource, request: TransformRequest | None = None) -> SrcsetLadder:
        """Ladder for `source` under this context's ceiling, shaped like `request` if given."""
        if request is None:
            return build_default_srcset_ladder(source, self.constraint, self.config)
        return build_request_srcset_ladder(source, request, self.constraint, self.config)

    def reset(self, content_width: int | None = None) -> None:
        """Forget the cached ceiling, e.g. at the start of a new request."""
        self._override = _check_override(content_width)
        self._ceiling = None

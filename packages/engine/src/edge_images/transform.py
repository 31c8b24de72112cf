"""
Edge provider URL and srcset construction.

Builds resized-image URLs of the form

    <provider prefix><k1=v1>%2C<k2=v2>...<source path>

with parameter keys in ascending order, and srcset ladders made of
those URLs. Every function here is pure: identical inputs give
byte-identical output.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterator, Mapping
from urllib.parse import quote_plus, urlsplit

from .config import DEFAULT_CONFIG, EngineConfig
from .errors import InvalidDimension, InvalidSourceURL
from .models import (
    ContentWidthConstraint,
    Dimensions,
    ImageSource,
    SrcsetEntry,
    TransformedURL,
    TransformRequest,
    round_half_up,
)

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_positive(name: str, value: Any) -> int:
    if not _is_int(value) or value <= 0:
        raise InvalidDimension(name, value)
    return value


def source_path(url: str) -> str:
    """
    Return only the path of a source URL.

    Scheme, host, query and fragment are dropped.

    Raises InvalidSourceURL: If the URL can't be parsed or has no path
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidSourceURL(str(url), "empty URL")
    try:
        path = urlsplit(url.strip()).path
    except ValueError as e:
        raise InvalidSourceURL(url, str(e)) from e
    if not path or path == "/":
        raise InvalidSourceURL(url)
    if not path.startswith("/"):
        path = "/" + path
    return path


def _encode_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        value = ",".join(str(v) for v in value)
    return quote_plus(str(value))


def encode_params(params: Mapping[str, Any]) -> tuple[tuple[str, str], ...]:
    """Sort parameters by key and percent-encode keys and values."""
    return tuple(
        (quote_plus(str(key)), _encode_value(params[key]))
        for key in sorted(params)
    )


def build_transformed_url(
    source: ImageSource,
    request: TransformRequest,
    config: EngineConfig = DEFAULT_CONFIG,
) -> TransformedURL:
    """
    Build the provider URL for one rendition of `source`.

    Raises:
        InvalidSourceURL: If the source URL has no usable path
        InvalidDimension: If width is not positive or height is negative
    """
    _require_positive("width", request.width)
    if request.height is not None and (not _is_int(request.height) or request.height < 0):
        raise InvalidDimension("height", request.height)

    path = source_path(source.url)
    query = encode_params(request.params())
    return TransformedURL(provider_prefix=config.provider_prefix, query=query, path=path)


def cf_src(
    url: str,
    width: int,
    height: int | None = None,
    fit: str = "contain",
    config: EngineConfig = DEFAULT_CONFIG,
) -> str:
    """Shortcut returning the provider URL for a bare source URL as a string."""
    request = TransformRequest(width=width, height=height, fit=fit)  # type: ignore[arg-type]
    return str(build_transformed_url(ImageSource(url), request, config))


def build_srcset_entry(
    source: ImageSource,
    width: int,
    height: int | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> SrcsetEntry:
    """Build one `<url> <width>w` srcset candidate with fit=contain."""
    request = TransformRequest(width=width, height=height, fit="contain")
    return SrcsetEntry(url=build_transformed_url(source, request, config), descriptor_width=width)


def ladder_widths(source: ImageSource, config: EngineConfig = DEFAULT_CONFIG) -> list[int]:
    """
    Widths for the default srcset ladder.

    Starts at width_min and steps by width_step, stopping at the lesser
    of width_max and the intrinsic width. An image narrower than
    width_min gets a single entry at its own width.
    """
    intrinsic = source.intrinsic_width
    if intrinsic is not None and (not _is_int(intrinsic) or intrinsic < 0):
        raise InvalidDimension("intrinsic_width", intrinsic)
    height = source.intrinsic_height
    if height is not None and (not _is_int(height) or height < 0):
        raise InvalidDimension("intrinsic_height", height)

    upper = config.width_max
    if intrinsic:
        if intrinsic < config.width_min:
            return [intrinsic]
        upper = min(upper, intrinsic)
    return list(range(config.width_min, upper + 1, config.width_step))


class SrcsetLadder:
    """
    Responsive srcset candidates for one source.

    Iterating regenerates the entries each time, so a ladder can be
    walked more than once without side effects.

    Without a request, candidates use fit=contain and the source's
    aspect ratio. With one, they keep the request's fit and, when it
    has a height, its width/height ratio; the request's own width is
    added when it falls below the first ladder width.
    """

    def __init__(
        self,
        source: ImageSource,
        constraint: ContentWidthConstraint | None = None,
        config: EngineConfig = DEFAULT_CONFIG,
        request: TransformRequest | None = None,
    ):
        self.source = source
        self.constraint = constraint or ContentWidthConstraint(config.content_width)
        self.config = config
        self.request = request
        self._widths = ladder_widths(source, config)
        if request is not None:
            _require_positive("width", request.width)
            if request.width < self._widths[0]:
                self._widths.insert(0, request.width)
        # Fail here rather than half way through an iteration.
        source_path(source.url)

    def _height_for(self, width: int) -> int | None:
        if self.request is not None and self.request.height:
            return round_half_up(width * self.request.height / self.request.width)
        return self.source.height_for(width)

    def __iter__(self) -> Iterator[SrcsetEntry]:
        for width in self._widths:
            height = self._height_for(width)
            if self.request is None:
                yield build_srcset_entry(self.source, width, height, self.config)
                continue
            request = replace(self.request, width=width, height=height)
            yield SrcsetEntry(build_transformed_url(self.source, request, self.config), width)

    def __len__(self) -> int:
        return len(self._widths)

    @property
    def widths(self) -> list[int]:
        return list(self._widths)

    @property
    def display_width(self) -> int:
        """Width the image renders at inside the content column."""
        intrinsic = self.source.intrinsic_width
        if intrinsic:
            return min(self.constraint.max_width, intrinsic)
        return self.constraint.max_width

    @property
    def sizes(self) -> str:
        return sizes_value(self.display_width)

    def __str__(self) -> str:
        return srcset_value(self)


def build_default_srcset_ladder(
    source: ImageSource,
    constraint: ContentWidthConstraint | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> SrcsetLadder:
    """Build the default ladder for `source` (see SrcsetLadder)."""
    ladder = SrcsetLadder(source, constraint, config)
    logger.debug("Srcset ladder for %s: %d widths", source.url, len(ladder))
    return ladder


def build_request_srcset_ladder(
    source: ImageSource,
    request: TransformRequest,
    constraint: ContentWidthConstraint | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> SrcsetLadder:
    """Ladder whose candidates share the fit and shape of `request`."""
    ladder = SrcsetLadder(source, constraint, config, request)
    logger.debug("Srcset ladder for %s at %s: %d widths", source.url, request.fit, len(ladder))
    return ladder


def constrain_to_content_width(
    intrinsic_width: int,
    intrinsic_height: int,
    max_width: int,
) -> Dimensions:
    """
    Scale a width/height pair down so the width fits `max_width`.

    Pairs already within the limit come back unchanged.

    Raises InvalidDimension: If intrinsic_width or max_width isn't positive
    """
    _require_positive("intrinsic_width", intrinsic_width)
    _require_positive("max_width", max_width)
    if not _is_int(intrinsic_height) or intrinsic_height < 0:
        raise InvalidDimension("intrinsic_height", intrinsic_height)

    if intrinsic_width <= max_width:
        return Dimensions(intrinsic_width, intrinsic_height)

    height = round_half_up(intrinsic_height * max_width / intrinsic_width)
    return Dimensions(max_width, height)


def srcset_value(entries) -> str:
    """Join srcset candidates into an attribute value."""
    return ", ".join(str(entry) for entry in entries)


def sizes_value(width: int) -> str:
    """`sizes` attribute value for an image rendered at most `width` wide."""
    return f"(max-width: {width}px) 100vw, {width}px"

"""
Attribute values for edge images.

Produces the strings a markup layer puts on an <img> and on the
container wrapped around it. Nothing here renders or sanitizes whole
HTML documents.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Literal

from .context import RenderContext
from .models import Dimensions, ImageSource, TransformRequest
from .sizes import SizeKey, SizeRegistry
from .transform import build_transformed_url, constrain_to_content_width, sizes_value

logger = logging.getLogger(__name__)

Layout = Literal["responsive", "fixed"]

IMG_CLASS = "edge-images-img"
CONTAINER_CLASS = "edge-images-container"
DEFAULT_RATIO = "1/1"

_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_UNSAFE_CLASS_RE = re.compile(r"[^A-Za-z0-9_-]")
_DIMENSION_ATTR_RE = re.compile(r'(width|height)="\d*"\s')


def sanitize_class(name: str) -> str:
    """Strip percent-encoded octets and anything outside [A-Za-z0-9_-]."""
    return _UNSAFE_CLASS_RE.sub("", _OCTET_RE.sub("", name))


def normalize_classes(value: str | Iterable[str] | None) -> list[str]:
    """Split a class attribute into unique names, keeping first-seen order."""
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(" ")
    seen: list[str] = []
    for name in value:
        if name and name not in seen:
            seen.append(name)
    return seen


def classes_to_string(value: str | Iterable[str] | None) -> str:
    names = (sanitize_class(name) for name in normalize_classes(value))
    return " ".join(name for name in names if name)


def strip_dimension_attributes(html: str, limit: int = 2) -> str:
    """Remove the first `limit` width="..."/height="..." attributes from markup."""
    if not html:
        return ""
    return _DIMENSION_ATTR_RE.sub("", html, count=limit)


def container_style(
    ratio: str | None = None,
    layout: Layout = "responsive",
    width: int | None = None,
    height: int | None = None,
) -> str:
    """Inline style for the container: the aspect ratio, plus max sizes when fixed."""
    styles = [f"--aspect-ratio:{ratio or DEFAULT_RATIO}"]
    if layout == "fixed":
        if width:
            styles.append(f"max-width:{width}px")
        if height:
            styles.append(f"max-height:{height}px")
    return ";".join(styles)


def size_dimensions(
    source: ImageSource,
    request: TransformRequest,
    context: RenderContext,
) -> Dimensions | None:
    """
    Box an image of this size occupies, for sizing its container.

    A request with a height defines the box itself; otherwise the source
    is scaled into the content column, if its dimensions are known.
    """
    if request.height:
        return Dimensions(request.width, request.height)
    if source.intrinsic_width and source.intrinsic_height:
        return constrain_to_content_width(
            source.intrinsic_width, source.intrinsic_height, context.ceiling
        )
    return None


def container_attributes(
    dimensions: Dimensions | None,
    layout: Layout = "responsive",
    classes: str | Iterable[str] | None = None,
    image_id: int | None = None,
) -> dict[str, str]:
    """`style` and `class` for the element wrapped around an edge image."""
    names = [CONTAINER_CLASS, *normalize_classes(classes), f"layout-{layout}"]
    if image_id:
        names.append(f"image-id-{image_id}")
    return {
        "style": container_style(
            dimensions.ratio if dimensions else None,
            layout,
            dimensions.width if dimensions else None,
            dimensions.height if dimensions else None,
        ),
        "class": classes_to_string(names),
    }


def build_image_attributes(
    source: ImageSource,
    size: SizeKey,
    context: RenderContext,
    registry: SizeRegistry | None = None,
    classes: str | Iterable[str] | None = None,
    alt: str = "",
) -> dict[str, str]:
    """
    Attributes for an <img> served through the edge provider.

    Raises the engine's errors (InvalidSourceURL, InvalidDimension, ...)
    unchanged; falling back to the untransformed image is up to the caller.
    """
    registry = registry or SizeRegistry()
    request = registry.request_for(size, source, context)
    src = build_transformed_url(source, request, context.config)
    ladder = context.srcset_ladder(source, request)

    attrs = {
        "src": str(src),
        "srcset": str(ladder),
        "sizes": sizes_value(min(request.width, ladder.display_width)),
        "width": str(request.width),
        "alt": alt,
        "class": classes_to_string([IMG_CLASS, *normalize_classes(classes)]),
        "loading": "lazy",
        "decoding": "async",
    }
    if request.height:
        attrs["height"] = str(request.height)
    logger.debug("Edge attributes for %s (%s): %s", source.url, size, attrs["src"])
    return attrs

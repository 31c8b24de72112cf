"""Transform, srcset and attribute routes."""

from __future__ import annotations

import logging

from flask import Blueprint, abort, current_app, g, jsonify, request

from edge_images import (
    ImageSource,
    TransformRequest,
    build_image_attributes,
    build_transformed_url,
    constrain_to_content_width,
    container_attributes,
    size_dimensions,
)

logger = logging.getLogger(__name__)

images_bp = Blueprint("images", __name__, url_prefix="/api")


def parse_int(value: str | None) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_str(value: str | None) -> str | None:
    return None if value is None or value == "" else value


def _require_int(name: str) -> int:
    value = parse_int(request.args.get(name))
    if value is None:
        abort(400, description=f"{name} must be an integer")
    return value


def _source_from_args() -> ImageSource:
    src = parse_str(request.args.get("src"))
    if src is None:
        abort(400, description="src is required")
    return ImageSource(
        url=src,
        intrinsic_width=parse_int(request.args.get("intrinsic_width")),
        intrinsic_height=parse_int(request.args.get("intrinsic_height")),
    )


@images_bp.get("/transform")
def transform():
    """Provider URL for one rendition."""
    source = _source_from_args()
    transform_request = TransformRequest(
        width=_require_int("width"),
        height=parse_int(request.args.get("height")),
        fit=request.args.get("fit", "contain"),
    )
    url = build_transformed_url(source, transform_request, current_app.config["engine_config"])
    return jsonify({"url": str(url), "params": url.params(), "path": url.path})


@images_bp.get("/srcset")
def srcset():
    """Default srcset ladder under this request's content width ceiling."""
    source = _source_from_args()
    ladder = g.render_context.srcset_ladder(source)
    entries = [
        {"url": str(entry.url), "width": entry.descriptor_width}
        for entry in ladder
    ]
    return jsonify({
        "srcset": str(ladder),
        "sizes": ladder.sizes,
        "entries": entries,
        "ceiling": g.render_context.ceiling,
    })


@images_bp.get("/constrain")
def constrain():
    """Scale a width/height pair into the content column."""
    max_width = parse_int(request.args.get("max_width")) or g.render_context.ceiling
    dims = constrain_to_content_width(_require_int("width"), _require_int("height"), max_width)
    return jsonify(dims.as_dict())


@images_bp.get("/attributes")
def attributes():
    """<img> and container attributes for a named size."""
    source = _source_from_args()
    size = request.args.get("size", "content")
    layout = request.args.get("layout", "responsive")
    if layout not in ("responsive", "fixed"):
        abort(400, description="layout must be responsive or fixed")

    registry = current_app.config["size_registry"]
    img = build_image_attributes(
        source,
        size,
        g.render_context,
        registry,
        classes=request.args.get("class"),
        alt=request.args.get("alt", ""),
    )

    size_request = registry.request_for(size, source, g.render_context)
    dims = size_dimensions(source, size_request, g.render_context)
    container = container_attributes(
        dims,
        layout,
        classes=request.args.get("container_class"),
        image_id=parse_int(request.args.get("id")),
    )
    return jsonify({"img": img, "container": container})

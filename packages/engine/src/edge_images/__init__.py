"""
Edge Images engine.

Turns image sources into edge-provider resize URLs
(https://<host>/cdn-cgi/image/<params>/<path>) and responsive
srcset ladders, plus the attribute values built from them.

Deployment:
    pip install edge-images

This package has no web dependencies. Pillow is only used to probe
local files for their dimensions.
"""

from .attributes import (
    build_image_attributes,
    classes_to_string,
    container_attributes,
    container_style,
    normalize_classes,
    size_dimensions,
    strip_dimension_attributes,
)
from .config import (
    CONTENT_WIDTH,
    DEFAULT_CONFIG,
    WIDTH_MAX,
    WIDTH_MIN,
    WIDTH_STEP,
    EngineConfig,
)
from .context import RenderContext, resolve_content_width_ceiling
from .errors import (
    ConfigError,
    EdgeImagesError,
    InvalidDimension,
    InvalidSourceURL,
    InvalidTransform,
    UnknownSize,
)
from .models import (
    ContentWidthConstraint,
    Dimensions,
    ImageSource,
    SrcsetEntry,
    TransformedURL,
    TransformRequest,
)
from .probe import image_source_from_file, probe_dimensions
from .sizes import SizeRegistry
from .transform import (
    SrcsetLadder,
    build_default_srcset_ladder,
    build_request_srcset_ladder,
    build_srcset_entry,
    build_transformed_url,
    cf_src,
    constrain_to_content_width,
    sizes_value,
    srcset_value,
)

__all__ = [
    # Config
    "CONTENT_WIDTH",
    "WIDTH_MIN",
    "WIDTH_MAX",
    "WIDTH_STEP",
    "DEFAULT_CONFIG",
    "EngineConfig",
    # Errors
    "EdgeImagesError",
    "InvalidSourceURL",
    "InvalidDimension",
    "InvalidTransform",
    "ConfigError",
    "UnknownSize",
    # Models
    "ImageSource",
    "TransformRequest",
    "TransformedURL",
    "SrcsetEntry",
    "ContentWidthConstraint",
    "Dimensions",
    # Transform
    "build_transformed_url",
    "build_srcset_entry",
    "build_default_srcset_ladder",
    "build_request_srcset_ladder",
    "constrain_to_content_width",
    "cf_src",
    "SrcsetLadder",
    "srcset_value",
    "sizes_value",
    # Context
    "RenderContext",
    "resolve_content_width_ceiling",
    # Sizes
    "SizeRegistry",
    # Attributes
    "build_image_attributes",
    "container_attributes",
    "container_style",
    "size_dimensions",
    "normalize_classes",
    "classes_to_string",
    "strip_dimension_attributes",
    # Probe
    "probe_dimensions",
    "image_source_from_file",
]

"""
Intrinsic dimension lookup for local image files.

Raster images are measured with Pillow. SVGs report whatever their
width/height attributes say, falling back to the viewBox.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from .models import Dimensions, ImageSource

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"\d+")


def _svg_length(value: str | None) -> int | None:
    if not value:
        return None
    match = _NUMBER_RE.search(value)
    return int(match.group(0)) if match else None


def svg_dimensions(path: Path) -> Dimensions | None:
    """Read width/height from an SVG root element, or its viewBox."""
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        logger.warning("Unreadable SVG %s: %s", path, e)
        return None

    width = _svg_length(root.get("width"))
    height = _svg_length(root.get("height"))

    viewbox = re.split(r"[\s,]+", (root.get("viewBox") or "").strip())
    if len(viewbox) == 4:
        try:
            width = width or int(float(viewbox[2]))
            height = height or int(float(viewbox[3]))
        except ValueError:
            pass

    if not width or not height:
        return None
    return Dimensions(width, height)


def raster_dimensions(path: Path) -> Dimensions | None:
    """Size of a raster image as displayed, after EXIF orientation."""
    try:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            width, height = img.size
    except UnidentifiedImageError:
        logger.warning("Not an image: %s", path)
        return None
    return Dimensions(width, height)


def probe_dimensions(path: Path) -> Dimensions | None:
    """
    Return the intrinsic size of an image file, or None if unknown.

    Raises FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Image not found: {path}")

    if path.suffix.lower() == ".svg":
        dims = svg_dimensions(path)
    else:
        dims = raster_dimensions(path)

    if dims is not None:
        logger.debug("Probed %s: %dx%d", path.name, dims.width, dims.height)
    return dims


def image_source_from_file(url: str, path: Path) -> ImageSource:
    """ImageSource for `url` with dimensions read from the local copy at `path`."""
    dims = probe_dimensions(path)
    if dims is None:
        return ImageSource(url)
    return ImageSource(url, dims.width, dims.height)

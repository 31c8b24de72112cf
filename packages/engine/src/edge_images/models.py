"""
Value types for the edge image engine.

Everything here is frozen: values are built, turned into strings and
discarded within one render.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, get_args

from .config import CONTENT_WIDTH
from .errors import InvalidTransform

Fit = Literal["contain", "cover", "scale-down", "crop", "pad"]
FIT_MODES: frozenset[str] = frozenset(get_args(Fit))

# Separator between key=value pairs in the provider path segment.
PARAM_SEPARATOR = "%2C"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


@dataclass(frozen=True)
class ImageSource:
    """An image as the host knows it: a URL and, maybe, its pixel size."""
    url: str
    intrinsic_width: int | None = None
    intrinsic_height: int | None = None

    @property
    def aspect_ratio(self) -> float | None:
        """Width over height, or None when either dimension is unknown."""
        if not self.intrinsic_width or not self.intrinsic_height:
            return None
        return self.intrinsic_width / self.intrinsic_height

    def height_for(self, width: int) -> int | None:
        """Height matching `width` at the source's aspect ratio."""
        if self.aspect_ratio is None:
            return None
        return round_half_up(width * self.intrinsic_height / self.intrinsic_width)


@dataclass(frozen=True)
class TransformRequest:
    """One desired rendition of an image."""
    width: int
    height: int | None = None
    fit: Fit = "contain"
    format: str = "auto"
    gravity: str = "auto"
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.fit not in FIT_MODES:
            raise InvalidTransform(
                f"Unknown fit mode {self.fit!r}; expected one of {sorted(FIT_MODES)}"
            )

    def params(self) -> dict[str, Any]:
        """Provider parameters for this request, unsorted."""
        params: dict[str, Any] = dict(self.extra)
        params.update({
            "width": self.width,
            "fit": self.fit,
            "f": self.format,
            "gravity": self.gravity,
            "onerror": "redirect",
        })
        # A height of 0 means "no height", same as None.
        if self.height:
            params["height"] = self.height
        return params


@dataclass(frozen=True)
class TransformedURL:
    """A provider URL split into prefix, sorted query pairs and source path."""
    provider_prefix: str
    query: tuple[tuple[str, str], ...]
    path: str

    @property
    def query_string(self) -> str:
        return PARAM_SEPARATOR.join(f"{key}={value}" for key, value in self.query)

    def params(self) -> dict[str, str]:
        return dict(self.query)

    def __str__(self) -> str:
        return f"{self.provider_prefix}{self.query_string}{self.path}"


@dataclass(frozen=True)
class SrcsetEntry:
    """One candidate in a srcset attribute."""
    url: TransformedURL
    descriptor_width: int

    def __str__(self) -> str:
        return f"{self.url} {self.descriptor_width}w"


@dataclass(frozen=True)
class ContentWidthConstraint:
    """The widest the surrounding layout lets an image render."""
    max_width: int = CONTENT_WIDTH


@dataclass(frozen=True)
class Dimensions:
    width: int
    height: int

    @property
    def ratio(self) -> str:
        """CSS aspect-ratio value in lowest terms, e.g. "3/2"."""
        divisor = math.gcd(self.width, self.height) or 1
        return f"{self.width // divisor}/{self.height // divisor}"

    def as_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}

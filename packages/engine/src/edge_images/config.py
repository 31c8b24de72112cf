"""Engine configuration.

The engine reads nothing from the environment; callers build an
EngineConfig (or use the defaults) and pass it in explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .errors import ConfigError

CONTENT_WIDTH = 600
WIDTH_MIN = 400
WIDTH_MAX = 2400
WIDTH_STEP = 100

DEFAULT_PROVIDER_HOST = "https://example.com"
DEFAULT_PROVIDER_PATH = "/cdn-cgi/image/"


@dataclass(frozen=True)
class EngineConfig:
    """
    Provider location and srcset ladder constants.

    provider_host: scheme and host of the edge provider
    provider_path: path the provider serves transforms under
    content_width: ceiling for the rendered content width, in pixels
    width_min / width_max / width_step: bounds and step of the default ladder
    """

    provider_host: str = DEFAULT_PROVIDER_HOST
    provider_path: str = DEFAULT_PROVIDER_PATH
    content_width: int = CONTENT_WIDTH
    width_min: int = WIDTH_MIN
    width_max: int = WIDTH_MAX
    width_step: int = WIDTH_STEP

    @property
    def provider_prefix(self) -> str:
        """Host and transform path, always ending in a slash."""
        path = "/" + self.provider_path.strip("/") + "/"
        return self.provider_host.rstrip("/") + path

    def validate(self) -> EngineConfig:
        """Check the numeric fields, returning self so calls can chain."""
        for name in ("content_width", "width_min", "width_max", "width_step"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if self.width_min > self.width_max:
            raise ConfigError(
                f"width_min ({self.width_min}) exceeds width_max ({self.width_max})"
            )
        if not self.provider_host:
            raise ConfigError("provider_host is required")
        return self

    def with_host(self, provider_host: str) -> EngineConfig:
        return replace(self, provider_host=provider_host)


DEFAULT_CONFIG = EngineConfig()

"""Service HTTP routes."""

from .images import images_bp, parse_int, parse_str

__all__ = ["images_bp", "parse_int", "parse_str"]

"""Build configuration."""

from .settings import BuildSettings, load_settings

__all__ = ["BuildSettings", "load_settings"]

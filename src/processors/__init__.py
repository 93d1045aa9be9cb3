"""Site build orchestration."""

from .site_builder import ComicPreview, ComicSourceError, SiteBuilder

__all__ = ["ComicPreview", "ComicSourceError", "SiteBuilder"]

"""Console progress reporting."""

from .tracker import BuildTracker, ComicProgressContext

__all__ = ["BuildTracker", "ComicProgressContext"]

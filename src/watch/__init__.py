"""Filesystem watch trigger."""

from .watcher import RebuildHandler, watch

__all__ = ["RebuildHandler", "watch"]

"""Data models for the comic site builder."""

from .build import BuildResult
from .comic import CaptionKind, Comic, Panel

__all__ = ["BuildResult", "CaptionKind", "Comic", "Panel"]

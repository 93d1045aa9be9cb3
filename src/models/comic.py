"""Comic and panel data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CaptionKind(str, Enum):
    """How a panel caption is presented."""

    QUOTE = "quote"
    NARRATION = "narration"


@dataclass
class Panel:
    """A single image and caption unit within a comic."""

    caption: str
    caption_kind: CaptionKind
    image_path: str | None = None


@dataclass
class Comic:
    """One dated installment composed of ordered panels."""

    title: str = ""
    panels: list[Panel] = field(default_factory=list)

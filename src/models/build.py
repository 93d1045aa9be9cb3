"""Build result data model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BuildResult:
    """Result of a single site build."""

    built: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.built) + len(self.failed)

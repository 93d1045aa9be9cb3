"""Shared fixtures for the comic site builder tests."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from src.config.settings import BuildSettings

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def console() -> Console:
    """A console that writes to memory instead of the terminal."""
    return Console(file=io.StringIO(), width=120, force_terminal=False)


def write_comic(source_dir: Path, name: str, markdown: str, images: list[str] | None = None) -> Path:
    folder = source_dir / name
    folder.mkdir(parents=True, exist_ok=True)
    _ = (folder / "comic.md").write_text(markdown, encoding="utf-8")
    for image in images or []:
        image_path = folder / image
        image_path.parent.mkdir(parents=True, exist_ok=True)
        _ = image_path.write_bytes(PNG_BYTES)
    return folder


@pytest.fixture
def site(tmp_path: Path) -> Callable[..., BuildSettings]:
    """Factory that lays out a source tree and returns settings pointing at it."""

    def make_site(dates_yaml: str, comics: dict[str, tuple[str, list[str]]] | None = None) -> BuildSettings:
        source_dir = tmp_path / "comics"
        source_dir.mkdir(exist_ok=True)
        _ = (source_dir / "dates.yaml").write_text(dates_yaml, encoding="utf-8")
        for name, (markdown, images) in (comics or {}).items():
            _ = write_comic(source_dir, name, markdown, images)

        stylesheet = tmp_path / "style.css"
        _ = stylesheet.write_text("body { color: black; }\n", encoding="utf-8")

        return BuildSettings(
            source_dir=source_dir,
            output_dir=tmp_path / "built",
            stylesheet=stylesheet,
        )

    return make_site

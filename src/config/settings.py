"""Build configuration loaded from the environment and command line."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_SOURCE_DIR = Path("comics")
DEFAULT_OUTPUT_DIR = Path("built")
DEFAULT_STYLESHEET = Path("style.css")
DEFAULT_DATES_FILENAME = "dates.yaml"
DEFAULT_SITE_TITLE = "Comics"


@dataclass
class BuildSettings:
    """Resolved settings for a site build."""

    source_dir: Path = DEFAULT_SOURCE_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    stylesheet: Path = DEFAULT_STYLESHEET
    dates_filename: str = DEFAULT_DATES_FILENAME
    site_title: str = DEFAULT_SITE_TITLE

    @property
    def dates_file(self) -> Path:
        """Path to the date index inside the source directory."""
        return self.source_dir / self.dates_filename


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    return Path(value) if value else default


def load_settings(
    source_dir: Path | None = None,
    output_dir: Path | None = None,
    stylesheet: Path | None = None,
    dates_filename: str | None = None,
    site_title: str | None = None,
) -> BuildSettings:
    """
    Resolve build settings.

    Explicit arguments win over ``COMIC_*`` environment variables (also
    read from a ``.env`` file), which win over the built-in defaults.

    Args:
        source_dir: Directory holding the date index and comic folders
        output_dir: Directory the site is written to
        stylesheet: Stylesheet copied into the output directory
        dates_filename: Name of the date index file inside the source directory
        site_title: Site name shown on every page

    Returns:
        BuildSettings: The resolved settings
    """
    _ = load_dotenv()

    return BuildSettings(
        source_dir=source_dir or _env_path("COMIC_SOURCE_DIR", DEFAULT_SOURCE_DIR),
        output_dir=output_dir or _env_path("COMIC_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        stylesheet=stylesheet or _env_path("COMIC_STYLESHEET", DEFAULT_STYLESHEET),
        dates_filename=dates_filename or os.getenv("COMIC_DATES_FILE") or DEFAULT_DATES_FILENAME,
        site_title=site_title or os.getenv("COMIC_SITE_TITLE") or DEFAULT_SITE_TITLE,
    )

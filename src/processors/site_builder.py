"""Main site build orchestration."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import final

from rich.console import Console

from src.config.settings import BuildSettings
from src.generators.comic_page import (
    ASSETS_DIRNAME,
    STYLESHEET_NAME,
    ComicPageGenerator,
    local_image_path,
    page_filename,
)
from src.generators.index_page import generate_index_page
from src.models.build import BuildResult
from src.models.comic import Comic
from src.parsers.comic_parser import parse_comic
from src.parsers.date_index import load_date_index
from src.parsers.image_collector import collect_image_files
from src.progress.tracker import BuildTracker

COMIC_FILENAME = "comic.md"
INDEX_FILENAME = "index.html"


class ComicSourceError(OSError):
    """Raised when a comic folder or its markdown cannot be read."""


@dataclass
class ComicPreview:
    """What a dry run found for one date."""

    date: str
    comic_name: str
    panel_count: int | None
    error: str | None = None


@final
class SiteBuilder:
    """Main orchestrator for building the static comic site."""

    def __init__(
        self,
        settings: BuildSettings | None = None,
        console: Console | None = None,
        verbose: bool = False,
    ) -> None:
        """Initialize the site builder.

        Args:
            settings: Resolved build settings
            console: Rich console instance
            verbose: Whether debug output is shown
        """
        self.settings = settings or BuildSettings()
        self.console = console or Console()

        # Initialize components
        self.tracker = BuildTracker(self.console, verbose=verbose)
        self.page_generator = ComicPageGenerator(self.settings.site_title)

    @property
    def assets_dir(self) -> Path:
        return self.settings.output_dir / ASSETS_DIRNAME

    def load_comic(self, comic_name: str) -> tuple[Comic, list[str]]:
        """Read and parse the markdown for one comic folder.

        Args:
            comic_name: Comic folder name inside the source directory

        Returns:
            Tuple of (comic, parser warnings)

        Raises:
            ComicSourceError: If the folder or its markdown cannot be read
        """
        comic_folder = self.settings.source_dir / comic_name
        if not comic_folder.is_dir():
            raise ComicSourceError(f"Comic folder not found: {comic_folder}")

        comic_file = comic_folder / COMIC_FILENAME
        try:
            markdown = comic_file.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ComicSourceError(f"Comic file not found: {comic_file}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ComicSourceError(f"Could not read comic file {comic_file}: {e}") from e

        return parse_comic(markdown, source=str(comic_file))

    def referenced_images(self, comic: Comic, comic_name: str) -> dict[str, Path]:
        """Map each local image reference of a comic to its source file path."""
        comic_folder = self.settings.source_dir / comic_name
        references: dict[str, Path] = {}
        for panel in comic.panels:
            if panel.image_path is None:
                continue
            relative = local_image_path(panel.image_path)
            if relative is not None:
                references[panel.image_path] = comic_folder / relative
        return references

    def find_missing_images(self, comic: Comic, comic_name: str) -> list[str]:
        """List image paths referenced by a comic that do not exist on disk."""
        return [
            image_path
            for image_path, source in self.referenced_images(comic, comic_name).items()
            if not source.is_file()
        ]

    def prepare_output_dir(self) -> None:
        """Create the output and asset directories."""
        self.assets_dir.mkdir(parents=True, exist_ok=True)
        self.tracker.display_debug(f"Output directory ready: {self.settings.output_dir}")

    def copy_stylesheet(self, result: BuildResult) -> None:
        """Copy the stylesheet into the output directory verbatim.

        Args:
            result: Build result that receives a warning if the stylesheet is missing
        """
        stylesheet = self.settings.stylesheet
        if not stylesheet.is_file():
            message = f"Stylesheet not found: {stylesheet}"
            result.warnings.append(message)
            self.tracker.display_warning(message)
            return

        _ = shutil.copyfile(stylesheet, self.settings.output_dir / STYLESHEET_NAME)
        self.tracker.display_debug(f"Copied stylesheet {stylesheet}")

    def copy_comic_images(self, comic_name: str, comic: Comic | None = None) -> int:
        """Copy the images of a comic folder into the output asset directory.

        Every image file in the folder is copied, plus any file the comic
        references whatever its extension.

        Args:
            comic_name: Comic folder name inside the source directory
            comic: Parsed comic whose referenced files are copied too

        Returns:
            Number of images copied
        """
        comic_folder = self.settings.source_dir / comic_name
        target_folder = self.assets_dir / comic_name

        relative_paths = [
            image_file.relative_to(comic_folder)
            for image_file in collect_image_files(comic_folder, recursive=True)
        ]
        if comic is not None:
            for source in self.referenced_images(comic, comic_name).values():
                relative = source.relative_to(comic_folder)
                # References may not reach outside the comic folder
                if ".." in relative.parts or relative in relative_paths:
                    continue
                if source.is_file():
                    relative_paths.append(relative)

        for relative in relative_paths:
            target = target_folder / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = shutil.copyfile(comic_folder / relative, target)

        return len(relative_paths)

    def write_file(self, path: Path, content: str) -> None:
        """Write a generated document with stable UTF-8 encoding and newlines."""
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            _ = f.write(content)

    def build_comic(self, date: str, comic_name: str, dates: list[str], result: BuildResult) -> None:
        """Build the page for a single date.

        Args:
            date: Publication date
            comic_name: Comic folder name for that date
            dates: All dates, sorted ascending
            result: Build result collecting warnings

        Raises:
            ComicSourceError: If the comic source cannot be read
            OSError: If assets or the page cannot be written
        """
        comic, warnings = self.load_comic(comic_name)

        for image_path in self.find_missing_images(comic, comic_name):
            warnings.append(f"{date}: image {image_path} not found in {comic_name}")

        for warning in warnings:
            result.warnings.append(warning)
            self.tracker.display_warning(warning)

        copied = self.copy_comic_images(comic_name, comic)
        html = self.page_generator.generate_page(date, comic, comic_name, dates)
        self.write_file(self.settings.output_dir / page_filename(date), html)

        self.tracker.display_debug(
            f"Built {page_filename(date)}: {len(comic.panels)} panels, {copied} images"
        )

    def write_index_page(self, dates: list[str]) -> None:
        """Write the index page redirecting to the most recent comic."""
        if not dates:
            self.tracker.display_warning("Date index is empty, writing placeholder index page")
        html = generate_index_page(dates, self.settings.site_title)
        self.write_file(self.settings.output_dir / INDEX_FILENAME, html)

    def build(self) -> BuildResult:
        """Build the whole site.

        Returns:
            BuildResult: Dates built, dates failed and warnings raised

        Raises:
            DateIndexError: If the date index cannot be loaded
        """
        result = BuildResult()

        date_index = load_date_index(self.settings.dates_file)
        dates = sorted(date_index)
        self.tracker.display_info(
            f"Loaded {len(dates)} dates from {self.settings.dates_file}"
        )

        self.prepare_output_dir()
        self.copy_stylesheet(result)

        if dates:
            with self.tracker.track_comic_processing(len(dates)) as progress:
                for date in dates:
                    comic_name = date_index[date]
                    progress.update(advance=0, description=f"Building {date}")
                    try:
                        self.build_comic(date, comic_name, dates, result)
                        result.built.append(date)
                    except Exception as e:
                        result.failed[date] = str(e)
                        self.tracker.display_error(
                            f"Failed to build comic {comic_name} for {date}: {e}", e
                        )
                    progress.update()

        self.write_index_page(dates)

        if result.failed:
            self.tracker.display_warning(
                f"Built {len(result.built)} of {result.total} comics"
            )
        else:
            self.tracker.display_success(
                f"Built {len(result.built)} comics into {self.settings.output_dir}"
            )
        return result

    def scan(self) -> list[ComicPreview]:
        """Scan the date index without writing anything.

        Returns:
            One preview per date, in date order

        Raises:
            DateIndexError: If the date index cannot be loaded
        """
        date_index = load_date_index(self.settings.dates_file)
        previews: list[ComicPreview] = []
        for date in sorted(date_index):
            comic_name = date_index[date]
            try:
                comic, _ = self.load_comic(comic_name)
                previews.append(ComicPreview(date, comic_name, len(comic.panels)))
            except ComicSourceError as e:
                previews.append(ComicPreview(date, comic_name, None, str(e)))
        return previews

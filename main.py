#!/usr/bin/env python3
"""
Comic Site Build Script

A command-line tool for building a static web comic site.
Reads the date index and per-comic markdown from the source folder,
copies image assets and writes one HTML page per date plus an index
page redirecting to the latest comic.

Usage:
    uv run main.py [--source comics] [--output built] [--watch]
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.config.settings import BuildSettings, load_settings
from src.models.build import BuildResult
from src.parsers.date_index import DateIndexError
from src.processors.site_builder import SiteBuilder
from src.watch.watcher import watch

# Initialize Rich console for output
console = Console()


def validate_source_directory(settings: BuildSettings) -> bool:
    """
    Validate that the source directory and date index exist.

    Args:
        settings: Resolved build settings

    Returns:
        bool: True if the sources are present, False otherwise
    """
    if not settings.source_dir.is_dir():
        console.print(f"[red]Error: Source directory not found: {settings.source_dir}[/red]")
        return False

    if not settings.dates_file.is_file():
        console.print(f"[red]Error: Date index not found: {settings.dates_file}[/red]")
        console.print("Create it with one line per comic, for example:")
        console.print("2024-01-05: first-comic")
        return False

    console.print(f"[green]✓[/green] Source directory ready: {settings.source_dir}")
    return True


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list, defaults to sys.argv

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Build the static comic site",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uv run main.py                        # Build comics/ into built/
  uv run main.py --watch                # Rebuild whenever comics/ changes
  uv run main.py -s strips -o public    # Use other source/output folders
  uv run main.py --dry-run              # Show what would be built
        """
    )

    _ = parser.add_argument(
        "--source",
        "-s",
        type=Path,
        help="Folder holding dates.yaml and the comic folders (default: comics)"
    )

    _ = parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Folder the site is written to (default: built)"
    )

    _ = parser.add_argument(
        "--stylesheet",
        type=Path,
        help="Stylesheet copied into the output folder (default: style.css)"
    )

    _ = parser.add_argument(
        "--dates-file",
        help="Name of the date index inside the source folder (default: dates.yaml)"
    )

    _ = parser.add_argument(
        "--title",
        help="Site title shown on every page (default: Comics)"
    )

    _ = parser.add_argument(
        "--watch",
        action="store_true",
        help="Rebuild the site whenever the source folder changes"
    )

    _ = parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan the sources and show what would be built without writing"
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output for debugging"
    )

    return parser.parse_args(argv)


def display_summary(builder: SiteBuilder, result: BuildResult, start_time: float) -> None:
    """Display final build summary.

    Args:
        builder: The site builder instance
        result: Result of the build
        start_time: Build start time for duration calculation
    """
    duration = time.time() - start_time
    builder.tracker.display_build_summary(result)
    console.print(f"[yellow]Build time:[/yellow] {duration:.1f} seconds")


def display_dry_run(builder: SiteBuilder) -> None:
    """Show what a build would produce without writing anything."""
    previews = builder.scan()

    table = Table(title="Dry Run")
    table.add_column("Date", style="cyan")
    table.add_column("Comic", style="magenta")
    table.add_column("Panels", style="green")
    table.add_column("Status")

    for preview in previews:
        if preview.error:
            table.add_row(preview.date, preview.comic_name, "-", f"[red]{escape(preview.error)}[/red]")
        else:
            table.add_row(preview.date, preview.comic_name, str(preview.panel_count), "[green]ok[/green]")

    console.print(table)
    console.print(f"[blue]Would build {len(previews)} pages into {builder.settings.output_dir}[/blue]")


def run_build(builder: SiteBuilder) -> BuildResult:
    """Run one build and display its summary."""
    start_time = time.time()
    result = builder.build()
    display_summary(builder, result, start_time)
    return result


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the comic site build script."""
    console.print("[bold blue]Comic Site Build Script[/bold blue]")

    # Parse command-line arguments
    args = parse_arguments(argv)

    # Enable verbose mode if requested
    verbose_mode: bool = getattr(args, 'verbose', False)
    if verbose_mode:
        console.print("[dim]Verbose mode enabled[/dim]")

    settings = load_settings(
        source_dir=args.source,
        output_dir=args.output,
        stylesheet=args.stylesheet,
        dates_filename=args.dates_file,
        site_title=args.title,
    )

    # Validate source setup
    if not validate_source_directory(settings):
        sys.exit(1)

    builder = SiteBuilder(settings, console=console, verbose=verbose_mode)

    try:
        if args.dry_run:
            console.print("[yellow]DRY RUN MODE - No files will be written[/yellow]\n")
            display_dry_run(builder)
            return

        result = run_build(builder)

        if args.watch:
            watch(
                settings.source_dir,
                lambda: run_build(builder),
                builder.tracker,
                ignore_dirs=[settings.output_dir],
            )
            return

        if result.failed:
            console.print(f"\n[yellow]Build finished with {len(result.failed)} failed comic(s).[/yellow]")
        else:
            console.print("\n[green]Build completed successfully![/green]")

    except DateIndexError as e:
        console.print(f"\n[red]Critical error: {escape(str(e))}[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Build interrupted by user.[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[red]Critical error during build: {escape(str(e))}[/red]")
        if verbose_mode:
            import traceback
            console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        sys.exit(1)


if __name__ == "__main__":
    main()

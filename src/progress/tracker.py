"""Build progress reporting with Rich."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from src.models.build import BuildResult


@final
class BuildTracker:
    """Reports build progress, warnings and errors to the console."""

    def __init__(self, console: Console | None = None, verbose: bool = False) -> None:
        """Initialize the build tracker.

        Args:
            console: Rich console instance. If None, creates a new one.
            verbose: Whether debug messages are shown
        """
        self.console = console or Console()
        self.verbose = verbose

    @contextmanager
    def track_comic_processing(self, total_comics: int) -> Iterator[ComicProgressContext]:
        """Context manager for tracking overall comic processing progress.

        Args:
            total_comics: Total number of comics to build

        Yields:
            Context for advancing the progress bar
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            task_id = progress.add_task("Building comics...", total=total_comics)
            yield ComicProgressContext(progress, task_id)

    def display_build_summary(self, result: BuildResult) -> None:
        """Display a summary of a build.

        Args:
            result: Result of the build
        """
        table = Table(title="Build Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green")

        table.add_row("Comics Built", str(len(result.built)))
        table.add_row("Comics Failed", str(len(result.failed)))
        table.add_row("Warnings", str(len(result.warnings)))

        self.console.print()
        self.console.print(table)

        if result.failed:
            failures = Table(title="Failed Comics")
            failures.add_column("Date", style="cyan")
            failures.add_column("Error", style="red")
            for date, error in result.failed.items():
                failures.add_row(date, escape(error))
            self.console.print(failures)

    def display_error(self, message: str, exception: Exception | None = None) -> None:
        """Display an error message with optional exception details.

        Args:
            message: Error message to display
            exception: Optional exception for additional context
        """
        self.console.print(f"[red]Error: {escape(message)}[/red]")
        if exception and self.verbose:
            self.console.print(f"[dim]Details: {escape(repr(exception))}[/dim]")

    def display_warning(self, message: str) -> None:
        """Display a warning message."""
        self.console.print(f"[yellow]Warning: {escape(message)}[/yellow]")

    def display_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def display_info(self, message: str) -> None:
        """Display an info message."""
        self.console.print(f"[blue]Info: {escape(message)}[/blue]")

    def display_debug(self, message: str) -> None:
        """Display a debug message when verbose output is enabled."""
        if self.verbose:
            self.console.print(f"[dim]{escape(message)}[/dim]")


@final
class ComicProgressContext:
    """Context for tracking comic processing progress."""

    def __init__(self, progress: Progress, task_id: TaskID) -> None:
        """Initialize the context.

        Args:
            progress: Rich Progress instance
            task_id: Task ID for the progress bar
        """
        self.progress = progress
        self.task_id = task_id

    def update(self, advance: int = 1, description: str | None = None) -> None:
        """Update the comic progress.

        Args:
            advance: Number of comics to advance
            description: Optional description update
        """
        self.progress.update(self.task_id, advance=advance, description=description)

"""Rebuild the site whenever the comic sources change."""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from src.progress.tracker import BuildTracker


class RebuildHandler(FileSystemEventHandler):
    """Runs the build synchronously for every relevant filesystem event."""

    def __init__(
        self,
        rebuild: Callable[[], object],
        tracker: BuildTracker,
        ignore_dirs: list[Path] | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            rebuild: Callable that runs a full build
            tracker: Tracker used to report rebuilds and failures
            ignore_dirs: Directories whose events never trigger a rebuild
        """
        super().__init__()
        self.rebuild = rebuild
        self.tracker = tracker
        self.ignore_dirs = [d.resolve() for d in ignore_dirs or []]
        self.rebuild_count = 0

    def should_rebuild(self, event: FileSystemEvent) -> bool:
        if event.is_directory:
            return False
        src_path = event.src_path
        if isinstance(src_path, bytes):
            src_path = src_path.decode()
        path = Path(src_path).resolve()
        return not any(path.is_relative_to(d) for d in self.ignore_dirs)

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type in ("opened", "closed", "closed_no_write"):
            return
        if not self.should_rebuild(event):
            return

        self.tracker.display_info(f"Change detected: {event.src_path}, rebuilding...")
        try:
            _ = self.rebuild()
            self.rebuild_count += 1
        except Exception as e:
            self.tracker.display_error(f"Rebuild failed: {e}", e)


def watch(
    source_dir: Path,
    rebuild: Callable[[], object],
    tracker: BuildTracker,
    ignore_dirs: list[Path] | None = None,
    poll_interval: float = 1.0,
) -> None:
    """Watch a source directory and rebuild on every change until interrupted.

    Args:
        source_dir: Directory to watch recursively
        rebuild: Callable that runs a full build
        tracker: Tracker used for status output
        ignore_dirs: Directories (such as the output directory) to ignore
        poll_interval: Seconds between checks of the interrupt flag
    """
    handler = RebuildHandler(rebuild, tracker, ignore_dirs)
    observer = Observer()
    _ = observer.schedule(handler, str(source_dir), recursive=True)
    observer.start()
    tracker.display_info(f"Watching {source_dir}/ for changes (Ctrl+C to stop)")

    try:
        while observer.is_alive():
            time.sleep(poll_interval)
    except KeyboardInterrupt:
        tracker.display_info("Stopping watcher...")
    finally:
        observer.stop()
        observer.join()

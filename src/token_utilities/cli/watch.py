"""CLI command: token-utilities watch -- rebuild whenever project files change."""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Callable

import click
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from token_utilities.cache import BuildCache
from token_utilities.cli.common import config_option, load_or_exit
from token_utilities.engine import GENERATED_SUFFIX, IGNORED_DIRS, BuildResult, UtilityEngine

logger = logging.getLogger(__name__)


class RebuildHandler(FileSystemEventHandler):
    """Collapses bursts of file events into one rebuild.

    Every relevant event restarts a timer; the callback runs once the
    project has been quiet for ``debounce`` seconds.  Directory events,
    generated files, vendored directories and the paths in ``ignore`` are
    dropped.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        debounce: float = 0.2,
        ignore: set[Path] | None = None,
    ) -> None:
        super().__init__()
        self.callback = callback
        self.debounce = debounce
        self.ignore = {p.resolve() for p in (ignore or set())}
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self.pending = False

    def is_relevant(self, event: FileSystemEvent) -> bool:
        if event.is_directory:
            return False
        src = str(event.src_path)
        if src.endswith(GENERATED_SUFFIX):
            return False
        path = Path(src)
        if IGNORED_DIRS.intersection(path.parts):
            return False
        return path.resolve() not in self.ignore

    def on_any_event(self, event: FileSystemEvent) -> None:
        if not self.is_relevant(event):
            return
        with self._lock:
            self.pending = True
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.debounce, self.flush)
            self._timer.daemon = True
            self._timer.start()

    def flush(self) -> None:
        """Run the callback now if an event is pending."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            if not self.pending:
                return
            self.pending = False
        self.callback()


def rebuild_once(engine: UtilityEngine, input_path: Path, output_path: Path) -> BuildResult:
    """Build *input_path* into *output_path*, writing only when the text changed."""
    result = engine.build(input_path.read_text(encoding="utf-8"))
    try:
        current = output_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        current = None
    if current != result.css:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.css, encoding="utf-8")
    return result


@click.command()
@config_option
@click.option(
    "--input",
    "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Stylesheet containing the @layer insertion point",
)
@click.option("--output", "-o", "output_path", required=True, help="Built stylesheet")
@click.option("--debounce", default=0.2, show_default=True, type=float, help="Quiet period in seconds")
def watch(config_path: str, input_path: str, output_path: str, debounce: float) -> None:
    """Rebuild the stylesheet whenever tokens, rules or content files change.

    One cache is kept for the whole session, so edits to content files only
    re-scan the edited files and token edits only regenerate the universe.
    """
    config, project_dir = load_or_exit(config_path)
    engine = UtilityEngine(config, cache=BuildCache(), cwd=project_dir)
    source = Path(input_path).resolve()
    target = Path(output_path).resolve()

    def _rebuild() -> None:
        started = time.monotonic()
        try:
            result = rebuild_once(engine, source, target)
        except OSError as exc:
            click.echo(f"Build failed: {exc}", err=True)
            return
        dropped = engine.cache.scans.prune(result.dependencies)
        if dropped:
            logger.info("Dropped %d stale scan record(s)", dropped)
        elapsed = time.monotonic() - started
        click.echo(
            f"Rebuilt {target.name}: {len(result.injected)} utilities "
            f"({result.files_read} file(s) read, {elapsed * 1000:.0f} ms)"
        )

    _rebuild()

    handler = RebuildHandler(_rebuild, debounce=debounce, ignore={target})
    observer = Observer()
    observer.schedule(handler, path=str(project_dir), recursive=True)
    observer.start()
    click.echo(f"Watching {project_dir} (Ctrl+C to stop)")
    try:
        while observer.is_alive():
            observer.join(timeout=1.0)
    except KeyboardInterrupt:
        click.echo("Stopping watch...")
    finally:
        observer.stop()
        observer.join()

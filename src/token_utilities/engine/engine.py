"""Build engine: one pass from token sources and content files to injected CSS."""

from __future__ import annotations

import glob
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from token_utilities.cache import BuildCache, FileScanRecord, UniverseCacheEntry, content_hash
from token_utilities.config import UtilityConfig
from token_utilities.engine.document import CssDocument, Document
from token_utilities.engine.reference import (
    GENERATED_SUFFIX,
    normalize_reference_path,
    render_reference,
    write_reference,
)
from token_utilities.events import types as events
from token_utilities.events.bus import EventBus
from token_utilities.extract import ClassExtractor
from token_utilities.parser import merge_media_variants, parse_tokens
from token_utilities.rules.loader import find_rules_file, load_rules_file
from token_utilities.rules.model import Rules
from token_utilities.rules.registry import RuleRegistry
from token_utilities.universe import Universe, generate_universe

logger = logging.getLogger(__name__)

IGNORED_DIRS = frozenset({"node_modules", ".next", ".git"})


@dataclass
class BuildResult:
    """Outcome of one build pass.

    ``dependencies`` lists every file the host pipeline should watch: token
    and media sources, the rules module and each scanned content file.
    """

    css: str
    injected: list[str] = field(default_factory=list)
    dependencies: list[Path] = field(default_factory=list)
    used: frozenset[str] = frozenset()
    content_hash: str | None = None
    universe_rebuilt: bool = False
    reference_written: bool = False
    files_scanned: int = 0
    files_read: int = 0
    inserted: bool = False

    @property
    def skipped(self) -> bool:
        """True when required configuration was missing and nothing ran."""
        return self.content_hash is None


@dataclass(frozen=True)
class _Scan:
    path: Path
    classes: frozenset[str]
    cached: bool
    error: str | None = None


class UtilityEngine:
    """Runs build passes against a shared :class:`BuildCache`.

    The universe is regenerated only when the content hash of the token
    source, media source and rule extensions changes; content files are
    re-extracted only when their modification time changes.
    """

    def __init__(
        self,
        config: UtilityConfig,
        *,
        cache: BuildCache | None = None,
        event_bus: EventBus | None = None,
        cwd: Path | str | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.config = config
        self.cache = cache or BuildCache()
        self.event_bus = event_bus or EventBus()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.max_workers = max_workers
        self.extractor = ClassExtractor(config.class_matchers)

    # --- paths ----------------------------------------------------------------

    def _resolve(self, path: str) -> Path:
        return (self.cwd / path).resolve()

    @property
    def token_path(self) -> Path | None:
        src = self.config.design_token_source
        return self._resolve(src) if src else None

    @property
    def media_path(self) -> Path | None:
        src = self.config.custom_media_source
        return self._resolve(src) if src else None

    @property
    def reference_path(self) -> Path | None:
        if not self.config.generated:
            return None
        return self._resolve(normalize_reference_path(self.config.generated))

    # --- inputs ---------------------------------------------------------------

    def _read_source(self, path: Path | None, label: str) -> str:
        if path is None:
            return ""
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s source %s: %s", label, path, exc)
            return ""

    def _project_rules(self) -> tuple[Rules, str, Path | None]:
        """Rules module first, then config extensions; plus the module's text."""
        if not self.config.rules_file:
            return self.config.extend, "", None
        path = find_rules_file(self.cwd)
        if path is None:
            return self.config.extend, "", None
        file_rules = load_rules_file(self.cwd) or Rules()
        source = self._read_source(path, "rules")
        return file_rules.merge(self.config.extend), source, path

    # --- universe -------------------------------------------------------------

    def _ensure_universe(
        self, token_css: str, media_css: str, extend: Rules, rules_source: str
    ) -> tuple[UniverseCacheEntry, bool]:
        registry = RuleRegistry(extend=extend, defaults=self.config.default_rules)
        digest = content_hash(token_css, media_css, registry, rules_source)

        entry = self.cache.universe.get(digest)
        if entry is not None:
            self.event_bus.emit(events.UniverseReused(content_hash=digest))
            return entry, False

        tokens = parse_tokens(token_css, registry.categories())
        added = merge_media_variants(registry, media_css)
        universe = generate_universe(registry.rules(), tokens)
        entry = UniverseCacheEntry(content_hash=digest, universe=universe)
        self.cache.universe.store(entry)

        logger.info(
            "Generated %d utilities (%d token categories, %d media variants)",
            len(universe),
            len(tokens),
            len(added),
        )
        self.event_bus.emit(events.UniverseGenerated(content_hash=digest, entries=len(universe)))
        return entry, True

    def _write_reference(self, entry: UniverseCacheEntry) -> bool:
        path = self.reference_path
        if path is None:
            return False
        try:
            written = write_reference(path, render_reference(entry.raw_css))
        except OSError as exc:
            logger.warning("Could not write reference file %s: %s", path, exc)
            return False
        if written:
            logger.info("Updated reference: %s", path)
            self.event_bus.emit(events.ReferenceWritten(path=path))
        return written

    def universe(self) -> Universe:
        """Return the universe for the current sources, generating it if needed."""
        extend, rules_source, _ = self._project_rules()
        token_css = self._read_source(self.token_path, "token")
        media_css = self._read_source(self.media_path, "media")
        entry, _ = self._ensure_universe(token_css, media_css, extend, rules_source)
        return entry.universe

    # --- content scanning -----------------------------------------------------

    def discover_files(self) -> list[Path]:
        """Expand the content globs, skipping vendored, build and generated files."""
        found: dict[Path, None] = {}
        for pattern in self.config.content:
            for match in sorted(glob.glob(pattern, root_dir=self.cwd, recursive=True)):
                if match.endswith(GENERATED_SUFFIX):
                    continue
                if IGNORED_DIRS.intersection(Path(match).parts):
                    continue
                path = (self.cwd / match).resolve()
                if path.is_file():
                    found[path] = None
        return list(found)

    def _scan_one(self, path: Path) -> _Scan:
        try:
            mtime_ns = path.stat().st_mtime_ns
            record = self.cache.scans.lookup(path, mtime_ns)
            if record is not None:
                return _Scan(path=path, classes=record.classes, cached=True)
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            return _Scan(path=path, classes=frozenset(), cached=False, error=str(exc))

        classes = frozenset(self.extractor.extract(text))
        self.cache.scans.store(FileScanRecord(path=path, mtime_ns=mtime_ns, classes=classes))
        return _Scan(path=path, classes=classes, cached=False)

    def scan(self, files: list[Path]) -> tuple[set[str], int]:
        """Return the used-class set across *files* and how many were re-read."""
        used: set[str] = set()
        files_read = 0
        if not files:
            return used, files_read

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            scans = list(pool.map(self._scan_one, files))

        for scan in scans:
            if scan.error is not None:
                logger.warning("Could not scan %s: %s", scan.path, scan.error)
                self.event_bus.emit(events.FileScanFailed(path=scan.path, error=scan.error))
                continue
            if not scan.cached:
                files_read += 1
            used.update(scan.classes)
            self.event_bus.emit(
                events.FileScanned(path=scan.path, classes=len(scan.classes), cached=scan.cached)
            )
        return used, files_read

    # --- build ----------------------------------------------------------------

    def build(self, document: Document | str) -> BuildResult:
        """Run one pass and splice the used utilities into *document*.

        Never raises for missing sources or unreadable files; those are
        logged and contribute nothing.
        """
        doc: Document = CssDocument(document) if isinstance(document, str) else document
        self.event_bus.emit(events.BuildStarted(cwd=self.cwd))

        extend, rules_source, rules_path = self._project_rules()
        dependencies: list[Path] = [rules_path] if rules_path else []

        if not self.config.design_token_source or not self.config.content:
            logger.warning("Missing required config: design token source and content are required")
            return BuildResult(css=doc.text, dependencies=dependencies)

        token_css = self._read_source(self.token_path, "token")
        dependencies.append(self.token_path)
        media_path = self.media_path
        media_css = ""
        if media_path is not None and media_path.exists():
            media_css = self._read_source(media_path, "media")
            dependencies.append(media_path)

        entry, rebuilt = self._ensure_universe(token_css, media_css, extend, rules_source)
        reference_written = self._write_reference(entry) if rebuilt else False

        files = self.discover_files()
        dependencies.extend(files)
        used, files_read = self.scan(files)

        lookup = entry.lookup
        injected = [key for key in lookup if key in used]
        inserted = doc.replace_layer(self.config.layer, "\n".join(lookup[k] for k in injected))
        if not inserted:
            logger.info("No @layer %s insertion point found", self.config.layer)
        if files_read > 0:
            logger.info("%d utilities injected", len(injected))

        self.event_bus.emit(
            events.BuildCompleted(
                injected=len(injected), files_scanned=len(files), files_read=files_read
            )
        )
        return BuildResult(
            css=doc.text,
            injected=injected,
            dependencies=dependencies,
            used=frozenset(used),
            content_hash=entry.content_hash,
            universe_rebuilt=rebuilt,
            reference_written=reference_written,
            files_scanned=len(files),
            files_read=files_read,
            inserted=inserted,
        )

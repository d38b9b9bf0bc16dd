"""Event types emitted during a build pass."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BuildEvent:
    """Base class of everything the engine emits."""


@dataclass(frozen=True)
class BuildStarted(BuildEvent):
    cwd: Path


@dataclass(frozen=True)
class UniverseGenerated(BuildEvent):
    content_hash: str
    entries: int


@dataclass(frozen=True)
class UniverseReused(BuildEvent):
    content_hash: str


@dataclass(frozen=True)
class ReferenceWritten(BuildEvent):
    path: Path


@dataclass(frozen=True)
class FileScanned(BuildEvent):
    path: Path
    classes: int
    cached: bool


@dataclass(frozen=True)
class FileScanFailed(BuildEvent):
    path: Path
    error: str


@dataclass(frozen=True)
class BuildCompleted(BuildEvent):
    injected: int
    files_scanned: int
    files_read: int

"""Event system: bus and event types for the build lifecycle."""

from token_utilities.events.bus import EventBus
from token_utilities.events.types import (
    BuildCompleted,
    BuildEvent,
    BuildStarted,
    FileScanFailed,
    FileScanned,
    ReferenceWritten,
    UniverseGenerated,
    UniverseReused,
)

__all__ = [
    "EventBus",
    "BuildCompleted",
    "BuildEvent",
    "BuildStarted",
    "FileScanFailed",
    "FileScanned",
    "ReferenceWritten",
    "UniverseGenerated",
    "UniverseReused",
]

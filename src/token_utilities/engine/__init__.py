"""Build engine: universe caching, content scanning and injection."""

from token_utilities.engine.document import CssDocument, Document
from token_utilities.engine.engine import IGNORED_DIRS, BuildResult, UtilityEngine
from token_utilities.engine.reference import (
    GENERATED_SUFFIX,
    normalize_reference_path,
    render_reference,
    write_reference,
)

__all__ = [
    "GENERATED_SUFFIX",
    "IGNORED_DIRS",
    "BuildResult",
    "CssDocument",
    "Document",
    "UtilityEngine",
    "normalize_reference_path",
    "render_reference",
    "write_reference",
]

"""The optional ``*.gen.css`` reference file listing the whole universe."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "GENERATED_SUFFIX",
    "normalize_reference_path",
    "render_reference",
    "write_reference",
]

GENERATED_SUFFIX = ".gen.css"

_HEADER_LINES = (
    "AUTO-GENERATED FILE - DO NOT EDIT MANUALLY",
    "Do not import it directly in app CSS.",
    "Generated by token-utilities",
    "",
    "Git ignore recommendation:",
    f"  **/*{GENERATED_SUFFIX}",
    "",
    "Purpose:",
    "- Editor completion for every available utility class",
    "- A readable listing of the generated utility universe",
    "",
    "To disable: remove \"generated\" from the config.",
)


def normalize_reference_path(path: str) -> str:
    """Force the ``.gen.css`` suffix so content globs can ignore the file."""
    if path.endswith(GENERATED_SUFFIX):
        return path
    if path.endswith(".css"):
        path = path[: -len(".css")]
    return path + GENERATED_SUFFIX


def render_reference(raw_css: str) -> str:
    width = max(len(line) for line in _HEADER_LINES)
    border = "/* " + "=" * width + " */"
    header = [border]
    header.extend(f"/* {line.ljust(width)} */" for line in _HEADER_LINES)
    header.append(border)
    return "\n".join(header) + "\n" + raw_css


def write_reference(path: Path, text: str) -> bool:
    """Write *text* to *path* unless the file already holds exactly that text.

    Returns True when the file was written.
    """
    data = text.encode("utf-8")
    try:
        if path.read_bytes() == data:
            return False
    except FileNotFoundError:
        pass
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return True

"""Usage extractor: finds utility-class candidates in arbitrary source text.

This is a heuristic, not a parser.  After every occurrence of a matcher
(``className``, ``class``, ``clsx`` ...) the following chunk of text is
searched for quoted literals, which are split on whitespace and filtered
through :func:`is_valid_class_name`.
"""

from __future__ import annotations

import re
from typing import Iterable

from token_utilities.rules.defaults import DEFAULT_CLASS_MATCHERS

__all__ = ["ClassExtractor", "is_valid_class_name", "MAX_CLASS_LENGTH", "SCAN_WINDOW"]

MAX_CLASS_LENGTH = 100

# Characters inspected after each matcher occurrence.
SCAN_WINDOW = 500

_QUOTED_RE = re.compile(r"""["'`]([^"'`]+)["'`]""")
_CLASS_CHARS_RE = re.compile(r"^[A-Za-z0-9_:.-]+$")
_REJECT_SUBSTRINGS = ("://", "\\", "(", "{", "[")


def is_valid_class_name(candidate: str) -> bool:
    """Return True if *candidate* looks like a utility class usage.

    Rejects empty or overlong strings, URLs, paths and anything containing an
    opening bracket, paren or brace, then requires letters, digits, ``-``,
    ``_``, ``:`` and ``.`` only.
    """
    if not candidate or len(candidate) > MAX_CLASS_LENGTH:
        return False
    if candidate.startswith("/"):
        return False
    if any(marker in candidate for marker in _REJECT_SUBSTRINGS):
        return False
    return _CLASS_CHARS_RE.match(candidate) is not None


class ClassExtractor:
    """Collect class names used next to the configured matchers."""

    def __init__(self, matchers: Iterable[str] | None = None) -> None:
        extra = [m for m in (matchers or ()) if m]
        self.matchers: tuple[str, ...] = tuple(
            dict.fromkeys([*DEFAULT_CLASS_MATCHERS, *extra])
        )

    def extract(self, content: str) -> set[str]:
        classes: set[str] = set()
        for matcher in self.matchers:
            index = content.find(matcher)
            while index != -1:
                self._collect(content[index : index + SCAN_WINDOW], classes)
                index = content.find(matcher, index + len(matcher))
        return classes

    @staticmethod
    def _collect(chunk: str, classes: set[str]) -> None:
        for match in _QUOTED_RE.finditer(chunk):
            for candidate in match.group(1).split():
                if is_valid_class_name(candidate):
                    classes.add(candidate)

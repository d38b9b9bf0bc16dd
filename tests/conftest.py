from __future__ import annotations

from pathlib import Path

import pytest

from token_utilities.config import UtilityConfig

TOKENS_CSS = """\
/* design tokens */
:root {
  --spacing-4: 1rem;
  --spacing-8: 2rem;
  --color-primary: #0af;
  --radius-full: 9999px;
  --brand-logo: url(logo.svg);
}
"""

MEDIA_CSS = """\
@custom-media --md (min-width: 768px);
@custom-media --dark (prefers-color-scheme: dark);
"""

APP_JSX = """\
export function App() {
  return <div className="flex p-4 md:p-8 hover:bg-primary">hi</div>;
}
"""

PAGE_HTML = """\
<a class="text-primary rounded-full" href="/home">home</a>
"""

STYLESHEET = """\
body { margin: 0; }

@layer utilities-gen {}
"""


def write(root: Path, rel: str, text: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small project: tokens, custom media and two content files."""
    write(tmp_path, "styles/tokens.css", TOKENS_CSS)
    write(tmp_path, "styles/media.css", MEDIA_CSS)
    write(tmp_path, "src/App.jsx", APP_JSX)
    write(tmp_path, "src/pages/index.html", PAGE_HTML)
    write(tmp_path, "styles/main.css", STYLESHEET)
    return tmp_path


@pytest.fixture
def config() -> UtilityConfig:
    return UtilityConfig(
        design_token_source="styles/tokens.css",
        custom_media_source="styles/media.css",
        content=("src/**/*.jsx", "src/**/*.html"),
        generated=None,
    )


@pytest.fixture
def write_file():
    """Return a helper that writes ``root/rel`` (creating parents) and returns the path."""
    return write

# topmark:header:start
#
#   project      : Algomagic
#   file         : api.py
#   file_relpath : src/algomagic/api.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Public Algomagic API (stable surface).

Thin wrappers around the content pipeline, the highlighter and the renderer for
callers that do not go through the CLI.

Configuration contract
----------------------
Functions that depend on configuration accept either a plain mapping shaped
like the TOML file or a frozen `algomagic.config.Config`. A mapping is layered
over the bundled defaults; ``None`` means bundled defaults only (no project
file discovery).

```python
from algomagic import api

result = api.highlight_code(
    "# greet\\nprint('hi')",
    "python",
    config={"highlight": {"line_separator": "<br/>"}},
)
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from algomagic.config import Config, MutableConfig
from algomagic.highlight.clipboard import copy_format
from algomagic.highlight.highlighter import LineHighlighter
from algomagic.pipeline import normalize_content
from algomagic.rendering.html import render_problem_page

if TYPE_CHECKING:
    from collections.abc import Mapping

    from algomagic.authoring.models import Problem
    from algomagic.highlight.highlighter import HighlightResult
    from algomagic.rendering.html import RenderedProblem

__all__: list[str] = [
    "copy_format",
    "highlight_code",
    "normalize_content",
    "render_problem",
    "resolve_config",
]


def resolve_config(config: Mapping[str, Any] | Config | None = None) -> Config:
    """Return a frozen config from a mapping, a `Config`, or None (defaults)."""
    if isinstance(config, Config):
        return config
    draft = MutableConfig.from_defaults()
    if config is not None:
        draft = draft.merge_with(MutableConfig.from_toml_dict(dict(config), config_file=None))
    return draft.freeze()


def highlight_code(
    code: str | None,
    language: str | None,
    *,
    config: Mapping[str, Any] | Config | None = None,
) -> HighlightResult:
    """Highlight a reference solution line by line.

    Args:
        code (str | None): Stored reference-solution code.
        language (str | None): Language name or alias (``python``, ``cpp``, ...).
        config (Mapping[str, Any] | Config | None): Highlight settings.

    Returns:
        HighlightResult: Per-line results and the joined HTML fragment.
    """
    return LineHighlighter.from_config(resolve_config(config)).highlight(code, language)


def render_problem(
    problem: Problem,
    *,
    config: Mapping[str, Any] | Config | None = None,
) -> RenderedProblem:
    """Render a problem page; failures yield the "content unavailable" fallback."""
    return render_problem_page(problem, config=resolve_config(config))

# topmark:header:start
#
#   project      : Algomagic
#   file         : __init__.py
#   file_relpath : src/algomagic/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Content transformation pipeline.

Raw authored text flows through extraction of fenced code blocks, escape
normalization of the prose and of each block interior, and reinjection of the
blocks at their original positions. See `algomagic.pipeline.pipelines`.
"""

from __future__ import annotations

from algomagic.core.errors import ReinjectionError
from algomagic.pipeline.context import ContentContext
from algomagic.pipeline.pipelines import NORMALIZE_PIPELINE
from algomagic.pipeline.runner import run


def normalize_content(raw: str | None) -> str:
    """Return ``raw`` with escapes resolved and code blocks restored.

    Args:
        raw (str | None): Authored content; ``None`` is treated as empty.

    Returns:
        str: NormalizedContent, ready for a Markdown renderer.

    Raises:
        ReinjectionError: If the pipeline did not produce output (invariant failure).
    """
    ctx = run(ContentContext.bootstrap(raw), NORMALIZE_PIPELINE)
    if ctx.normalized is None:
        raise ReinjectionError(
            f"Pipeline produced no output (halted at {ctx.flow.at_step or 'n/a'})"
        )
    return ctx.normalized


__all__: list[str] = [
    "ContentContext",
    "normalize_content",
]

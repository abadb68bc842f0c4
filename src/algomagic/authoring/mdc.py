# topmark:header:start
#
#   project      : Algomagic
#   file         : mdc.py
#   file_relpath : src/algomagic/authoring/mdc.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Convert a category MDC document into a `Category` record.

An MDC file is prose with one or more ```` ```json ```` fenced blocks. Smaller
blocks are usually illustrative snippets, so the longest one is taken as the
category data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from algomagic.authoring.models import Category
from algomagic.config.logging import get_logger
from algomagic.core.errors import ConversionError
from algomagic.pipeline.steps.extractor import extract_blocks
from algomagic.pipeline.tokens import pick_sentinel

if TYPE_CHECKING:
    from pathlib import Path

    from algomagic.config.logging import AlgomagicLogger

logger: AlgomagicLogger = get_logger(__name__)


def longest_json_block(text: str) -> str | None:
    """Return the interior of the longest ``json`` fenced block, or None."""
    _, blocks = extract_blocks(text, pick_sentinel(text))
    candidates: list[str] = [b.raw_interior for b in blocks if b.language.lower() == "json"]
    if not candidates:
        return None
    # max() keeps the first of equally long blocks
    return max(candidates, key=len)


def category_from_mdc(text: str) -> Category:
    """Convert MDC text into a `Category`.

    Raises:
        ConversionError: If the document holds no ``json`` fenced block.
        RecordValidationError: If the block is not valid category JSON.
    """
    block: str | None = longest_json_block(text)
    if block is None:
        raise ConversionError("No ```json code block found")
    return Category.from_json(block)


def load_category_mdc(path: Path) -> Category:
    """Read ``path`` (UTF-8) and convert it with `category_from_mdc`."""
    logger.debug("Converting category MDC: %s", path)
    return category_from_mdc(path.read_text(encoding="utf-8"))

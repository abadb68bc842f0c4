# topmark:header:start
#
#   project      : Algomagic
#   file         : extractor.py
#   file_relpath : src/algomagic/pipeline/steps/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Extractor step: lift fenced code blocks out of authored prose.

Fence recognition follows common Markdown rules: a fence only counts when it
*starts a line* (after at most three spaces of indentation). Triple backticks
inside running text are left alone. The info string of a backtick fence may
not itself contain a backtick.

A block with no closing fence runs to the end of the input rather than raising;
a downstream Markdown renderer treats it the same way.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from algomagic.config.logging import get_logger
from algomagic.pipeline.blocks import ExtractedBlock
from algomagic.pipeline.steps.base import BaseStep
from algomagic.pipeline.tokens import placeholder_token

if TYPE_CHECKING:
    from algomagic.config.logging import AlgomagicLogger
    from algomagic.pipeline.context import ContentContext

logger: AlgomagicLogger = get_logger(__name__)

_RE_FENCE_OPEN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$"
)
_RE_FENCE_CLOSE: Final[re.Pattern[str]] = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})[ \t]*\r?$")


def _match_opening(line: str) -> re.Match[str] | None:
    m = _RE_FENCE_OPEN.match(line)
    if m is None:
        return None
    if m.group("fence")[0] == "`" and "`" in m.group("info"):
        # Inline code such as ```x``` at the start of a line
        return None
    return m


def _closes(line: str, fence: str) -> bool:
    m = _RE_FENCE_CLOSE.match(line)
    if m is None:
        return False
    closing = m.group("fence")
    return closing[0] == fence[0] and len(closing) >= len(fence)


def extract_blocks(text: str, sentinel: str) -> tuple[str, list[ExtractedBlock]]:
    """Replace every fenced block in ``text`` with a placeholder line.

    Args:
        text (str): Raw authored content.
        sentinel (str): Private-use sentinel absent from ``text``.

    Returns:
        tuple[str, list[ExtractedBlock]]: The prose with one placeholder per
            block, and the blocks in source order.
    """
    lines: list[str] = text.split("\n")
    prose_lines: list[str] = []
    blocks: list[ExtractedBlock] = []

    i = 0
    while i < len(lines):
        line = lines[i]
        m = _match_opening(line)
        if m is None:
            prose_lines.append(line)
            i += 1
            continue

        fence: str = m.group("fence")
        info: str = m.group("info").strip()
        interior: list[str] = []
        closing: str | None = None
        j = i + 1
        while j < len(lines):
            if _closes(lines[j], fence):
                closing = lines[j]
                break
            interior.append(lines[j])
            j += 1

        block = ExtractedBlock(
            index=len(blocks),
            language=info.split()[0] if info else "",
            raw_interior="\n".join(interior),
            opening=line,
            closing=closing,
            has_body=bool(interior),
        )
        if closing is None:
            logger.warning(
                "Unterminated code fence at line %d; treating the rest of the input as code",
                i + 1,
            )
        blocks.append(block)
        prose_lines.append(placeholder_token(sentinel, block.index))
        i = j + 1

    return "\n".join(prose_lines), blocks


class ExtractorStep(BaseStep):
    """Pipeline step that extracts fenced code blocks into ``ctx.blocks``.

    Axes written: ``prose``, ``blocks``. Halts with reason ``"empty"`` on empty input.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ContentContext) -> bool:
        """Run once per context."""
        return super().may_proceed(ctx) and ctx.prose is None

    def run(self, ctx: ContentContext) -> None:
        """Populate ``ctx.prose`` and ``ctx.blocks`` from ``ctx.raw``."""
        if not ctx.raw:
            ctx.prose = ""
            ctx.normalized = ""
            ctx.prose_normalized = True
            ctx.request_halt("empty", self.name)
            return
        ctx.prose, ctx.blocks = extract_blocks(ctx.raw, ctx.sentinel)
        logger.debug("Extracted %d code block(s)", len(ctx.blocks))

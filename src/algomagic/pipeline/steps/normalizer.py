# topmark:header:start
#
#   project      : Algomagic
#   file         : normalizer.py
#   file_relpath : src/algomagic/pipeline/steps/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Normalizer step: resolve backslash-n escapes in prose and block interiors.

Authors write ``\\n`` (backslash, n) for a line break and ``\\\\n``
(backslash, backslash, n) for the literal text ``\\n``. Resolution is a
three-step substitution and the order is load-bearing:

1. every ``\\\\n`` becomes a reserved token;
2. every remaining ``\\n`` becomes a real line break;
3. the reserved token becomes the two characters ``\\n``.

Replacing ``\\n`` first would also hit the tail of every ``\\\\n``.

Normalization is not idempotent: running it again would turn the restored
literal ``\\n`` into a line break. The step therefore refuses to run twice on
the same context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from algomagic.config.logging import get_logger
from algomagic.constants import DOUBLE_ESCAPED_NEWLINE, ESCAPED_NEWLINE
from algomagic.pipeline.steps.base import BaseStep
from algomagic.pipeline.tokens import double_escape_token, pick_sentinel

if TYPE_CHECKING:
    from algomagic.config.logging import AlgomagicLogger
    from algomagic.pipeline.context import ContentContext

logger: AlgomagicLogger = get_logger(__name__)


def normalize_escapes(fragment: str) -> str:
    """Resolve escape sequences in a single text fragment.

    Args:
        fragment (str): Prose or a code block interior, not yet normalized.

    Returns:
        str: ``fragment`` with ``\\n`` turned into line breaks and ``\\\\n`` into
            the literal two characters ``\\n``.
    """
    if "\\" not in fragment:
        return fragment
    token: str = double_escape_token(pick_sentinel(fragment))
    protected = fragment.replace(DOUBLE_ESCAPED_NEWLINE, token)
    broken = protected.replace(ESCAPED_NEWLINE, "\n")
    return broken.replace(token, ESCAPED_NEWLINE)


class NormalizerStep(BaseStep):
    """Pipeline step that normalizes the prose and each block interior exactly once.

    Axes written: ``prose``, ``block_interiors``.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ContentContext) -> bool:
        """Run only after extraction and only if nothing was normalized yet."""
        if not super().may_proceed(ctx) or ctx.prose is None:
            return False
        if ctx.prose_normalized or ctx.block_interiors:
            logger.warning("Content already normalized; refusing to normalize again")
            return False
        return True

    def run(self, ctx: ContentContext) -> None:
        """Normalize ``ctx.prose`` and every ``ctx.blocks`` interior independently."""
        assert ctx.prose is not None  # guarded by may_proceed()
        ctx.prose = normalize_escapes(ctx.prose)
        ctx.prose_normalized = True
        for block in ctx.blocks:
            ctx.block_interiors[block.index] = normalize_escapes(block.raw_interior)
        logger.trace("Normalized prose and %d block interior(s)", len(ctx.blocks))

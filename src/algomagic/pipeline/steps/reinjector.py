# topmark:header:start
#
#   project      : Algomagic
#   file         : reinjector.py
#   file_relpath : src/algomagic/pipeline/steps/reinjector.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Reinjector step: put normalized code blocks back at their placeholders."""

from __future__ import annotations

from typing import TYPE_CHECKING

from algomagic.config.logging import get_logger
from algomagic.core.errors import ReinjectionError
from algomagic.pipeline.steps.base import BaseStep
from algomagic.pipeline.tokens import placeholder_pattern

if TYPE_CHECKING:
    import re
    from collections.abc import Mapping, Sequence

    from algomagic.config.logging import AlgomagicLogger
    from algomagic.pipeline.blocks import ExtractedBlock
    from algomagic.pipeline.context import ContentContext

logger: AlgomagicLogger = get_logger(__name__)


def reinject_blocks(
    prose: str,
    blocks: Sequence[ExtractedBlock],
    sentinel: str,
    interiors: Mapping[int, str] | None = None,
) -> str:
    """Replace each placeholder in ``prose`` with its fenced block.

    Args:
        prose (str): Prose carrying one placeholder per block.
        blocks (Sequence[ExtractedBlock]): Blocks in extraction order.
        sentinel (str): Sentinel the placeholders were built with.
        interiors (Mapping[int, str] | None): Interior per block index; the raw
            interior is used for blocks not listed.

    Returns:
        str: The prose with every block restored in original order.

    Raises:
        ReinjectionError: If placeholders and blocks do not correspond one-to-one
            and in order.
    """
    pattern: re.Pattern[str] = placeholder_pattern(sentinel)
    found: list[int] = [int(m.group("index")) for m in pattern.finditer(prose)]
    expected: list[int] = [b.index for b in blocks]
    if found != list(range(len(blocks))) or expected != found:
        raise ReinjectionError(
            f"Placeholder/block mismatch: placeholders {found}, blocks {expected}"
        )

    by_index = {b.index: b for b in blocks}
    chosen: Mapping[int, str] = interiors or {}

    def _restore(m: re.Match[str]) -> str:
        block = by_index[int(m.group("index"))]
        return block.render(chosen.get(block.index))

    return pattern.sub(_restore, prose)


class ReinjectorStep(BaseStep):
    """Pipeline step that assembles ``ctx.normalized`` from prose and blocks.

    Axes written: ``normalized``.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, ctx: ContentContext) -> bool:
        """Run once the prose and all block interiors are normalized."""
        return (
            super().may_proceed(ctx)
            and ctx.prose is not None
            and ctx.prose_normalized
            and ctx.blocks_normalized
            and ctx.normalized is None
        )

    def run(self, ctx: ContentContext) -> None:
        """Populate ``ctx.normalized``."""
        assert ctx.prose is not None  # guarded by may_proceed()
        ctx.normalized = reinject_blocks(ctx.prose, ctx.blocks, ctx.sentinel, ctx.block_interiors)

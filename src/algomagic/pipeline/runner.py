# topmark:header:start
#
#   project      : Algomagic
#   file         : runner.py
#   file_relpath : src/algomagic/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Run a content transformation pipeline for a single piece of text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from algomagic.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from algomagic.config.logging import AlgomagicLogger
    from algomagic.pipeline.context import ContentContext
    from algomagic.pipeline.steps.base import BaseStep

logger: AlgomagicLogger = get_logger(__name__)


def run(ctx: ContentContext, steps: Sequence[BaseStep]) -> ContentContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (ContentContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered sequence of pipeline steps.

    Returns:
        ContentContext: The final context after all steps have run.
    """
    logger.debug("Running %d step(s) on %d character(s)", len(steps), len(ctx.raw))
    for step in steps:
        ctx = step(ctx)
    return ctx

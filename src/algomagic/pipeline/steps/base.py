# topmark:header:start
#
#   project      : Algomagic
#   file         : base.py
#   file_relpath : src/algomagic/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run?
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from algomagic.config.logging import get_logger

if TYPE_CHECKING:
    from algomagic.config.logging import AlgomagicLogger
    from algomagic.pipeline.context import ContentContext

logger: AlgomagicLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``
    and ``run()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs.
    """

    name: str

    def __call__(self, ctx: ContentContext) -> ContentContext:
        """Invoke the step lifecycle: gate → run (if allowed).

        Args:
            ctx (ContentContext): The mutable context for the current call.

        Returns:
            ContentContext: The same context instance after mutation.
        """
        ctx.steps.append(self)

        if self.may_proceed(ctx):
            logger.debug("Pipeline step %s - running", self.name)
            self.run(ctx)
            if ctx.flow.halt:
                logger.debug("Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        else:
            logger.debug("Pipeline step %s may not proceed", self.name)

        return ctx

    def may_proceed(self, ctx: ContentContext) -> bool:
        """Return whether the step should run given the current context.

        Default: ``True`` unless the pipeline was halted.
        """
        return not ctx.flow.halt

    def run(self, ctx: ContentContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        raise NotImplementedError

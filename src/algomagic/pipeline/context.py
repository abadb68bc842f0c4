# topmark:header:start
#
#   project      : Algomagic
#   file         : context.py
#   file_relpath : src/algomagic/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Processing context for the content transformation pipeline.

A `ContentContext` carries the complete, mutable state of one transformation
call as it flows through the pipeline steps. It is created per call and never
shared, so no locking is involved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from algomagic.pipeline.tokens import pick_sentinel

if TYPE_CHECKING:
    from algomagic.pipeline.blocks import ExtractedBlock
    from algomagic.pipeline.steps.base import BaseStep

__all__: list[str] = [
    "FlowControl",
    "ContentContext",
]


@dataclass
class FlowControl:
    """Execution flow control for the current call."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "empty"
    at_step: str = ""  # step name that requested the halt


@dataclass
class ContentContext:
    """Context for one content transformation.

    Attributes:
        raw (str): The author-supplied text (``None`` input is stored as ``""``).
        sentinel (str): Private-use sentinel absent from ``raw``; delimits placeholders.
        prose (str | None): ``raw`` with every fenced block replaced by its placeholder.
        blocks (list[ExtractedBlock]): Blocks lifted out of ``raw``, in source order.
        prose_normalized (bool): True once escapes in ``prose`` have been resolved.
        block_interiors (dict[int, str]): Normalized interior per block index.
        normalized (str | None): Final output once blocks have been reinjected.
        steps (list[BaseStep]): Steps that have been invoked on this context.
        flow (FlowControl): Halt request, if any.
    """

    raw: str
    sentinel: str
    prose: str | None = None
    blocks: list[ExtractedBlock] = field(default_factory=lambda: [])
    prose_normalized: bool = False
    block_interiors: dict[int, str] = field(default_factory=lambda: {})
    normalized: str | None = None
    steps: list[BaseStep] = field(default_factory=lambda: [])
    flow: FlowControl = field(default_factory=FlowControl)

    @classmethod
    def bootstrap(cls, raw: str | None) -> ContentContext:
        """Create a fresh context for ``raw`` (``None`` is treated as empty text)."""
        text = raw or ""
        return cls(raw=text, sentinel=pick_sentinel(text))

    @property
    def blocks_normalized(self) -> bool:
        """Return True when every extracted block has a normalized interior."""
        return len(self.block_interiors) == len(self.blocks)

    def request_halt(self, reason: str, at_step: str) -> None:
        """Ask the runner to stop after the current step."""
        self.flow.halt = True
        self.flow.reason = reason
        self.flow.at_step = at_step

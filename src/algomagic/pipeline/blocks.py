# topmark:header:start
#
#   project      : Algomagic
#   file         : blocks.py
#   file_relpath : src/algomagic/pipeline/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Value type for fenced code blocks lifted out of authored prose."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExtractedBlock:
    """A fenced code block captured before escape normalization.

    Attributes:
        index (int): Zero-based position of the block in the source text.
        language (str): First word of the fence info string (``""`` if none).
        raw_interior (str): Unprocessed interior lines joined with ``"\\n"``.
        opening (str): Exact opening fence line (indentation, fence, info string).
        closing (str | None): Exact closing fence line, or None when the block
            runs to the end of the input.
        has_body (bool): Whether the block has at least one interior line. Needed to
            tell an empty block from one holding a single blank line.
    """

    index: int
    language: str
    raw_interior: str
    opening: str
    closing: str | None
    has_body: bool

    @property
    def terminated(self) -> bool:
        """Return True if a closing fence was found."""
        return self.closing is not None

    def render(self, interior: str | None = None) -> str:
        """Return the fenced block text with ``interior`` (defaults to the raw interior).

        Args:
            interior (str | None): Replacement interior, typically the normalized one.

        Returns:
            str: Opening line, interior and closing line joined with ``"\\n"``.
        """
        body = self.raw_interior if interior is None else interior
        parts: list[str] = [self.opening]
        if self.has_body:
            parts.append(body)
        if self.closing is not None:
            parts.append(self.closing)
        return "\n".join(parts)

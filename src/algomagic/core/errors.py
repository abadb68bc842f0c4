# topmark:header:start
#
#   project      : Algomagic
#   file         : errors.py
#   file_relpath : src/algomagic/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Exceptions raised by the Algomagic library layers.

Usage:
    Library code raises these; the CLI maps them onto Click exceptions with
    stable exit codes (see `algomagic.cli.errors`).
"""

from __future__ import annotations


class AlgomagicError(Exception):
    """Base class for all Algomagic library errors."""


class ReinjectionError(AlgomagicError):
    """Placeholders and extracted code blocks are out of sync.

    This signals a pipeline invariant violation (extractor and reinjector have
    drifted), never a problem with the author's input.
    """


class RecordValidationError(AlgomagicError, ValueError):
    """A category or problem record is missing a required field or is malformed."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class FrontmatterError(AlgomagicError):
    """An MDX document has no (or unparseable) YAML frontmatter."""


class ConversionError(AlgomagicError):
    """An authoring file could not be converted to a record."""


class RenderError(AlgomagicError):
    """Rendered output could not be produced (for example an unloadable Markdown extension)."""

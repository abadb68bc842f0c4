# topmark:header:start
#
#   project      : Algomagic
#   file         : highlighter.py
#   file_relpath : src/algomagic/highlight/highlighter.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Per-line syntax highlighting for reference solutions.

Reference-solution code is normalized as a whole (the same ``\\\\n``
protection as for prose), split on real line breaks, and each non-blank line
is highlighted on its own. Lines are then joined with an explicit separator
(``<br>`` by default) so that line-break rendering never depends on
whitespace-sensitive CSS of the element the HTML is inserted into.

Each line is classified as a comment when, after leading whitespace, it starts
with the language's comment introducer. Classification is bookkeeping only:
comment and code lines go through the same highlighter.

Blank lines contribute an empty entry (and therefore just a separator); the
highlighter is never called on an empty string.

Leading indentation is emitted as ``&nbsp;`` entities by a post-processing
step scoped to each call, so indentation survives ``<br>``-joined output
without touching any shared Pygments state.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from algomagic.config.logging import get_logger
from algomagic.highlight.languages import get_language
from algomagic.pipeline.steps.normalizer import normalize_escapes

if TYPE_CHECKING:
    from pygments.lexer import Lexer

    from algomagic.config import Config
    from algomagic.config.logging import AlgomagicLogger
    from algomagic.highlight.languages import Language

logger: AlgomagicLogger = get_logger(__name__)

NBSP: str = "&nbsp;"


@dataclass(frozen=True, slots=True)
class CodeLine:
    """One line of a reference solution.

    Attributes:
        number (int): 1-based line number.
        is_comment (bool): Whether the line is a line comment in its language.
        raw_text (str): The line text after escape normalization.
        highlighted_html (str): HTML for the line; ``""`` for a blank line.
    """

    number: int
    is_comment: bool
    raw_text: str
    highlighted_html: str

    @property
    def is_blank(self) -> bool:
        """Return True if the line holds only whitespace."""
        return not self.raw_text.strip()


@dataclass(frozen=True, slots=True)
class HighlightResult:
    """Outcome of highlighting one reference solution.

    Attributes:
        language (str): Language identifier as requested.
        lines (tuple[CodeLine, ...]): Per-line results in order.
        html (str): Line HTML joined with the separator (none after the last line).
        highlighted (bool): False when the language was unknown and lines were
            only HTML-escaped.
    """

    language: str
    lines: tuple[CodeLine, ...]
    html: str
    highlighted: bool

    @property
    def comment_lines(self) -> tuple[int, ...]:
        """Return the 1-based numbers of comment lines."""
        return tuple(line.number for line in self.lines if line.is_comment)


def split_code_lines(code: str) -> list[str]:
    """Split normalized code on real line breaks.

    ``"\\r\\n"`` counts as one break, and a final line break terminates the last
    line instead of opening an empty one.
    """
    if not code:
        return []
    lines = [line.removesuffix("\r") for line in code.split("\n")]
    if code.endswith("\n"):
        lines.pop()
    return lines


class LineHighlighter:
    """Highlight reference-solution code one line at a time.

    Args:
        style (str): Pygments style name (used for inline styles).
        inline_styles (bool): Emit ``style`` attributes instead of CSS classes.
        line_separator (str): Markup placed between lines.
        tab_size (int): Tab width for leading-indentation expansion.
    """

    def __init__(
        self,
        *,
        style: str = "default",
        inline_styles: bool = True,
        line_separator: str = "<br>",
        tab_size: int = 4,
    ) -> None:
        try:
            self._formatter = HtmlFormatter(nowrap=True, noclasses=inline_styles, style=style)
        except ClassNotFound:
            logger.warning("Unknown Pygments style '%s'; using 'default'", style)
            self._formatter = HtmlFormatter(nowrap=True, noclasses=inline_styles)
        self.line_separator = line_separator
        self.tab_size = tab_size

    @classmethod
    def from_config(cls, config: Config) -> LineHighlighter:
        """Build a highlighter from the ``[highlight]`` settings of ``config``."""
        return cls(
            style=config.highlight_style,
            inline_styles=config.inline_styles,
            line_separator=config.line_separator,
            tab_size=config.tab_size,
        )

    @property
    def stylesheet(self) -> str:
        """Return CSS for class-based output (empty rules when inline styles are used)."""
        return self._formatter.get_style_defs(".highlight")

    def highlight(self, code: str | None, language: str | None) -> HighlightResult:
        """Highlight ``code`` written in ``language``.

        Args:
            code (str | None): Reference-solution code as stored (not yet normalized).
            language (str | None): Language name or alias.

        Returns:
            HighlightResult: Per-line results and the joined HTML fragment. Unknown
                languages fall back to escaped, unhighlighted text.
        """
        lang: Language | None = get_language(language)
        lexer: Lexer | None = None
        if lang is not None:
            try:
                lexer = get_lexer_by_name(lang.lexer, stripnl=False)
            except ClassNotFound:
                logger.warning("No Pygments lexer '%s' for %s", lang.lexer, lang.name)
        else:
            logger.info("Unknown language '%s'; rendering code as plain text", language)

        out: list[CodeLine] = []
        for number, text in enumerate(split_code_lines(normalize_escapes(code or "")), start=1):
            is_comment = lang.is_comment_line(text) if lang is not None else False
            out.append(
                CodeLine(
                    number=number,
                    is_comment=is_comment,
                    raw_text=text,
                    highlighted_html=self._render_line(text, lexer),
                )
            )

        lines = tuple(out)
        return HighlightResult(
            language=language or "",
            lines=lines,
            html=self.line_separator.join(line.highlighted_html for line in lines),
            highlighted=lexer is not None,
        )

    def _render_line(self, text: str, lexer: Lexer | None) -> str:
        if not text.strip():
            return ""
        body = text.lstrip()
        indent = text[: len(text) - len(body)]
        if lexer is None:
            rendered = html.escape(body, quote=False)
        else:
            rendered = highlight(body, lexer, self._formatter).rstrip("\n")
        return self._indent_html(indent) + rendered

    def _indent_html(self, indent: str) -> str:
        if not indent:
            return ""
        return NBSP * len(indent.expandtabs(self.tab_size))

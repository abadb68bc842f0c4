# topmark:header:start
#
#   project      : Algomagic
#   file         : html.py
#   file_relpath : src/algomagic/rendering/html.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Render problems to HTML.

Every piece of authored prose goes through the one normalization pipeline
(`algomagic.pipeline.normalize_content`) before Python-Markdown sees it.
Reference solutions go through the per-line highlighter instead, and their
copy text is derived from the stored code, never from the highlighted HTML.

`render_problem` raises on failure; `render_problem_page` is the page-level
boundary that turns any library error into a "content unavailable" fallback.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import markdown

from algomagic.config import Config
from algomagic.config.logging import get_logger
from algomagic.constants import CONTENT_UNAVAILABLE_HTML
from algomagic.core.errors import AlgomagicError, RenderError
from algomagic.highlight.clipboard import copy_format
from algomagic.highlight.highlighter import LineHighlighter
from algomagic.pipeline import normalize_content

if TYPE_CHECKING:
    from collections.abc import Sequence

    from algomagic.authoring.models import Problem
    from algomagic.config.logging import AlgomagicLogger
    from algomagic.highlight.highlighter import HighlightResult

logger: AlgomagicLogger = get_logger(__name__)

MARKDOWN_OUTPUT_FORMAT: Final[str] = "html5"


@dataclass(frozen=True, slots=True)
class RenderedSolution:
    """A highlighted reference solution and its copy-ready text."""

    language: str
    highlight: HighlightResult
    copy_text: str


@dataclass(frozen=True, slots=True)
class RenderedProblem:
    """HTML fragments for one problem page.

    Attributes:
        problem_id (str): Problem identifier.
        title (str): Problem title (plain text).
        description (str): One-line summary (plain text).
        content_html (str): Rendered problem statement.
        solution_idea_html (str): Rendered solution idea (``""`` when none).
        solutions (tuple[RenderedSolution, ...]): One entry per non-empty
            reference solution, Python first.
        available (bool): False for the fallback page.
    """

    problem_id: str
    title: str
    description: str
    content_html: str
    solution_idea_html: str
    solutions: tuple[RenderedSolution, ...] = ()
    available: bool = True


def render_markdown(text: str, *, extensions: Sequence[str] | None = None) -> str:
    """Render NormalizedContent to HTML with Python-Markdown.

    Args:
        text (str): Normalized Markdown text.
        extensions (Sequence[str] | None): Extension names; defaults to the
            configured ones.

    Returns:
        str: The HTML fragment (``""`` for empty input).

    Raises:
        RenderError: If an extension cannot be loaded.
    """
    if not text:
        return ""
    names: list[str] = list(extensions if extensions is not None else Config().markdown_extensions)
    try:
        return markdown.markdown(text, extensions=names, output_format=MARKDOWN_OUTPUT_FORMAT)
    except (ImportError, AttributeError) as exc:
        raise RenderError(f"Cannot load Markdown extensions {names}: {exc}") from exc


def render_content(raw: str | None, *, extensions: Sequence[str] | None = None) -> str:
    """Normalize authored content and render it to HTML."""
    return render_markdown(normalize_content(raw), extensions=extensions)


def render_problem(problem: Problem, *, config: Config | None = None) -> RenderedProblem:
    """Render the prose and reference solutions of ``problem``.

    Raises:
        AlgomagicError: If normalization or rendering fails.
    """
    config = config or Config()
    highlighter = LineHighlighter.from_config(config)
    extensions = config.markdown_extensions

    solutions: list[RenderedSolution] = []
    for language, code in (("python", problem.python_code), ("cpp", problem.cpp_code)):
        if not code.strip():
            continue
        solutions.append(
            RenderedSolution(
                language=language,
                highlight=highlighter.highlight(code, language),
                copy_text=copy_format(code),
            )
        )

    return RenderedProblem(
        problem_id=problem.id,
        title=problem.title,
        description=problem.description,
        content_html=render_content(problem.content, extensions=extensions),
        solution_idea_html=render_content(problem.solution_idea, extensions=extensions),
        solutions=tuple(solutions),
    )


def render_problem_page(problem: Problem, *, config: Config | None = None) -> RenderedProblem:
    """Render ``problem``, falling back to a "content unavailable" page on error.

    Errors are logged with their traceback and never propagate.
    """
    try:
        return render_problem(problem, config=config)
    except AlgomagicError:
        logger.exception("Failed to render problem %s", problem.id)
        return RenderedProblem(
            problem_id=problem.id,
            title=problem.title,
            description=problem.description,
            content_html=CONTENT_UNAVAILABLE_HTML,
            solution_idea_html="",
            available=False,
        )


def page_html(rendered: RenderedProblem) -> str:
    """Assemble a standalone HTML document from a rendered problem."""
    title = html.escape(rendered.title)
    parts: list[str] = [
        "<!DOCTYPE html>",
        '<html lang="ko">',
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{title}</title>",
        f'<meta name="description" content="{html.escape(rendered.description)}">',
        "</head>",
        "<body>",
        f"<h1>{title}</h1>",
        f'<section class="problem-content">{rendered.content_html}</section>',
    ]
    if rendered.solution_idea_html:
        parts.append(f'<section class="solution-idea">{rendered.solution_idea_html}</section>')
    for solution in rendered.solutions:
        lang = html.escape(solution.language)
        parts.append(
            f'<section class="solution" data-language="{lang}">'
            '<pre class="highlight" style="white-space: pre-wrap"><code>'
            f"{solution.highlight.html}</code></pre>"
            f'<textarea class="copy-source" hidden readonly>{html.escape(solution.copy_text)}'
            "</textarea></section>"
        )
    parts.extend(["</body>", "</html>"])
    return "\n".join(parts) + "\n"

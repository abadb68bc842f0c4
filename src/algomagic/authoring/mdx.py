# topmark:header:start
#
#   project      : Algomagic
#   file         : mdx.py
#   file_relpath : src/algomagic/authoring/mdx.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Convert a problem MDX document into a `Problem` record.

Document shape:

    ---
    title: "Hello World"
    description: "Print a greeting"
    solutionIdea: |
      Use print.
    pythonCode: |
      print("Hello World")
    cppCode: |
      ...
    ---

    ## 입력

    ...

    ## 예제 입력

    ```
    (sample input)
    ```

The frontmatter is YAML. The problem id is the file stem; difficulty and
category are the two directory names following ``problems`` in the file path.

Section lookup ignores headings inside fenced code blocks: the body is run
through the same block extractor as the normalization pipeline, and headings
are searched in the prose only.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Final

import yaml

from algomagic.authoring.models import Example, Problem
from algomagic.config.logging import get_logger
from algomagic.config.model import SectionHeadings
from algomagic.core.errors import FrontmatterError
from algomagic.pipeline.steps.extractor import extract_blocks
from algomagic.pipeline.tokens import pick_sentinel, placeholder_pattern

if TYPE_CHECKING:
    from pathlib import Path

    from algomagic.config.logging import AlgomagicLogger
    from algomagic.pipeline.blocks import ExtractedBlock

logger: AlgomagicLogger = get_logger(__name__)

DEFAULT_TITLE: Final[str] = "제목 없음"
DEFAULT_DESCRIPTION: Final[str] = "설명 없음"
DEFAULT_DIFFICULTY: Final[str] = "tutorial"
DEFAULT_CATEGORY: Final[str] = "output"
PROBLEMS_DIR_NAME: Final[str] = "problems"

_RE_FRONTMATTER: Final[re.Pattern[str]] = re.compile(
    r"\A---[ \t]*\r?\n(?:(?P<yaml>.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)
_RE_HEADING: Final[re.Pattern[str]] = re.compile(r"^(?P<marks>#{1,6})[ \t]+(?P<title>.*?)[ \t]*$")


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split an MDX document into its YAML frontmatter and body.

    Args:
        text (str): Full document text.

    Returns:
        tuple[dict[str, Any], str]: The frontmatter mapping (empty when the block
            is empty) and the body with surrounding whitespace stripped.

    Raises:
        FrontmatterError: If the document has no frontmatter block, the YAML is
            invalid, or it is not a mapping.
    """
    text = text.removeprefix("\ufeff")
    m = _RE_FRONTMATTER.match(text)
    if m is None:
        raise FrontmatterError("No frontmatter block found")
    try:
        data = yaml.safe_load(m.group("yaml") or "")
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"Invalid YAML frontmatter: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontmatterError(
            f"Frontmatter must be a mapping, got {type(data).__name__}"
        )
    return data, text[m.end() :].strip()


def split_sections(body: str) -> dict[str, str]:
    """Return the text under each level-2 heading of ``body``.

    A section ends at the next heading of level 1 or 2. Headings inside fenced
    code blocks do not count. When a heading occurs twice the first one wins.

    Args:
        body (str): Document body without frontmatter.

    Returns:
        dict[str, str]: Heading title to section text (stripped), fenced blocks
            restored verbatim.
    """
    sentinel: str = pick_sentinel(body)
    prose, blocks = extract_blocks(body, sentinel)

    sections: dict[str, list[str]] = {}
    current: list[str] | None = None
    for line in prose.split("\n"):
        m = _RE_HEADING.match(line)
        if m is not None and len(m.group("marks")) <= 2:
            title = m.group("title")
            if len(m.group("marks")) == 2 and title not in sections:
                current = sections[title] = []
            else:
                current = None
            continue
        if current is not None:
            current.append(line)

    return {
        title: _restore_blocks("\n".join(lines), blocks, sentinel).strip()
        for title, lines in sections.items()
    }


def _restore_blocks(text: str, blocks: list[ExtractedBlock], sentinel: str) -> str:
    return placeholder_pattern(sentinel).sub(
        lambda m: blocks[int(m.group("index"))].render(), text
    )


def first_fenced_interior(section: str) -> str | None:
    """Return the interior of the first fenced block in ``section``, or None."""
    _, blocks = extract_blocks(section, pick_sentinel(section))
    if not blocks:
        return None
    return blocks[0].raw_interior


def path_taxonomy(path: Path) -> tuple[str, str]:
    """Return ``(difficulty, category)`` derived from ``path``.

    The two directory names following the last ``problems`` component are used;
    the defaults apply when the path has no such components.
    """
    parts: tuple[str, ...] = path.parts
    if PROBLEMS_DIR_NAME in parts:
        idx = len(parts) - 1 - parts[::-1].index(PROBLEMS_DIR_NAME)
        # Both names must be directories, not the file itself.
        if idx + 3 < len(parts):
            return parts[idx + 1], parts[idx + 2]
    return DEFAULT_DIFFICULTY, DEFAULT_CATEGORY


def _text(frontmatter: dict[str, Any], key: str, default: str = "") -> str:
    value = frontmatter.get(key)
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def problem_from_mdx(
    text: str,
    path: Path,
    *,
    headings: SectionHeadings | None = None,
) -> Problem:
    """Convert MDX text into a `Problem`.

    Args:
        text (str): Full MDX document.
        path (Path): Source path; provides the id, difficulty and category.
        headings (SectionHeadings | None): Section headings to look for.

    Returns:
        Problem: The converted record.

    Raises:
        FrontmatterError: If the frontmatter is missing or invalid.
    """
    headings = headings or SectionHeadings()
    frontmatter, body = parse_frontmatter(text)
    difficulty, category = path_taxonomy(path)
    sections: dict[str, str] = split_sections(body)

    order = frontmatter.get("order")
    if isinstance(order, bool) or not isinstance(order, int):
        if order is not None:
            logger.warning("%s: ignoring non-integer order %r", path, order)
        order = 1

    example_input = first_fenced_interior(sections.get(headings.example_input, ""))
    example_output = first_fenced_interior(sections.get(headings.example_output, ""))
    if example_input is not None and example_output is not None:
        examples = (Example(input=example_input.strip(), output=example_output.strip()),)
    else:
        logger.info("%s: no example pair found; recording an empty example", path)
        examples = (Example(input="", output=""),)

    return Problem(
        id=path.stem,
        title=_text(frontmatter, "title", DEFAULT_TITLE),
        description=_text(frontmatter, "description", DEFAULT_DESCRIPTION),
        difficulty=difficulty,
        category=category,
        order=order,
        content=body,
        solution_idea=_text(frontmatter, "solutionIdea"),
        python_code=_text(frontmatter, "pythonCode"),
        cpp_code=_text(frontmatter, "cppCode"),
        input=sections.get(headings.input, ""),
        output=sections.get(headings.output, ""),
        examples=examples,
        notes=sections.get(headings.notes) or None,
    )


def load_problem_mdx(path: Path, *, headings: SectionHeadings | None = None) -> Problem:
    """Read ``path`` (UTF-8) and convert it with `problem_from_mdx`."""
    logger.debug("Converting problem MDX: %s", path)
    return problem_from_mdx(path.read_text(encoding="utf-8"), path, headings=headings)

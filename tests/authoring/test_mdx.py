# topmark:header:start
#
#   project      : Algomagic
#   file         : test_mdx.py
#   file_relpath : tests/authoring/test_mdx.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Tests for problem MDX conversion.

Covers frontmatter parsing, section lookup (headings inside fences ignored),
taxonomy from the file path, and the defaults applied to missing fields.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from algomagic.authoring.mdx import (
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    first_fenced_interior,
    load_problem_mdx,
    parse_frontmatter,
    path_taxonomy,
    problem_from_mdx,
    split_sections,
)
from algomagic.config import SectionHeadings
from algomagic.core.errors import FrontmatterError
from tests.conftest import mark_authoring, parametrize

MDX: str = """---
title: "Hello World"
description: "Print a greeting"
order: 3
solutionIdea: |
  Use `print`.
pythonCode: |
  # greet
  print("Hello World")
cppCode: |
  #include <iostream>
---

Print the greeting.

## 입력

No input.

## 출력

`Hello World`

## 예제 입력

```
(empty)
```

## 예제 출력

```
Hello World
```

## 노트

```python
## not a heading
print(1)
```
"""


@mark_authoring
def test_parse_frontmatter_splits_yaml_and_body() -> None:
    data, body = parse_frontmatter("---\ntitle: X\n---\n\nBody\n")
    assert data == {"title": "X"}
    assert body == "Body"


@mark_authoring
def test_parse_frontmatter_accepts_bom_and_crlf() -> None:
    data, body = parse_frontmatter("\ufeff---\r\ntitle: X\r\n---\r\nBody")
    assert data == {"title": "X"}
    assert body == "Body"


@mark_authoring
def test_empty_frontmatter_is_an_empty_mapping() -> None:
    data, body = parse_frontmatter("---\n---\nBody")
    assert data == {}
    assert body == "Body"


@mark_authoring
@parametrize(
    "text",
    [
        "No frontmatter here",
        "---\ntitle: [unclosed\n---\n",
        "---\n- a\n- b\n---\n",
    ],
)
def test_bad_frontmatter_raises(text: str) -> None:
    with pytest.raises(FrontmatterError):
        parse_frontmatter(text)


@mark_authoring
def test_split_sections_ignores_headings_inside_fences() -> None:
    _, body = parse_frontmatter(MDX)
    sections = split_sections(body)
    assert list(sections) == ["입력", "출력", "예제 입력", "예제 출력", "노트"]
    assert sections["입력"] == "No input."
    assert "## not a heading" in sections["노트"]


@mark_authoring
def test_section_ends_at_level_one_heading_and_first_wins() -> None:
    sections = split_sections("## A\none\n# Top\nlost\n## A\ntwo\n### Sub\nkept")
    assert sections == {"A": "one"}


@mark_authoring
def test_level_three_heading_stays_inside_section() -> None:
    sections = split_sections("## A\none\n### Sub\nkept")
    assert sections == {"A": "one\n### Sub\nkept"}


@mark_authoring
def test_first_fenced_interior() -> None:
    assert first_fenced_interior("text\n```\n1 2\n```\n```\nlater\n```") == "1 2"
    assert first_fenced_interior("no block") is None


@mark_authoring
@parametrize(
    ("path", "expected"),
    [
        ("content/problems/beginner/loops/sum.mdx", ("beginner", "loops")),
        ("problems/a/b/c/x.mdx", ("a", "b")),
        ("content/problems/beginner/x.mdx", ("tutorial", "output")),
        ("elsewhere/x.mdx", ("tutorial", "output")),
    ],
)
def test_path_taxonomy(path: str, expected: tuple[str, str]) -> None:
    assert path_taxonomy(Path(path)) == expected


@mark_authoring
def test_problem_from_mdx_fills_every_field() -> None:
    problem = problem_from_mdx(MDX, Path("content/problems/tutorial/output/hello-world.mdx"))

    assert problem.id == "hello-world"
    assert (problem.difficulty, problem.category) == ("tutorial", "output")
    assert problem.title == "Hello World"
    assert problem.order == 3
    assert problem.solution_idea == "Use `print`."
    assert problem.python_code == '# greet\nprint("Hello World")'
    assert problem.cpp_code == "#include <iostream>"
    assert problem.input == "No input."
    assert problem.output == "`Hello World`"
    assert problem.examples[0].input == "(empty)"
    assert problem.examples[0].output == "Hello World"
    assert problem.notes is not None
    assert problem.notes.startswith("```python")
    assert problem.content.startswith("Print the greeting.")


@mark_authoring
def test_missing_fields_get_defaults() -> None:
    problem = problem_from_mdx("---\norder: first\n---\nBody", Path("x.mdx"))
    assert problem.title == DEFAULT_TITLE
    assert problem.description == DEFAULT_DESCRIPTION
    assert problem.order == 1
    assert problem.examples[0].input == ""
    assert problem.notes is None
    assert problem.python_code == ""


@mark_authoring
def test_custom_headings() -> None:
    text = (
        "---\ntitle: T\n---\n"
        "## Input\nnums\n"
        "## Sample Input\n```\n1\n```\n"
        "## Sample Output\n```\n2\n```"
    )
    headings = SectionHeadings(
        input="Input", example_input="Sample Input", example_output="Sample Output"
    )
    problem = problem_from_mdx(text, Path("p.mdx"), headings=headings)
    assert problem.input == "nums"
    assert (problem.examples[0].input, problem.examples[0].output) == ("1", "2")


@mark_authoring
def test_load_problem_mdx_reads_utf8(tmp_path: Path) -> None:
    path = tmp_path / "problems" / "tutorial" / "output" / "hello.mdx"
    path.parent.mkdir(parents=True)
    path.write_text(MDX, encoding="utf-8")
    assert load_problem_mdx(path).id == "hello"

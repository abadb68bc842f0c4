# topmark:header:start
#
#   project      : Algomagic
#   file         : test_extractor.py
#   file_relpath : tests/pipeline/test_extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Tests for the code-block extractor.

Fences are recognized only when they start a line (after at most three spaces
of indentation). Each block is replaced by exactly one placeholder line.
"""

from __future__ import annotations

from algomagic.pipeline.steps.extractor import extract_blocks
from algomagic.pipeline.tokens import pick_sentinel, placeholder_pattern, placeholder_token
from tests.conftest import mark_pipeline, parametrize

SENTINEL: str = pick_sentinel("")


@mark_pipeline
def test_no_blocks_leaves_prose_untouched() -> None:
    text = "Just prose.\nSecond line with ``inline`` code."
    prose, blocks = extract_blocks(text, SENTINEL)
    assert prose == text
    assert blocks == []


@mark_pipeline
def test_single_block_captures_language_and_interior() -> None:
    text = "Intro\n```cpp\nint x = 1;\n// comment\n```\nOutro"
    prose, blocks = extract_blocks(text, SENTINEL)

    assert prose == f"Intro\n{placeholder_token(SENTINEL, 0)}\nOutro"
    assert len(blocks) == 1
    block = blocks[0]
    assert block.index == 0
    assert block.language == "cpp"
    assert block.raw_interior == "int x = 1;\n// comment"
    assert block.opening == "```cpp"
    assert block.closing == "```"
    assert block.terminated


@mark_pipeline
def test_info_string_keeps_first_word_as_language() -> None:
    _, blocks = extract_blocks("```python title=demo.py\nx\n```", SENTINEL)
    assert blocks[0].language == "python"
    assert blocks[0].opening == "```python title=demo.py"


@mark_pipeline
def test_consecutive_blocks_get_increasing_indices() -> None:
    text = "```\nA\n```\n```\nB\n```"
    prose, blocks = extract_blocks(text, SENTINEL)
    assert [b.index for b in blocks] == [0, 1]
    assert [b.raw_interior for b in blocks] == ["A", "B"]
    assert [int(m.group("index")) for m in placeholder_pattern(SENTINEL).finditer(prose)] == [0, 1]


@mark_pipeline
@parametrize(
    "line",
    [
        "Use ``` to open a fence.",
        "text ```python inline",
        "    ```",  # four spaces: indented code, not a fence
        "```x```",  # inline code at line start
    ],
)
def test_backticks_that_do_not_start_a_fence_are_prose(line: str) -> None:
    prose, blocks = extract_blocks(f"{line}\nmore", SENTINEL)
    assert blocks == []
    assert prose == f"{line}\nmore"


@mark_pipeline
def test_unterminated_block_runs_to_end_of_input() -> None:
    text = "Before\n```python\nprint(1)\nprint(2)"
    prose, blocks = extract_blocks(text, SENTINEL)

    assert prose == f"Before\n{placeholder_token(SENTINEL, 0)}"
    assert blocks[0].raw_interior == "print(1)\nprint(2)"
    assert blocks[0].closing is None
    assert not blocks[0].terminated


@mark_pipeline
def test_shorter_fence_does_not_close_longer_one() -> None:
    text = "````md\n```\ninner\n```\n````"
    _, blocks = extract_blocks(text, SENTINEL)
    assert len(blocks) == 1
    assert blocks[0].raw_interior == "```\ninner\n```"
    assert blocks[0].closing == "````"


@mark_pipeline
def test_tilde_fence_is_closed_only_by_tildes() -> None:
    text = "~~~\na\n```\n~~~"
    _, blocks = extract_blocks(text, SENTINEL)
    assert blocks[0].raw_interior == "a\n```"


@mark_pipeline
def test_empty_block_differs_from_block_with_blank_line() -> None:
    _, empty = extract_blocks("```\n```", SENTINEL)
    _, blank = extract_blocks("```\n\n```", SENTINEL)
    assert not empty[0].has_body
    assert blank[0].has_body
    assert empty[0].render() == "```\n```"
    assert blank[0].render() == "```\n\n```"


@mark_pipeline
def test_escapes_inside_block_are_not_touched_by_extraction() -> None:
    _, blocks = extract_blocks('```python\nprint("a\\nb")\n```', SENTINEL)
    assert blocks[0].raw_interior == 'print("a\\nb")'

# topmark:header:start
#
#   project      : Algomagic
#   file         : test_mdc.py
#   file_relpath : tests/authoring/test_mdc.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Tests for category MDC conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from algomagic.authoring.mdc import category_from_mdc, load_category_mdc, longest_json_block
from algomagic.core.errors import ConversionError, RecordValidationError
from tests.conftest import mark_authoring

if TYPE_CHECKING:
    from pathlib import Path

MDC: str = """# Output category

A tiny example:

```json
{"id": "x"}
```

The data:

```JSON
{
  "id": "output",
  "title": "출력",
  "description": "Printing to the console",
  "difficulty": "tutorial",
  "iconId": "terminal",
  "order": 2
}
```

```python
print("a much longer block that is not json at all, so it is never picked")
```
"""


@mark_authoring
def test_longest_json_block_wins() -> None:
    block = longest_json_block(MDC)
    assert block is not None
    assert '"id": "output"' in block


@mark_authoring
def test_first_of_equally_long_blocks_wins() -> None:
    text = '```json\n{"a": 1}\n```\n```json\n{"b": 2}\n```'
    assert longest_json_block(text) == '{"a": 1}'


@mark_authoring
def test_category_from_mdc() -> None:
    category = category_from_mdc(MDC)
    assert category.id == "output"
    assert category.title == "출력"
    assert category.order == 2


@mark_authoring
def test_missing_json_block_raises_conversion_error() -> None:
    with pytest.raises(ConversionError):
        category_from_mdc("# Nothing\n```python\nx\n```")


@mark_authoring
def test_invalid_category_json_raises_validation_error() -> None:
    with pytest.raises(RecordValidationError, match="iconId"):
        category_from_mdc(
            '```json\n{"id": "a", "title": "t", "description": "d", '
            '"difficulty": "x", "order": 1}\n```'
        )


@mark_authoring
def test_load_category_mdc(tmp_path: Path) -> None:
    path = tmp_path / "output.mdc"
    path.write_text(MDC, encoding="utf-8")
    assert load_category_mdc(path).icon_id == "terminal"

# topmark:header:start
#
#   project      : Algomagic
#   file         : test_models.py
#   file_relpath : tests/authoring/test_models.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Tests for category and problem records (validation, JSON shape, paths)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from algomagic.authoring.models import (
    CATEGORY_REQUIRED_FIELDS,
    PROBLEM_REQUIRED_FIELDS,
    Category,
    Example,
    Problem,
    dump_record,
    write_record,
)
from algomagic.core.errors import RecordValidationError
from tests.conftest import CATEGORY_DICT, category_dict, mark_authoring, parametrize, problem_dict


@mark_authoring
def test_category_from_dict_maps_camel_case() -> None:
    category = Category.from_dict(CATEGORY_DICT)
    assert category.icon_id == "terminal"
    assert category.to_dict() == CATEGORY_DICT


@mark_authoring
@parametrize("missing", CATEGORY_REQUIRED_FIELDS)
def test_category_missing_field_is_named(missing: str) -> None:
    data = category_dict()
    del data[missing]
    with pytest.raises(RecordValidationError, match=f"Missing required field: {missing}") as info:
        Category.from_dict(data)
    assert info.value.field == missing


@mark_authoring
def test_first_missing_field_is_reported_in_fixed_order() -> None:
    data = problem_dict()
    del data["examples"]
    del data["title"]
    with pytest.raises(RecordValidationError) as info:
        Problem.from_dict(data)
    assert info.value.field == "title"


@mark_authoring
@parametrize("missing", PROBLEM_REQUIRED_FIELDS)
def test_problem_missing_field_is_rejected(missing: str) -> None:
    data = problem_dict()
    del data[missing]
    with pytest.raises(RecordValidationError):
        Problem.from_dict(data)


@mark_authoring
@parametrize(("key", "value"), [("order", "1"), ("order", True), ("title", 3), ("cppCode", None)])
def test_mistyped_fields_are_rejected(key: str, value: Any) -> None:
    with pytest.raises(RecordValidationError, match=key):
        Problem.from_dict(problem_dict(**{key: value}))


@mark_authoring
@parametrize("examples", [[], "x", [1]])
def test_examples_must_be_a_non_empty_list_of_objects(examples: Any) -> None:
    with pytest.raises(RecordValidationError):
        Problem.from_dict(problem_dict(examples=examples))


@mark_authoring
def test_problem_round_trips_through_json() -> None:
    data = problem_dict(notes="Mind the newline.")
    data["examples"] = [{"input": "1", "output": "2", "explanation": "add one"}]
    problem = Problem.from_json(json.dumps(data))
    assert problem.examples == (Example("1", "2", "add one"),)
    assert json.loads(dump_record(problem)) == data


@mark_authoring
def test_optional_fields_are_omitted_when_unset() -> None:
    out = Problem.from_dict(problem_dict()).to_dict()
    assert "notes" not in out
    assert "explanation" not in out["examples"][0]


@mark_authoring
@parametrize("text", ["not json", "[1, 2]", '"string"'])
def test_from_json_rejects_non_objects(text: str) -> None:
    with pytest.raises(RecordValidationError):
        Category.from_json(text)


@mark_authoring
def test_relative_paths_follow_data_layout() -> None:
    assert Category.from_dict(CATEGORY_DICT).relative_json_path() == Path(
        "categories/tutorial/output.json"
    )
    assert Problem.from_dict(problem_dict()).relative_json_path() == Path(
        "problems/tutorial/output/hello-world.json"
    )


@mark_authoring
def test_dump_record_keeps_non_ascii_and_ends_with_newline() -> None:
    text = dump_record(Category.from_dict(category_dict(title="출력")))
    assert "출력" in text
    assert text.endswith("}\n")


@mark_authoring
def test_write_record_creates_parent_directories(tmp_path: Path) -> None:
    path = write_record(Problem.from_dict(problem_dict()), tmp_path / "data")
    assert path == tmp_path / "data" / "problems" / "tutorial" / "output" / "hello-world.json"
    assert json.loads(path.read_text(encoding="utf-8"))["id"] == "hello-world"

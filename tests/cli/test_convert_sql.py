# topmark:header:start
#
#   project      : Algomagic
#   file         : test_convert_sql.py
#   file_relpath : tests/cli/test_convert_sql.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Tests for `algomagic convert` and `algomagic sql`."""

from __future__ import annotations

import json
from pathlib import Path

from algomagic.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import category_dict, mark_cli, write_json

MDX: str = '---\ntitle: "Sum"\norder: 2\npythonCode: |\n  print(1 + 2)\n---\n\nAdd two numbers.\n'

MDC: str = (
    "# Output\n\n```json\n{}\n```\n\n```json\n"
    + json.dumps(category_dict(), ensure_ascii=False)
    + "\n```\n"
)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@mark_cli
def test_convert_problem_writes_json_under_data_dir(tmp_path: Path) -> None:
    _write(tmp_path / "content" / "problems" / "beginner" / "math" / "sum.mdx", MDX)
    result = run_cli_in(
        tmp_path, ["convert", "problem", "content/problems/beginner/math/sum.mdx"]
    )
    assert_SUCCESS(result)

    json_path = tmp_path / "data" / "problems" / "beginner" / "math" / "sum.json"
    assert Path(result.stdout.strip()) == Path("data/problems/beginner/math/sum.json")
    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert data["id"] == "sum"
    assert data["title"] == "Sum"
    assert data["pythonCode"] == "print(1 + 2)"
    assert not json_path.with_suffix(".sql").exists()


@mark_cli
def test_convert_category_honors_data_dir_option(tmp_path: Path) -> None:
    _write(tmp_path / "output.mdc", MDC)
    result = run_cli_in(tmp_path, ["convert", "category", "output.mdc", "--data-dir", "out"])
    assert_SUCCESS(result)
    data = json.loads(
        (tmp_path / "out" / "categories" / "tutorial" / "output.json").read_text(encoding="utf-8")
    )
    assert data["iconId"] == "terminal"


@mark_cli
def test_convert_category_without_json_block_fails(tmp_path: Path) -> None:
    _write(tmp_path / "empty.mdc", "# Nothing here\n")
    result = run_cli_in(tmp_path, ["convert", "category", "empty.mdc"])
    assert result.exit_code == ExitCode.FAILURE, result.output
    assert "empty.mdc" in result.output


@mark_cli
def test_convert_missing_source(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["convert", "problem", "nope.mdx"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@mark_cli
def test_sql_writes_script_next_to_json(tmp_path: Path) -> None:
    write_json(tmp_path / "output.json", category_dict(title="It's output"))
    result = run_cli_in(tmp_path, ["sql", "category", "output.json"])
    assert_SUCCESS(result)
    script = (tmp_path / "output.sql").read_text(encoding="utf-8")
    assert script.startswith("INSERT INTO categories")
    assert "'It''s output'" in script


@mark_cli
def test_sql_stdout(tmp_path: Path) -> None:
    write_json(tmp_path / "output.json", category_dict())
    result = run_cli_in(tmp_path, ["sql", "category", "output.json", "--stdout"])
    assert_SUCCESS(result)
    assert "INSERT INTO categories" in result.stdout
    assert not (tmp_path / "output.sql").exists()


@mark_cli
def test_sql_rejects_invalid_record(tmp_path: Path) -> None:
    write_json(tmp_path / "output.json", {"id": "output"})
    result = run_cli_in(tmp_path, ["sql", "category", "output.json"])
    assert result.exit_code == ExitCode.FAILURE, result.output
    assert "invalid record" in result.output

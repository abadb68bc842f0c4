# topmark:header:start
#
#   project      : Algomagic
#   file         : test_render.py
#   file_relpath : tests/cli/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Tests for `algomagic render`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import algomagic.rendering.html as html_mod
from algomagic.cli.exit_codes import ExitCode
from algomagic.core.errors import RenderError
from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, problem_dict, write_json

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


@mark_cli
def test_render_to_stdout(tmp_path: Path) -> None:
    write_json(tmp_path / "hello.json", problem_dict())
    result = run_cli_in(tmp_path, ["render", "hello.json"])
    assert_SUCCESS(result)
    assert result.stdout.startswith("<!DOCTYPE html>")
    assert "<title>Hello World</title>" in result.stdout
    assert "<strong>Hello World</strong>" in result.stdout


@mark_cli
def test_render_to_output_file(tmp_path: Path) -> None:
    write_json(tmp_path / "hello.json", problem_dict())
    result = run_cli_in(tmp_path, ["render", "hello.json", "-o", "hello.html"])
    assert_SUCCESS(result)
    assert result.stdout == ""
    page = (tmp_path / "hello.html").read_text(encoding="utf-8")
    assert "Hello World" in page


@mark_cli
def test_render_invalid_json_fails(tmp_path: Path) -> None:
    (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "bad.json"])
    assert result.exit_code == ExitCode.FAILURE, result.output
    assert "invalid record" in result.output


@mark_cli
def test_render_missing_required_field_fails(tmp_path: Path) -> None:
    data = problem_dict()
    del data["title"]
    write_json(tmp_path / "p.json", data)
    result = run_cli_in(tmp_path, ["render", "p.json"])
    assert result.exit_code == ExitCode.FAILURE, result.output


@mark_cli
def test_render_failure_writes_fallback_page(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _boom(*_args: object, **_kwargs: object) -> str:
        raise RenderError("markdown exploded")

    monkeypatch.setattr(html_mod, "render_content", _boom)
    write_json(tmp_path / "hello.json", problem_dict())
    result = run_cli_in(tmp_path, ["render", "hello.json"])
    assert_SUCCESS(result)
    assert "<!DOCTYPE html>" in result.stdout
    assert "content unavailable" in result.stderr


@mark_cli
def test_render_from_catalog(tmp_path: Path) -> None:
    write_json(
        tmp_path / "data" / "problems" / "tutorial" / "output" / "hello-world.json",
        problem_dict(),
    )
    result = run_cli_in(
        tmp_path, ["render", "--from-catalog", "tutorial/output/hello-world"]
    )
    assert_SUCCESS(result)
    assert "<title>Hello World</title>" in result.stdout


@mark_cli
def test_render_from_catalog_unknown_problem(tmp_path: Path) -> None:
    write_json(
        tmp_path / "data" / "problems" / "tutorial" / "output" / "hello-world.json",
        problem_dict(),
    )
    result = run_cli_in(tmp_path, ["render", "--from-catalog", "tutorial/output/nope"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "no such problem" in result.output


@mark_cli
def test_render_from_catalog_malformed_reference(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", "--from-catalog", "tutorial/hello-world"])
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
    assert "DIFFICULTY/CATEGORY/ID" in result.output

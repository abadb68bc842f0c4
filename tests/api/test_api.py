# topmark:header:start
#
#   project      : Algomagic
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Tests for the public API surface (`algomagic.api`)."""

from __future__ import annotations

from algomagic import api
from algomagic.authoring.models import Problem
from algomagic.config import Config
from tests.conftest import make_config, mark_rendering, problem_dict


@mark_rendering
def test_public_names() -> None:
    assert set(api.__all__) == {
        "copy_format",
        "highlight_code",
        "normalize_content",
        "render_problem",
        "resolve_config",
    }


@mark_rendering
def test_resolve_config_accepts_mapping_config_or_none() -> None:
    assert api.resolve_config(None).line_separator == "<br>"
    assert api.resolve_config({"highlight": {"tab_size": 2}}).tab_size == 2
    frozen = make_config(tab_size=8)
    assert api.resolve_config(frozen) is frozen
    assert isinstance(api.resolve_config({}), Config)


@mark_rendering
def test_highlight_code_with_mapping_config() -> None:
    result = api.highlight_code(
        "# greet\\nprint('hi')",
        "python",
        config={"highlight": {"line_separator": "<br/>"}},
    )
    assert result.comment_lines == (1,)
    assert result.html.count("<br/>") == 1


@mark_rendering
def test_render_problem_never_raises_for_valid_records() -> None:
    rendered = api.render_problem(Problem.from_dict(problem_dict()))
    assert rendered.available
    assert rendered.problem_id == "hello-world"


@mark_rendering
def test_reexported_helpers() -> None:
    assert api.normalize_content("a\\nb") == "a\nb"
    assert api.copy_format("x\\\\n") == "x\\n"

# topmark:header:start
#
#   project      : Algomagic
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Pytest configuration for the Algomagic test suite.

This file sets up global fixtures, typed mark helpers and the logging
configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `algomagic.config.MutableConfig` (mutable), then
      `freeze()` into a `algomagic.config.Config`.
    - Do **not** mutate a frozen `Config`. Call `Config.thaw()`, edit the
      returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from algomagic.config import MutableConfig, logging

if TYPE_CHECKING:
    from pathlib import Path

    from algomagic.config import Config

F = TypeVar("F", bound=Callable[..., object])

# Decorator returning the callable it was given.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Return ``mark`` as a decorator whose result keeps the test's signature.

    Pyright loses the decorated function type through `pytest.MarkDecorator`;
    the cast restores it.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_highlight: DecoratorType[Any] = as_typed_mark(pytest.mark.highlight)
mark_authoring: DecoratorType[Any] = as_typed_mark(pytest.mark.authoring)
mark_rendering: DecoratorType[Any] = as_typed_mark(pytest.mark.rendering)
mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)
mark_catalog: DecoratorType[Any] = as_typed_mark(pytest.mark.catalog)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """`pytest.mark.parametrize` with the test signature preserved."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_algomagic_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ``ALGOMAGIC_LOG_LEVEL`` from leaking into tests."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything (TRACE and up) so `caplog` sees pipeline step records."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from the bundled defaults and overrides.

    Args:
        **overrides (Any): Attribute overrides applied to the mutable builder.

    Returns:
        Config: An immutable configuration snapshot.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


PROBLEM_DICT: dict[str, Any] = {
    "id": "hello-world",
    "title": "Hello World",
    "description": "Print a greeting",
    "difficulty": "tutorial",
    "category": "output",
    "order": 1,
    "content": "Print **Hello World**.\\nThat is all.",
    "solutionIdea": "Use `print`.",
    "pythonCode": '# greet\nprint("Hello World")',
    "cppCode": (
        "#include <iostream>\n"
        "int main() {\n"
        '    std::cout << "Hello World\\\\n";\n'
        "}"
    ),
    "input": "None.",
    "output": "Hello World",
    "examples": [{"input": "", "output": "Hello World"}],
}

CATEGORY_DICT: dict[str, Any] = {
    "id": "output",
    "title": "Output",
    "description": "Printing to the console",
    "difficulty": "tutorial",
    "iconId": "terminal",
    "order": 2,
}


def problem_dict(**overrides: Any) -> dict[str, Any]:
    """Return a copy of the sample problem mapping with ``overrides`` applied."""
    data: dict[str, Any] = json.loads(json.dumps(PROBLEM_DICT))
    data.update(overrides)
    return data


def category_dict(**overrides: Any) -> dict[str, Any]:
    """Return a copy of the sample category mapping with ``overrides`` applied."""
    data: dict[str, Any] = dict(CATEGORY_DICT)
    data.update(overrides)
    return data


def write_json(path: Path, data: Any) -> Path:
    """Write ``data`` as UTF-8 JSON to ``path`` (creating parents) and return it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    return path

# topmark:header:start
#
#   project      : Algomagic
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Nox sessions for Algomagic.

Sessions:
  - `lint` / `lint_fixall`: Ruff lint, optionally with autofix.
  - `format_check` / `format`: Ruff formatter, check or apply.
  - `qa`: pytest (fast tests) and pyright, once per supported Python.
  - `property_test`: the `hypothesis_slow` property tests only.
  - `package_check`: build sdist and wheel, then `twine check`.

`nox` alone runs lint and format_check.
"""

from __future__ import annotations

import pathlib
import re
import shutil
import sys
import tomllib
from typing import Any

import nox

PROJECT_ROOT: pathlib.Path = pathlib.Path(__file__).parent
CURRENT_PYTHON_VERSION: str = f"{sys.version_info.major}.{sys.version_info.minor}"
_PY_CLASSIFIER = re.compile(r"^Programming Language :: Python :: (\d+)\.(\d+)$")


def supported_pythons() -> list[str]:
    """Return the ``X.Y`` versions named in the pyproject classifiers.

    Read with `tomllib` at import time, before any session installs the
    project. Falls back to the running interpreter.
    """
    try:
        doc: dict[str, Any] = tomllib.loads(
            (PROJECT_ROOT / "pyproject.toml").read_text(encoding="utf-8")
        )
    except (OSError, tomllib.TOMLDecodeError):
        return [CURRENT_PYTHON_VERSION]
    classifiers = doc.get("project", {}).get("classifiers", [])
    found: set[tuple[int, int]] = set()
    for classifier in classifiers:
        match = _PY_CLASSIFIER.match(str(classifier))
        if match:
            found.add((int(match.group(1)), int(match.group(2))))
    return [f"{major}.{minor}" for major, minor in sorted(found)] or [CURRENT_PYTHON_VERSION]


PYTHONS: list[str] = supported_pythons()

nox.options.sessions = ["lint", "format_check"]


def _install_dev(session: nox.Session) -> None:
    session.install("-e", ".[dev]")


@nox.session
def lint(session: nox.Session) -> None:
    """Ruff lint."""
    _install_dev(session)
    session.run("ruff", "check", "src", "tests", "noxfile.py")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Ruff lint with ``--fix``."""
    _install_dev(session)
    session.run("ruff", "check", "--fix", "src", "tests", "noxfile.py")


@nox.session
def format_check(session: nox.Session) -> None:
    """Fail if Ruff would reformat anything."""
    _install_dev(session)
    session.run("ruff", "format", "--check", "src", "tests", "noxfile.py")


@nox.session
def format(session: nox.Session) -> None:  # noqa: A001
    """Reformat with Ruff."""
    _install_dev(session)
    session.run("ruff", "format", "src", "tests", "noxfile.py")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Fast test suite plus strict pyright for this interpreter."""
    _install_dev(session)
    session.run("pytest", "-q", "-m", "not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", session.python or CURRENT_PYTHON_VERSION)


@nox.session
def property_test(session: nox.Session) -> None:
    """Long-running Hypothesis properties of the escape pipeline."""
    _install_dev(session)
    session.run("pytest", "-vv", "-m", "hypothesis_slow", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build the distributions into a fresh ``dist/`` and validate their metadata."""
    session.install("build", "twine")
    dist = PROJECT_ROOT / "dist"
    shutil.rmtree(dist, ignore_errors=True)
    session.run("python", "-m", "build", "--sdist", "--wheel", "--outdir", str(dist))
    session.run("twine", "check", *(str(p) for p in sorted(dist.glob("*"))))

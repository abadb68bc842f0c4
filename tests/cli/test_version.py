# topmark:header:start
#
#   project      : Algomagic
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Tests for `algomagic version`."""

from __future__ import annotations

import json

from algomagic.constants import ALGOMAGIC_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_text() -> None:
    result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == ALGOMAGIC_VERSION


@mark_cli
def test_version_json() -> None:
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": ALGOMAGIC_VERSION}

# topmark:header:start
#
#   project      : Algomagic
#   file         : tokens.py
#   file_relpath : src/algomagic/pipeline/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Reserved tokens used while transforming authored text.

Tokens are delimited by a *sentinel* taken from the Unicode private use area.
The sentinel is chosen per text so that it never occurs in that text, which
makes a token impossible to confuse with anything the author wrote.
"""

from __future__ import annotations

import re
from typing import Final

from algomagic.constants import (
    CODE_BLOCK_TOKEN_NAME,
    DOUBLE_ESCAPE_TOKEN_NAME,
    SENTINEL_FIRST,
    SENTINEL_LAST,
)

__all__: list[str] = [
    "pick_sentinel",
    "placeholder_token",
    "placeholder_pattern",
    "double_escape_token",
]

_DEFAULT_SENTINEL: Final[str] = chr(SENTINEL_FIRST)


def pick_sentinel(*texts: str) -> str:
    """Return a private-use sentinel that does not occur in any given text.

    Normally a single character. Only when every private-use character is
    already present is the first one repeated, one longer than its longest
    run in the texts, so a token still cannot be spelled by the author.

    Args:
        *texts (str): Texts the sentinel must not occur in.

    Returns:
        str: The sentinel string.
    """
    if not any(_DEFAULT_SENTINEL in t for t in texts):
        return _DEFAULT_SENTINEL
    used: set[str] = set()
    for t in texts:
        used.update(ch for ch in t if SENTINEL_FIRST <= ord(ch) <= SENTINEL_LAST)
    for code in range(SENTINEL_FIRST, SENTINEL_LAST + 1):
        candidate = chr(code)
        if candidate not in used:
            return candidate
    run = re.compile(f"{re.escape(_DEFAULT_SENTINEL)}+")
    longest = max((len(m.group()) for t in texts for m in run.finditer(t)), default=0)
    return _DEFAULT_SENTINEL * (longest + 1)


def placeholder_token(sentinel: str, index: int) -> str:
    """Return the placeholder standing in for extracted block ``index``."""
    return f"{sentinel}{CODE_BLOCK_TOKEN_NAME}_{index}{sentinel}"


def placeholder_pattern(sentinel: str) -> re.Pattern[str]:
    """Return a pattern matching any placeholder built with ``sentinel``.

    The block index is captured in group ``index``.
    """
    s = re.escape(sentinel)
    return re.compile(rf"{s}{CODE_BLOCK_TOKEN_NAME}_(?P<index>\d+){s}")


def double_escape_token(sentinel: str) -> str:
    """Return the token that protects a literal double-backslash-n."""
    return f"{sentinel}{DOUBLE_ESCAPE_TOKEN_NAME}{sentinel}"

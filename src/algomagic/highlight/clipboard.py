# topmark:header:start
#
#   project      : Algomagic
#   file         : clipboard.py
#   file_relpath : src/algomagic/highlight/clipboard.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Copy-ready text for reference solutions.

The copy form is computed from the stored code string and never from the
highlighted HTML, so copying gives the same text whether or not a code panel
has been rendered.
"""

from __future__ import annotations

from algomagic.constants import DOUBLE_ESCAPED_NEWLINE, ESCAPED_NEWLINE


def copy_format(code: str | None) -> str:
    """Return ``code`` in the form a reader would paste into an editor.

    Every ``\\\\n`` (backslash, backslash, n) collapses to the two characters
    ``\\n``. Real line breaks are stored as real line breaks already and stay
    untouched.

    Args:
        code (str | None): Reference-solution code as stored.

    Returns:
        str: The copy-ready text (``""`` for ``None``).
    """
    if not code:
        return ""
    return code.replace(DOUBLE_ESCAPED_NEWLINE, ESCAPED_NEWLINE)

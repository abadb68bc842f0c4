# topmark:header:start
#
#   project      : Algomagic
#   file         : __main__.py
#   file_relpath : src/algomagic/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Module entry point for running Algomagic via ``python -m algomagic``.

Equivalent to the ``algomagic`` console script.

Examples:
    Normalize a content file::

        python -m algomagic normalize content.md
"""

from __future__ import annotations

from algomagic.cli.main import cli

if __name__ == "__main__":
    cli()

# topmark:header:start
#
#   project      : Algomagic
#   file         : __init__.py
#   file_relpath : src/algomagic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic package.

Algomagic prepares authored programming-problem content for display. It
resolves escape sequences in Markdown prose without disturbing fenced code,
highlights reference solutions line by line, converts authoring files into
JSON and SQL seed data, and exposes both a CLI and a small typed API.
"""

from __future__ import annotations

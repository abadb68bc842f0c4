# topmark:header:start
#
#   project      : Algomagic
#   file         : __init__.py
#   file_relpath : src/algomagic/authoring/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Authoring tools: convert MDX problems and MDC categories into JSON and SQL.

Authored files live under the content directory; converted JSON and SQL land
under the data directory. See `algomagic.authoring.batch` for whole-tree runs.
"""

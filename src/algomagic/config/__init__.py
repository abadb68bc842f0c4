# topmark:header:start
#
#   project      : Algomagic
#   file         : __init__.py
#   file_relpath : src/algomagic/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Algomagic configuration: immutable `Config`, mutable `MutableConfig` builder.

Build configs with `MutableConfig` (defaults, files, overrides), then
``freeze()`` into a `Config` for runtime use. Do not mutate a frozen `Config`;
``thaw()`` it, edit, and freeze again.
"""

from __future__ import annotations

from algomagic.config.model import Config, MutableConfig, SectionHeadings

__all__: list[str] = [
    "Config",
    "MutableConfig",
    "SectionHeadings",
]

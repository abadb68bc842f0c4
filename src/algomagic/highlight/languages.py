# topmark:header:start
#
#   project      : Algomagic
#   file         : languages.py
#   file_relpath : src/algomagic/highlight/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Registry of reference-solution languages.

Reference solutions come in a small, closed set of languages. Each language
knows its Pygments lexer and its line-comment introducer (``#`` for
pound-comment languages, ``//`` for C-style ones).
"""

from __future__ import annotations

from dataclasses import dataclass

from algomagic.config.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Language:
    """A reference-solution language.

    Attributes:
        name (str): Canonical identifier (e.g. ``"python"``).
        label (str): Human-readable label shown above the code panel.
        lexer (str): Pygments lexer alias.
        line_prefix (str): Line-comment introducer.
        aliases (tuple[str, ...]): Alternative identifiers accepted on lookup.
    """

    name: str
    label: str
    lexer: str
    line_prefix: str
    aliases: tuple[str, ...] = ()

    def is_comment_line(self, line: str) -> bool:
        """Return True if ``line`` starts with the comment prefix after leading whitespace."""
        return bool(self.line_prefix) and line.lstrip().startswith(self.line_prefix)


_registry: dict[str, Language] = {}


def register_language(language: Language) -> Language:
    """Register ``language`` under its name and aliases.

    Args:
        language (Language): The language to register.

    Returns:
        Language: The registered language (for module-level assignment).

    Raises:
        ValueError: If the name or an alias is already registered.
    """
    keys = [language.name, *language.aliases]
    for key in keys:
        if key.lower() in _registry:
            raise ValueError(f"Language key '{key}' is already registered.")
    logger.debug("Registering language %s (aliases: %s)", language.name, language.aliases)
    for key in keys:
        _registry[key.lower()] = language
    return language


def get_language(name: str | None) -> Language | None:
    """Look up a language by name or alias (case-insensitive); None if unknown."""
    if not name:
        return None
    return _registry.get(name.strip().lower())


def get_language_registry() -> dict[str, Language]:
    """Return a copy of the registry keyed by canonical name."""
    return {lang.name: lang for lang in _registry.values()}


PYTHON: Language = register_language(
    Language(
        name="python",
        label="Python",
        lexer="python",
        line_prefix="#",
        aliases=("py", "python3"),
    )
)

CPP: Language = register_language(
    Language(
        name="cpp",
        label="C++",
        lexer="cpp",
        line_prefix="//",
        aliases=("c++", "cc", "cxx"),
    )
)

C: Language = register_language(
    Language(
        name="c",
        label="C",
        lexer="c",
        line_prefix="//",
    )
)

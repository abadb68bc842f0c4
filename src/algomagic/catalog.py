# topmark:header:start
#
#   project      : Algomagic
#   file         : catalog.py
#   file_relpath : src/algomagic/catalog.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Read-only catalog over the generated JSON data directory.

Layout:
    <data_dir>/categories/<difficulty>/<category>.json
    <data_dir>/problems/<difficulty>/<category>/<problem>.json

Invalid JSON files are logged and skipped, so one broken record does not hide
the rest of the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from algomagic.authoring.models import Category, Problem
from algomagic.config.logging import get_logger
from algomagic.core.errors import RecordValidationError

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from algomagic.config.logging import AlgomagicLogger

logger: AlgomagicLogger = get_logger(__name__)

R = TypeVar("R", Category, Problem)


def _load_all(root: Path, parse: Callable[[str], R]) -> list[R]:
    out: list[R] = []
    if not root.is_dir():
        logger.debug("No data directory %s", root)
        return out
    for path in sorted(root.rglob("*.json")):
        try:
            out.append(parse(path.read_text(encoding="utf-8")))
        except (RecordValidationError, OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
    return out


@dataclass(frozen=True)
class Catalog:
    """Categories and problems loaded from a data directory."""

    categories: tuple[Category, ...] = ()
    problems: tuple[Problem, ...] = ()

    @classmethod
    def load(cls, data_dir: Path) -> Catalog:
        """Load every category and problem record below ``data_dir``."""
        categories = _load_all(data_dir / "categories", Category.from_json)
        problems = _load_all(data_dir / "problems", Problem.from_json)
        logger.info(
            "Loaded %d categor(ies) and %d problem(s) from %s",
            len(categories),
            len(problems),
            data_dir,
        )
        return cls(categories=tuple(categories), problems=tuple(problems))

    def search(self, query: str) -> list[Problem]:
        """Return problems whose title contains ``query``, ignoring case.

        Results are ordered by title. A blank query matches nothing.
        """
        needle: str = query.strip().casefold()
        if not needle:
            return []
        hits = [p for p in self.problems if needle in p.title.casefold()]
        return sorted(hits, key=lambda p: (p.title, p.id))

    def difficulties(self) -> list[str]:
        """Return every difficulty that has a category or a problem, sorted."""
        found = {c.difficulty for c in self.categories} | {p.difficulty for p in self.problems}
        return sorted(found)

    def categories_for(self, difficulty: str) -> list[Category]:
        """Return the categories of ``difficulty`` ordered by ``order`` then id."""
        return sorted(
            (c for c in self.categories if c.difficulty == difficulty),
            key=lambda c: (c.order, c.id),
        )

    def problems_in(self, difficulty: str, category: str) -> list[Problem]:
        """Return the problems of one category ordered by ``order`` then id."""
        return sorted(
            (p for p in self.problems if p.difficulty == difficulty and p.category == category),
            key=lambda p: (p.order, p.id),
        )

    def get_problem(self, difficulty: str, category: str, problem_id: str) -> Problem | None:
        """Return one problem, or None if it is not in the catalog."""
        for p in self.problems:
            if (p.difficulty, p.category, p.id) == (difficulty, category, problem_id):
                return p
        return None

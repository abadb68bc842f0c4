# topmark:header:start
#
#   project      : Algomagic
#   file         : batch.py
#   file_relpath : src/algomagic/authoring/batch.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Batch conversion of an authored content tree.

`process_tree` walks a directory for ``.mdx`` problem files or ``.mdc``
category files, converts each one to JSON under the data directory and writes
the matching SQL script next to it.

Files are processed one at a time in sorted order with no state shared between
them. A file that fails is recorded in the `BatchReport` and the run moves on to
the next file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from algomagic.authoring.mdc import load_category_mdc
from algomagic.authoring.mdx import load_problem_mdx
from algomagic.authoring.models import write_record
from algomagic.authoring.sql import write_sql
from algomagic.config.logging import get_logger
from algomagic.core.errors import AlgomagicError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from algomagic.authoring.models import Record
    from algomagic.config import Config
    from algomagic.config.logging import AlgomagicLogger
    from algomagic.config.model import SectionHeadings

logger: AlgomagicLogger = get_logger(__name__)


class RecordKind(str, Enum):
    """Kind of authored record, with the source suffix it is authored in."""

    CATEGORY = "category"
    PROBLEM = "problem"

    @property
    def suffix(self) -> str:
        """Return the authoring file suffix (``.mdc`` or ``.mdx``)."""
        return ".mdc" if self is RecordKind.CATEGORY else ".mdx"

    @property
    def collection(self) -> str:
        """Return the directory name used for this kind under the content and data roots."""
        return "categories" if self is RecordKind.CATEGORY else "problems"


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Result of converting one source file.

    Attributes:
        source (Path): The authored file.
        json_path (Path | None): Written JSON record, if conversion succeeded.
        sql_path (Path | None): Written SQL script, if conversion succeeded.
        error (str | None): Failure message, if conversion failed.
    """

    source: Path
    json_path: Path | None = None
    sql_path: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return True if the file was converted."""
        return self.error is None


@dataclass
class BatchReport:
    """Per-file outcomes of one batch run."""

    kind: RecordKind
    root: Path
    outcomes: list[FileOutcome] = field(default_factory=lambda: [])

    @property
    def succeeded(self) -> list[FileOutcome]:
        """Return the outcomes of converted files."""
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[FileOutcome]:
        """Return the outcomes of files that failed."""
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        """Return True if no file failed."""
        return not self.failed


def _rel_for_match(path: Path, base: Path) -> str:
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def find_sources(
    kind: RecordKind,
    root: Path,
    exclude_patterns: Iterable[str] = (),
) -> list[Path]:
    """Return authored files of ``kind`` below ``root`` in sorted order.

    Args:
        kind (RecordKind): Which suffix to collect.
        root (Path): Directory to walk recursively.
        exclude_patterns (Iterable[str]): Gitignore-style patterns, matched against
            paths relative to ``root``.

    Returns:
        list[Path]: Matching files, excluded ones removed.
    """
    candidates: list[Path] = sorted(p for p in root.rglob(f"*{kind.suffix}") if p.is_file())
    patterns: list[str] = list(exclude_patterns)
    if not patterns:
        return candidates
    spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, patterns)
    kept: list[Path] = [p for p in candidates if not spec.match_file(_rel_for_match(p, root))]
    logger.debug("Excluded %d of %d file(s)", len(candidates) - len(kept), len(candidates))
    return kept


def load_record(
    kind: RecordKind,
    path: Path,
    *,
    headings: SectionHeadings | None = None,
) -> Record:
    """Convert one authored file into its record (no files written)."""
    if kind is RecordKind.CATEGORY:
        return load_category_mdc(path)
    return load_problem_mdx(path, headings=headings)


def convert_file(
    kind: RecordKind,
    path: Path,
    *,
    data_dir: Path,
    headings: SectionHeadings | None = None,
) -> FileOutcome:
    """Convert ``path`` and write its JSON record and SQL script.

    Raises:
        AlgomagicError: If the file cannot be converted.
        OSError: If reading or writing fails.
    """
    record: Record = load_record(kind, path, headings=headings)
    json_path: Path = write_record(record, data_dir)
    sql_path: Path = write_sql(record, json_path)
    return FileOutcome(source=path, json_path=json_path, sql_path=sql_path)


def process_tree(kind: RecordKind, root: Path, *, config: Config) -> BatchReport:
    """Convert every authored file of ``kind`` below ``root``.

    Args:
        kind (RecordKind): Category (``.mdc``) or problem (``.mdx``) files.
        root (Path): Directory to walk.
        config (Config): Supplies the data directory, section headings and
            exclude patterns.

    Returns:
        BatchReport: One outcome per file, in processing order.
    """
    report = BatchReport(kind=kind, root=root)
    sources: list[Path] = find_sources(kind, root, config.exclude_patterns)
    if not sources:
        logger.info("No %s files found under %s", kind.suffix, root)
        return report

    logger.info("Found %d %s file(s) under %s", len(sources), kind.suffix, root)
    for path in sources:
        logger.debug("Processing %s", path)
        try:
            outcome = convert_file(
                kind, path, data_dir=config.data_dir, headings=config.headings
            )
        except (AlgomagicError, OSError, ValueError) as exc:
            logger.error("Failed to process %s: %s", path, exc)
            outcome = FileOutcome(source=path, error=str(exc))
        report.outcomes.append(outcome)

    logger.info(
        "Processed %d file(s): %d succeeded, %d failed",
        len(report.outcomes),
        len(report.succeeded),
        len(report.failed),
    )
    return report

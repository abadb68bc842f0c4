# topmark:header:start
#
#   project      : Algomagic
#   file         : sql.py
#   file_relpath : src/algomagic/authoring/sql.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Generate SQL upsert scripts for category and problem records.

The target store has no multi-statement transactions, so a problem script is a
plain sequence: upsert the problem row, delete its examples, insert the
current examples. Rerunning a script converges to the same rows.

String literals are single-quoted with ``'`` doubled; unset optional values
render as ``NULL``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from algomagic.authoring.models import Category
from algomagic.config.logging import get_logger

if TYPE_CHECKING:
    from algomagic.authoring.models import Problem, Record
    from algomagic.config.logging import AlgomagicLogger

logger: AlgomagicLogger = get_logger(__name__)


def _q(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def sql_literal(value: str | None) -> str:
    """Return ``value`` as a SQL string literal, or ``NULL`` for None/empty."""
    if not value:
        return "NULL"
    return _q(value)


def category_upsert_sql(category: Category) -> str:
    """Return the upsert statement for ``category``."""
    return (
        "INSERT INTO categories (id, title, description, difficulty_id, icon_id, order_num)\n"
        f"VALUES ({_q(category.id)}, {_q(category.title)}, {_q(category.description)}, "
        f"{_q(category.difficulty)}, {_q(category.icon_id)}, {category.order})\n"
        "ON CONFLICT (id) DO UPDATE SET\n"
        f"  title = {_q(category.title)},\n"
        f"  description = {_q(category.description)},\n"
        f"  difficulty_id = {_q(category.difficulty)},\n"
        f"  icon_id = {_q(category.icon_id)},\n"
        f"  order_num = {category.order},\n"
        "  updated_at = now();\n"
    )


def problem_upsert_sql(problem: Problem) -> str:
    """Return the problem upsert, the example delete and one insert per example."""
    notes = sql_literal(problem.notes)
    parts: list[str] = [
        "-- problem\n"
        "INSERT INTO problems (id, category_id, difficulty_id, title, description, order_num, "
        "content, solution_idea, python_code, cpp_code, input_description, "
        "output_description, notes)\n"
        "VALUES (\n"
        f"  {_q(problem.id)},\n"
        f"  {_q(problem.category)},\n"
        f"  {_q(problem.difficulty)},\n"
        f"  {_q(problem.title)},\n"
        f"  {_q(problem.description)},\n"
        f"  {problem.order},\n"
        f"  {_q(problem.content)},\n"
        f"  {_q(problem.solution_idea)},\n"
        f"  {_q(problem.python_code)},\n"
        f"  {_q(problem.cpp_code)},\n"
        f"  {_q(problem.input)},\n"
        f"  {_q(problem.output)},\n"
        f"  {notes}\n"
        ")\n"
        "ON CONFLICT (difficulty_id, category_id, id) DO UPDATE SET\n"
        f"  title = {_q(problem.title)},\n"
        f"  description = {_q(problem.description)},\n"
        f"  order_num = {problem.order},\n"
        f"  content = {_q(problem.content)},\n"
        f"  solution_idea = {_q(problem.solution_idea)},\n"
        f"  python_code = {_q(problem.python_code)},\n"
        f"  cpp_code = {_q(problem.cpp_code)},\n"
        f"  input_description = {_q(problem.input)},\n"
        f"  output_description = {_q(problem.output)},\n"
        f"  notes = {notes},\n"
        "  updated_at = now();\n",
        "\n-- replace examples\n"
        "DELETE FROM examples\n"
        f"WHERE difficulty_id = {_q(problem.difficulty)}\n"
        f"  AND category_id = {_q(problem.category)}\n"
        f"  AND problem_id = {_q(problem.id)};\n",
    ]
    for order_num, example in enumerate(problem.examples, start=1):
        parts.append(
            f"\n-- example {order_num}\n"
            "INSERT INTO examples (problem_id, category_id, difficulty_id, input_example, "
            "output_example, explanation, order_num)\n"
            "VALUES (\n"
            f"  {_q(problem.id)},\n"
            f"  {_q(problem.category)},\n"
            f"  {_q(problem.difficulty)},\n"
            f"  {_q(example.input)},\n"
            f"  {_q(example.output)},\n"
            f"  {sql_literal(example.explanation)},\n"
            f"  {order_num}\n"
            ");\n"
        )
    return "".join(parts)


def record_sql(record: Record) -> str:
    """Return the SQL script for a category or problem record."""
    if isinstance(record, Category):
        return category_upsert_sql(record)
    return problem_upsert_sql(record)


def write_sql(record: Record, json_path: Path) -> Path:
    """Write the SQL script for ``record`` next to ``json_path`` (``.sql`` suffix).

    Returns:
        Path: The written SQL file.
    """
    sql_path: Path = Path(json_path).with_suffix(".sql")
    sql_path.write_text(record_sql(record), encoding="utf-8")
    logger.info("Wrote %s", sql_path)
    return sql_path

# topmark:header:start
#
#   project      : Algomagic
#   file         : models.py
#   file_relpath : src/algomagic/authoring/models.py
#   license      : MIT
#   copyright    : (c) 2025 Algomagic contributors
#
# topmark:header:end

"""Category and problem records as stored in the data directory.

JSON documents use camelCase keys (``iconId``, ``solutionIdea``, ``pythonCode``,
``cppCode``); the Python attributes use snake_case. `from_dict` validates
required keys in a fixed order and names the first missing one.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from algomagic.config.logging import get_logger
from algomagic.core.errors import RecordValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from algomagic.config.logging import AlgomagicLogger

logger: AlgomagicLogger = get_logger(__name__)

CATEGORY_REQUIRED_FIELDS: Final[tuple[str, ...]] = (
    "id",
    "title",
    "description",
    "difficulty",
    "iconId",
    "order",
)

PROBLEM_REQUIRED_FIELDS: Final[tuple[str, ...]] = (
    "id",
    "title",
    "description",
    "difficulty",
    "category",
    "order",
    "content",
    "solutionIdea",
    "pythonCode",
    "cppCode",
    "input",
    "output",
    "examples",
)


def _require(data: Mapping[str, Any], required: tuple[str, ...]) -> None:
    for key in required:
        if key not in data:
            raise RecordValidationError(f"Missing required field: {key}", field=key)


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise RecordValidationError(
            f"Field '{key}' must be a string, got {type(value).__name__}", field=key
        )
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    if data.get(key) is None:
        return None
    return _str(data, key)


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordValidationError(
            f"Field '{key}' must be an integer, got {type(value).__name__}", field=key
        )
    return value


def _load_json_object(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordValidationError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise RecordValidationError("Expected a JSON object")
    return data


@dataclass(frozen=True, slots=True)
class Category:
    """A problem category within one difficulty level.

    Attributes:
        id (str): Category identifier (unique across difficulties).
        title (str): Display title.
        description (str): Short description.
        difficulty (str): Owning difficulty identifier.
        icon_id (str): Stable icon identifier (``iconId`` in JSON).
        order (int): Sort key within the difficulty.
    """

    id: str
    title: str
    description: str
    difficulty: str
    icon_id: str
    order: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Category:
        """Build a category from its JSON mapping.

        Raises:
            RecordValidationError: If a required field is missing or mistyped.
        """
        _require(data, CATEGORY_REQUIRED_FIELDS)
        return cls(
            id=_str(data, "id"),
            title=_str(data, "title"),
            description=_str(data, "description"),
            difficulty=_str(data, "difficulty"),
            icon_id=_str(data, "iconId"),
            order=_int(data, "order"),
        )

    @classmethod
    def from_json(cls, text: str) -> Category:
        """Parse a category from a JSON document."""
        return cls.from_dict(_load_json_object(text))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON mapping (camelCase keys)."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "difficulty": self.difficulty,
            "iconId": self.icon_id,
            "order": self.order,
        }

    def relative_json_path(self) -> Path:
        """Return the record's path relative to the data directory."""
        return Path("categories") / self.difficulty / f"{self.id}.json"


@dataclass(frozen=True, slots=True)
class Example:
    """One sample input/output pair of a problem."""

    input: str
    output: str
    explanation: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Example:
        """Build an example from its JSON mapping."""
        _require(data, ("input", "output"))
        return cls(
            input=_str(data, "input"),
            output=_str(data, "output"),
            explanation=_optional_str(data, "explanation"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON mapping; ``explanation`` is omitted when unset."""
        out: dict[str, Any] = {"input": self.input, "output": self.output}
        if self.explanation is not None:
            out["explanation"] = self.explanation
        return out


@dataclass(frozen=True, slots=True)
class Problem:
    """A programming problem with its reference solutions.

    Text fields (``content``, ``solution_idea``, ``python_code``, ``cpp_code``)
    are stored as authored, i.e. before escape normalization.

    Attributes:
        id (str): Problem identifier (unique within its category).
        title (str): Display title.
        description (str): One-line summary.
        difficulty (str): Difficulty identifier.
        category (str): Category identifier.
        order (int): Sort key within the category.
        content (str): Markdown problem statement.
        solution_idea (str): Markdown explanation of the approach.
        python_code (str): Reference solution in Python.
        cpp_code (str): Reference solution in C++.
        input (str): Input format description.
        output (str): Output format description.
        examples (tuple[Example, ...]): At least one sample pair.
        notes (str | None): Optional extra notes.
    """

    id: str
    title: str
    description: str
    difficulty: str
    category: str
    order: int
    content: str
    solution_idea: str
    python_code: str
    cpp_code: str
    input: str
    output: str
    examples: tuple[Example, ...]
    notes: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Problem:
        """Build a problem from its JSON mapping.

        Raises:
            RecordValidationError: If a required field is missing or mistyped, or
                if ``examples`` is not a non-empty list.
        """
        _require(data, PROBLEM_REQUIRED_FIELDS)
        raw_examples = data["examples"]
        if not isinstance(raw_examples, list) or not raw_examples:
            raise RecordValidationError(
                "Field 'examples' must contain at least one example", field="examples"
            )
        examples: list[Example] = []
        for item in raw_examples:
            if not isinstance(item, dict):
                raise RecordValidationError("Each example must be an object", field="examples")
            examples.append(Example.from_dict(item))

        return cls(
            id=_str(data, "id"),
            title=_str(data, "title"),
            description=_str(data, "description"),
            difficulty=_str(data, "difficulty"),
            category=_str(data, "category"),
            order=_int(data, "order"),
            content=_str(data, "content"),
            solution_idea=_str(data, "solutionIdea"),
            python_code=_str(data, "pythonCode"),
            cpp_code=_str(data, "cppCode"),
            input=_str(data, "input"),
            output=_str(data, "output"),
            examples=tuple(examples),
            notes=_optional_str(data, "notes"),
        )

    @classmethod
    def from_json(cls, text: str) -> Problem:
        """Parse a problem from a JSON document."""
        return cls.from_dict(_load_json_object(text))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON mapping (camelCase keys); ``notes`` is omitted when unset."""
        out: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "difficulty": self.difficulty,
            "category": self.category,
            "order": self.order,
            "content": self.content,
            "solutionIdea": self.solution_idea,
            "pythonCode": self.python_code,
            "cppCode": self.cpp_code,
            "input": self.input,
            "output": self.output,
            "examples": [example.to_dict() for example in self.examples],
        }
        if self.notes is not None:
            out["notes"] = self.notes
        return out

    def relative_json_path(self) -> Path:
        """Return the record's path relative to the data directory."""
        return Path("problems") / self.difficulty / self.category / f"{self.id}.json"


Record = Category | Problem


def dump_record(record: Record) -> str:
    """Serialize a record as the JSON text stored in the data directory."""
    return json.dumps(record.to_dict(), indent=2, ensure_ascii=False) + "\n"


def write_record(record: Record, data_dir: Path) -> Path:
    """Write ``record`` below ``data_dir`` and return the written path.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    path: Path = data_dir / record.relative_json_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_record(record), encoding="utf-8")
    logger.info("Wrote %s", path)
    return path

"""
Serialization Utilities

Provides to/from JSON utilities for problems and worksheet settings.

Worksheet files use the same camelCase keys the problem editors emit:

    {
      "schema_version": 1,
      "title": "Week 3",
      "footnote": "",
      "layout": "two-column",
      "problems": [
        {"type": "basic-equation", "leftOperand": "12", "operator": "+", "rightOperand": "5"},
        "7 x 8 = ____"
      ]
    }

Plain strings in "problems" are legacy equations and are parsed with
parse_legacy_equation().
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Sequence, Tuple

from ..models.problems import (
    AlgebraEquation,
    BasicEquation,
    FillBlanks,
    MultipleChoice,
    Problem,
    ProblemKind,
    WordProblem,
    new_problem_id,
)
from ..models.settings import WorksheetLayout, WorksheetSettings
from ..schemas.validator import (
    ValidationError,
    WORKSHEET_SCHEMA_VERSION,
    validate_problem_payload,
)
from .formatting import parse_legacy_equation


# ─────────────────────────────────────────────────────────────────────────────
# Problem Serialization
# ─────────────────────────────────────────────────────────────────────────────

def problem_to_dict(problem: Problem) -> dict[str, Any]:
    """
    Serialize a Problem to a dictionary.

    Args:
        problem: Any Problem variant

    Returns:
        Dictionary suitable for JSON serialization
    """
    data: dict[str, Any] = {"id": problem.id, "type": problem.kind.value}

    if isinstance(problem, BasicEquation):
        data.update(
            leftOperand=problem.left_operand,
            operator=problem.operator,
            rightOperand=problem.right_operand,
        )
    elif isinstance(problem, MultipleChoice):
        data.update(question=problem.question, options=list(problem.options))
    elif isinstance(problem, WordProblem):
        data.update(problemText=problem.problem_text)
    elif isinstance(problem, FillBlanks):
        data.update(
            operator=problem.operator,
            rightOperand=problem.right_operand,
            result=problem.result,
        )
    elif isinstance(problem, AlgebraEquation):
        data.update(equation=problem.equation, variable=problem.variable)
    else:
        raise TypeError(f"Unsupported problem type: {type(problem).__name__}")

    return data


def problem_from_dict(data: Any, *, path: str = "") -> Problem:
    """
    Deserialize a Problem from a dictionary (or legacy equation string).

    Args:
        data: Problem dictionary from JSON, or a string like "5 + 3 = ____"
        path: Location used in error messages

    Returns:
        Problem instance

    Raises:
        ValidationError: If data is not a recognizable problem
    """
    if isinstance(data, str):
        parsed = parse_legacy_equation(data)
        if parsed is None:
            raise ValidationError(f"Could not parse equation: {data!r}", path=path)
        return parsed

    kind = validate_problem_payload(data, path=path)
    problem_id = str(data.get("id") or new_problem_id())

    if kind is ProblemKind.BASIC_EQUATION:
        return BasicEquation(
            left_operand=_text(data["leftOperand"]),
            operator=_text(data["operator"]),
            right_operand=_text(data["rightOperand"]),
            id=problem_id,
        )
    if kind is ProblemKind.MULTIPLE_CHOICE:
        return MultipleChoice(
            question=_text(data["question"]),
            options=tuple(_text(option) for option in data["options"]),
            id=problem_id,
        )
    if kind is ProblemKind.WORD_PROBLEM:
        return WordProblem(problem_text=_text(data["problemText"]), id=problem_id)
    if kind is ProblemKind.FILL_BLANKS:
        return FillBlanks(
            operator=_text(data["operator"]),
            right_operand=_text(data["rightOperand"]),
            result=_text(data["result"]),
            id=problem_id,
        )
    return AlgebraEquation(
        equation=_text(data["equation"]),
        variable=_text(data.get("variable")) or "x",
        id=problem_id,
    )


def _text(value: Any) -> str:
    """Numbers in JSON are accepted where numeric text is expected."""
    if value is None:
        return ""
    return str(value)


# ─────────────────────────────────────────────────────────────────────────────
# Settings Serialization
# ─────────────────────────────────────────────────────────────────────────────

def settings_to_dict(settings: WorksheetSettings) -> dict[str, Any]:
    """Serialize WorksheetSettings to a dictionary."""
    return {
        "title": settings.title,
        "footnote": settings.footnote,
        "layout": settings.layout.value,
    }


def settings_from_dict(data: dict[str, Any]) -> WorksheetSettings:
    """
    Deserialize WorksheetSettings, falling back to defaults for missing keys.

    Raises:
        ValidationError: If the layout name is unknown
    """
    defaults = WorksheetSettings()
    try:
        layout = WorksheetLayout.parse(data.get("layout", defaults.layout))
    except ValueError as e:
        raise ValidationError(str(e), path="layout") from e

    return WorksheetSettings(
        title=_text(data.get("title", defaults.title)),
        footnote=_text(data.get("footnote", defaults.footnote)),
        layout=layout,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Worksheet Files
# ─────────────────────────────────────────────────────────────────────────────

def load_worksheet_json(path: Path) -> Tuple[WorksheetSettings, List[Problem]]:
    """
    Load settings and problems from a worksheet JSON file.

    Args:
        path: Path to worksheet .json file

    Returns:
        Tuple of (settings, problems in file order)

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not a valid worksheet
    """
    if not path.exists():
        raise FileNotFoundError(f"Worksheet file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", path=str(path), errors=[str(e)]) from e

    if not isinstance(data, dict):
        raise ValidationError("Worksheet must be a JSON object", path=str(path))

    version = data.get("schema_version", WORKSHEET_SCHEMA_VERSION)
    if version != WORKSHEET_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported worksheet schema version: {version} (expected {WORKSHEET_SCHEMA_VERSION})",
            path="schema_version",
        )

    raw_problems = data.get("problems", [])
    if not isinstance(raw_problems, list):
        raise ValidationError("problems must be a list", path="problems")

    settings = settings_from_dict(data)
    problems = [
        problem_from_dict(item, path=f"problems[{index}]")
        for index, item in enumerate(raw_problems)
    ]
    return settings, problems


def save_worksheet_json(
    path: Path,
    settings: WorksheetSettings,
    problems: Sequence[Problem],
) -> None:
    """
    Save settings and problems to a worksheet JSON file.

    Args:
        path: Output path
        settings: Worksheet settings
        problems: Problems in worksheet order
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {"schema_version": WORKSHEET_SCHEMA_VERSION}
    data.update(settings_to_dict(settings))
    data["problems"] = [problem_to_dict(problem) for problem in problems]

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

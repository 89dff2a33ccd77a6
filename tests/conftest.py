import json
import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import worksheet_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from worksheet_toolkit.core.models import (  # noqa: E402
    AlgebraEquation,
    BasicEquation,
    FillBlanks,
    MultipleChoice,
    WordProblem,
)


# Common test fixtures
@pytest.fixture
def equation_factory():
    """Create numbered basic equations ("i + 1 = ____")."""
    def _create(count: int):
        return [BasicEquation(str(i), "+", "1", id=f"eq{i}") for i in range(count)]
    return _create


@pytest.fixture
def mixed_problems():
    """One of each problem variant, in a fixed order."""
    return [
        BasicEquation("12", "+", "5", id="p1"),
        MultipleChoice("Which is even?", ("3", "4", "5"), id="p2"),
        WordProblem("Sam has 3 apples and buys 4 more. How many now?", id="p3"),
        FillBlanks("×", "6", "42", id="p4"),
        AlgebraEquation("2x + 3 = 11", id="p5"),
    ]


@pytest.fixture
def worksheet_file(tmp_path: Path):
    """Write a worksheet JSON file and return its path."""
    def _write(data: dict, name: str = "worksheet.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write

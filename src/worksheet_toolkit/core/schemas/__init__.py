"""
Worksheet schema validation.
"""

from .validator import (
    REQUIRED_FIELDS,
    ValidationError,
    WORKSHEET_SCHEMA_VERSION,
    filter_valid_problems,
    is_valid_problem,
    validate_problem_payload,
)

__all__ = [
    "REQUIRED_FIELDS",
    "ValidationError",
    "WORKSHEET_SCHEMA_VERSION",
    "filter_valid_problems",
    "is_valid_problem",
    "validate_problem_payload",
]

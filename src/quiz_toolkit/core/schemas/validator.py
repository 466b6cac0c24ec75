"""
Schema Validation Utilities

Validates raw JSON payloads (configuration records and question records)
before they are turned into models.

Two levels:
- Basic checks (always): required fields and shapes, with precise paths
- Strict mode: full JSON Schema validation against the packaged
  `*.schema.json` files using jsonschema
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}

_ANSWER_KEYS = ("correctAnswer", "correctAnswers", "answerScores")


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _validate_with_schema(data: dict[str, Any], schema_name: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message]
        ) from e


def validate_question(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a question record from a question file.

    Args:
        data: Question dictionary to validate
        strict: If True, also validate against question.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Question record must be an object, got {type(data).__name__}")

    required = ["question", "topics", "answers"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    topics = data["topics"]
    if not isinstance(topics, list) or not topics:
        raise ValidationError("topics must be a non-empty list", path="topics")
    for i, topic in enumerate(topics):
        if not isinstance(topic, str) or not topic:
            raise ValidationError(f"Invalid topic id: {topic!r}", path=f"topics[{i}]")

    answers = data["answers"]
    if not isinstance(answers, list) or not answers:
        raise ValidationError("answers must be a non-empty list", path="answers")

    if not any(key in data for key in _ANSWER_KEYS):
        raise ValidationError(
            f"Question needs one of {list(_ANSWER_KEYS)}",
            path="",
            errors=[f"Missing field: {key}" for key in _ANSWER_KEYS]
        )

    correct = data.get("correctAnswer")
    if correct is not None and (not isinstance(correct, int) or isinstance(correct, bool)):
        raise ValidationError(f"Invalid correctAnswer: {correct!r}", path="correctAnswer")

    correct_list = data.get("correctAnswers")
    if correct_list is not None:
        if not isinstance(correct_list, list) or not all(
            isinstance(i, int) and not isinstance(i, bool) for i in correct_list
        ):
            raise ValidationError("correctAnswers must be a list of integers", path="correctAnswers")

    scores = data.get("answerScores")
    if scores is not None:
        if not isinstance(scores, list) or not all(
            isinstance(s, (int, float)) and not isinstance(s, bool) for s in scores
        ):
            raise ValidationError("answerScores must be a list of numbers", path="answerScores")

    if strict:
        _validate_with_schema(data, "question")


def validate_config(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a quiz configuration record.

    Args:
        data: Configuration dictionary to validate
        strict: If True, also validate against config.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Configuration must be an object, got {type(data).__name__}")

    if "topics" not in data:
        raise ValidationError(
            "Missing required fields: ['topics']",
            errors=["Missing field: topics"]
        )

    topics = data["topics"]
    if not isinstance(topics, list):
        raise ValidationError("topics must be a list", path="topics")

    seen: set[str] = set()
    for i, topic in enumerate(topics):
        if not isinstance(topic, dict) or not topic.get("id"):
            raise ValidationError(f"Topic {i} must have an id", path=f"topics[{i}]")
        if topic["id"] in seen:
            raise ValidationError(f"Duplicate topic id: {topic['id']!r}", path=f"topics[{i}].id")
        seen.add(topic["id"])

    for key in ("minQuestionsPerTopic", "minTotalQuestions", "defaultQuestions"):
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ValidationError(
                f"Invalid {key}: {value!r} (must be a non-negative integer)",
                path=key
            )

    if strict:
        _validate_with_schema(data, "config")

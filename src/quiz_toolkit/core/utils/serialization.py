"""
Serialization Utilities

Converts between raw question-file records and models, and exports
answer records and reports as plain dictionaries.

Question records use the question-file spelling (camelCase keys,
"question" for the prompt). The scoring scheme is inferred from which
answer key is present unless an explicit "scoring" key names it:

| Record keys | Scheme |
|-------------|--------|
| `answerScores` + `multiSelect: true` | WeightedMulti |
| `answerScores`, more than one positive weight | WeightedMulti |
| `answerScores` otherwise | WeightedSingle |
| `correctAnswers` with several entries | LegacyMulti |
| `correctAnswers` with one entry, or `correctAnswer` | LegacySingle |
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ..models.answers import AnswerRecord
from ..models.questions import DEFAULT_QUESTION_TYPE, Question
from ..models.reports import SessionReport
from ..models.schemes import (
    InvalidQuestionData,
    LegacyMulti,
    LegacySingle,
    SchemeKind,
    ScoringScheme,
    WeightedMulti,
    WeightedSingle,
)
from ..schemas.validator import ValidationError, validate_question


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize a Question to a question-file record.

    Args:
        question: Question instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return question.to_dict()


def deserialize_question(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
    fallback_id: Optional[str] = None,
) -> Question:
    """
    Build a Question from a question-file record.

    Args:
        data: Raw record from a question file
        validate: Run payload validation first
        strict: Also run JSON Schema validation
        fallback_id: Id to use when the record has none

    Returns:
        Question instance

    Raises:
        InvalidQuestionData: If the record is malformed or inconsistent
    """
    if validate:
        try:
            validate_question(data, strict=strict)
        except ValidationError as e:
            label = data.get("id", fallback_id) if isinstance(data, dict) else fallback_id
            where = f" at {e.path}" if e.path else ""
            raise InvalidQuestionData(f"question {label!r}{where}: {e}") from e

    qid = data.get("id", fallback_id)
    if qid is None or qid == "":
        raise InvalidQuestionData("question record has no id")

    answers = tuple(str(a) for a in data["answers"])
    return Question(
        id=str(qid),
        text=data.get("question", ""),
        topics=tuple(data["topics"]),
        answers=answers,
        scheme=infer_scheme(data),
        code=data.get("code") or None,
        type=data.get("type") or DEFAULT_QUESTION_TYPE,
    )


def infer_scheme(data: dict[str, Any]) -> ScoringScheme:
    """
    Determine the scoring scheme for a raw question record.

    Args:
        data: Raw record with one of correctAnswer/correctAnswers/answerScores

    Returns:
        Scheme instance

    Raises:
        InvalidQuestionData: If no usable answer key is present or the
            explicit "scoring" key disagrees with the available data
    """
    explicit = data.get("scoring")
    scores = data.get("answerScores")
    if "correctAnswers" in data and data["correctAnswers"] is not None:
        correct: Optional[frozenset[int]] = frozenset(int(i) for i in data["correctAnswers"])
    elif "correctAnswer" in data and data["correctAnswer"] is not None:
        correct = frozenset({int(data["correctAnswer"])})
    else:
        correct = None

    if explicit is not None:
        try:
            kind = SchemeKind(explicit)
        except ValueError:
            raise InvalidQuestionData(f"unknown scoring scheme: {explicit!r}") from None
        if kind in (SchemeKind.WEIGHTED_SINGLE, SchemeKind.WEIGHTED_MULTI):
            if scores is None:
                raise InvalidQuestionData(f"{kind.value} scheme requires answerScores")
            weights = tuple(float(s) for s in scores)
            if kind is SchemeKind.WEIGHTED_MULTI:
                return WeightedMulti(weights)
            return WeightedSingle(weights)
        if correct is None:
            raise InvalidQuestionData(f"{kind.value} scheme requires correctAnswer(s)")
        if kind is SchemeKind.LEGACY_MULTI:
            return LegacyMulti(correct)
        return LegacySingle(correct)

    if scores is not None:
        weights = tuple(float(s) for s in scores)
        positive = sum(1 for w in weights if w > 0)
        if data.get("multiSelect") or positive > 1:
            return WeightedMulti(weights)
        return WeightedSingle(weights)

    if correct is None:
        raise InvalidQuestionData("question has no correctAnswer, correctAnswers or answerScores")
    if len(correct) > 1:
        return LegacyMulti(correct)
    return LegacySingle(correct)


# ─────────────────────────────────────────────────────────────────────────────
# Session Output Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_answer_record(record: AnswerRecord) -> dict[str, Any]:
    """
    Serialize an AnswerRecord for export.

    The question is referenced by id only.
    """
    return {
        "question_id": record.question.id,
        "selected": sorted(record.selected_indices),
        "raw_score": record.raw_score,
        "max_score": record.max_score,
        "verdict": record.verdict.value,
        "marked_unsure": record.marked_unsure,
    }


def serialize_session(records: Iterable[AnswerRecord], report: SessionReport) -> dict[str, Any]:
    """Serialize a finished session: answer history plus report."""
    return {
        "answers": [serialize_answer_record(r) for r in records],
        "report": report.to_dict(),
    }

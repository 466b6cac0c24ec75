"""
Module: questions

Purpose:
    Provides the Question dataclass - the unit the planner selects and the
    scorer grades. Holds display text, topic tags, answer options and the
    scoring scheme. Immutable and validated on construction.

Key Functions:
    - Question.primary_topic: First topic tag, used for diversity ordering
    - Question.is_multi_select: Whether several answers may be chosen
    - Question.to_dict(): Serialise to the question-file record shape

Dependencies:
    - dataclasses (std)
    - .schemes: scoring scheme variants

Used By:
    - bank.question_bank.QuestionBank
    - selection.planner
    - scoring.scorer
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .schemes import (
    InvalidQuestionData,
    LegacyMulti,
    LegacySingle,
    ScoringScheme,
    WeightedMulti,
    WeightedSingle,
)

DEFAULT_QUESTION_TYPE = "Theory"


@dataclass(frozen=True)
class Question:
    """
    Single quiz question (immutable).

    Attributes:
        id: Identifier, unique within the bank
        text: Question prompt
        topics: Topic ids; the first one is the primary topic
        answers: Answer option texts, index-significant
        scheme: Scoring scheme variant
        code: Optional code snippet shown with the prompt
        type: Display tag like "Theory" or "Code"

    Invariants:
        - topics is non-empty
        - answers is non-empty
        - scheme is consistent with the number of answers

    Example:
        >>> q = Question(
        ...     id="q1",
        ...     text="What does len([1, 2]) return?",
        ...     topics=("basics",),
        ...     answers=("1", "2"),
        ...     scheme=LegacySingle(frozenset({1})),
        ... )
        >>> q.primary_topic
        'basics'
    """

    id: str
    text: str
    topics: tuple[str, ...]
    answers: tuple[str, ...]
    scheme: ScoringScheme
    code: Optional[str] = None
    type: str = DEFAULT_QUESTION_TYPE

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.id:
            raise InvalidQuestionData("question id must be non-empty")
        if not self.topics:
            raise InvalidQuestionData(f"question {self.id!r} has no topics")
        if not self.answers:
            raise InvalidQuestionData(f"question {self.id!r} has no answers")
        if not isinstance(self.scheme, (LegacySingle, LegacyMulti, WeightedSingle, WeightedMulti)):
            raise InvalidQuestionData(
                f"question {self.id!r} has unknown scoring scheme: {self.scheme!r}"
            )
        try:
            self.scheme.check_answer_count(len(self.answers))
        except InvalidQuestionData as e:
            raise InvalidQuestionData(f"question {self.id!r}: {e}") from e

    @property
    def primary_topic(self) -> str:
        return self.topics[0]

    @property
    def is_multi_select(self) -> bool:
        return self.scheme.is_multi_select

    def to_dict(self) -> dict:
        """
        Serialize to the question-file record shape.

        Returns:
            Dict that core.utils.serialization.deserialize_question() accepts
        """
        d: dict = {
            "id": self.id,
            "question": self.text,
            "type": self.type,
            "topics": list(self.topics),
            "answers": list(self.answers),
            "scoring": self.scheme.kind.value,
        }
        if self.code is not None:
            d["code"] = self.code
        if isinstance(self.scheme, (WeightedSingle, WeightedMulti)):
            d["answerScores"] = list(self.scheme.answer_scores)
        else:
            d["correctAnswers"] = sorted(self.scheme.correct_answers)
        return d

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question({self.id!r}, topics={list(self.topics)}, "
            f"answers={len(self.answers)}, scheme={self.scheme.kind.value})"
        )

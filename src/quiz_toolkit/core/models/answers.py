"""
Module: answers

Purpose:
    Result types produced by the scorer: the three-valued Verdict, the
    ScoreVerdict returned for one graded answer, and the AnswerRecord that
    a session appends to its history.

Key Classes:
    - Verdict: FULL / PARTIAL / NONE classification
    - ScoreVerdict: raw score, achievable maximum and verdict
    - AnswerRecord: One answered question in a session timeline

Used By:
    - scoring.scorer: produces ScoreVerdict
    - session.controller: creates AnswerRecord
    - output.timeline: renders AnswerRecord history
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet

from .questions import Question


class Verdict(Enum):
    """Correctness classification of a scored answer."""

    FULL = "full"
    PARTIAL = "partial"
    NONE = "none"


@dataclass(frozen=True)
class ScoreVerdict:
    """
    Outcome of scoring one answer.

    Attributes:
        raw_score: Earned score, may be negative for penalty schemes
        max_score: Best achievable score for the question
        verdict: FULL, PARTIAL or NONE
    """

    raw_score: float
    max_score: float
    verdict: Verdict

    @property
    def percentage(self) -> int:
        """Earned share of the maximum, 0 when nothing is achievable."""
        if self.max_score <= 0:
            return 0
        return round_half_up(100 * self.raw_score / self.max_score)


@dataclass(frozen=True)
class AnswerRecord:
    """
    One answered question (immutable, owned by the session history).

    Attributes:
        question: The question that was answered
        selected_indices: Answer indices the user chose
        raw_score: Earned score
        max_score: Achievable score
        verdict: Correctness classification
        marked_unsure: User flagged the answer as a guess
    """

    question: Question
    selected_indices: FrozenSet[int]
    raw_score: float
    max_score: float
    verdict: Verdict
    marked_unsure: bool = False

    @classmethod
    def from_score(
        cls,
        question: Question,
        selected_indices: FrozenSet[int],
        score: ScoreVerdict,
        *,
        marked_unsure: bool = False,
    ) -> AnswerRecord:
        return cls(
            question=question,
            selected_indices=frozenset(selected_indices),
            raw_score=score.raw_score,
            max_score=score.max_score,
            verdict=score.verdict,
            marked_unsure=marked_unsure,
        )

    @property
    def is_fully_correct(self) -> bool:
        return self.verdict is Verdict.FULL

    @property
    def is_partially_correct(self) -> bool:
        return self.verdict is Verdict.PARTIAL

    def __repr__(self) -> str:
        return (
            f"AnswerRecord({self.question.id!r}, selected={sorted(self.selected_indices)}, "
            f"score={self.raw_score:g}/{self.max_score:g}, verdict={self.verdict.value})"
        )


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves rounded up.

    Python's round() rounds halves to even; percentages use the
    conventional half-up rule so 62.5 becomes 63.

    Example:
        >>> round_half_up(62.5)
        63
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)

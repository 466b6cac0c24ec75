"""
Module: scoring.scorer

Purpose:
    Grade one answer: raw score, achievable maximum and FULL/PARTIAL/NONE
    verdict. Each scoring scheme has its own pure function; score_answer()
    dispatches on the scheme type.

Key Functions:
    - score_answer(): Score selected indices for a question
    - max_score(): Best achievable score for a question

Key Classes:
    - InvalidSelection: Selected indices do not fit the question

Scheme rules:
    - Legacy (single/multi): 1.0 for an exact set match, else 0.0; no partial
    - WeightedSingle: weight of the chosen answer; max = largest positive weight
    - WeightedMulti: selected weights added, omitted positive weights
      subtracted; max = sum of positive weights; no clamping
    - No answer selected: 0.0 and NONE for every scheme

Used By:
    - session.controller: submit_answer()
"""

from __future__ import annotations

import logging
import math
from typing import AbstractSet, FrozenSet, Iterable

from quiz_toolkit.core.models import (
    LegacyMulti,
    LegacySingle,
    Question,
    ScoreVerdict,
    Verdict,
    WeightedMulti,
    WeightedSingle,
)

logger = logging.getLogger(__name__)


class InvalidSelection(ValueError):
    """Selected answer indices do not fit the question."""
    pass


def score_answer(question: Question, selected_indices: Iterable[int]) -> ScoreVerdict:
    """
    Score an answer to a question.

    Args:
        question: Question being answered
        selected_indices: Chosen answer indices (0-based)

    Returns:
        ScoreVerdict with raw score, maximum and verdict

    Raises:
        InvalidSelection: If an index is out of range, or several answers
            are given to a weighted single-answer question

    Example:
        >>> q = make_question(answer_scores=[0.5, 0.5, -1], multi=True)
        >>> score_answer(q, {0, 1})
        ScoreVerdict(raw_score=1.0, max_score=1.0, verdict=<Verdict.FULL: 'full'>)
    """
    selected = _check_selection(question, selected_indices)
    scheme = question.scheme
    maximum = max_score(question)

    if not selected:
        return ScoreVerdict(0.0, maximum, Verdict.NONE)

    if isinstance(scheme, (LegacySingle, LegacyMulti)):
        return _score_exact_match(scheme.correct_answers, selected)
    if isinstance(scheme, WeightedSingle):
        return _score_weighted_single(scheme, selected, maximum)
    if isinstance(scheme, WeightedMulti):
        return _score_weighted_multi(scheme, selected, maximum)
    raise TypeError(f"Unsupported scoring scheme: {type(scheme).__name__}")


def max_score(question: Question) -> float:
    """
    Best achievable score for a question.

    Returns:
        1.0 for legacy schemes, the largest positive weight for weighted
        single, the sum of positive weights for weighted multi (0.0 when
        no weight is positive)
    """
    scheme = question.scheme
    if isinstance(scheme, (LegacySingle, LegacyMulti)):
        return 1.0
    if isinstance(scheme, WeightedSingle):
        return max((w for w in scheme.answer_scores if w > 0), default=0.0)
    if isinstance(scheme, WeightedMulti):
        return sum(w for w in scheme.answer_scores if w > 0)
    raise TypeError(f"Unsupported scoring scheme: {type(scheme).__name__}")


# ─────────────────────────────────────────────────────────────────────────────
# Scheme Implementations
# ─────────────────────────────────────────────────────────────────────────────

def _check_selection(question: Question, selected_indices: Iterable[int]) -> FrozenSet[int]:
    selected = frozenset(selected_indices)
    out_of_range = sorted(i for i in selected if not 0 <= i < len(question.answers))
    if out_of_range:
        raise InvalidSelection(
            f"Answer indices {out_of_range} out of range for question {question.id!r} "
            f"with {len(question.answers)} answers"
        )
    if isinstance(question.scheme, WeightedSingle) and len(selected) > 1:
        raise InvalidSelection(
            f"Question {question.id!r} accepts one answer, got {sorted(selected)}"
        )
    return selected


def _score_exact_match(correct: AbstractSet[int], selected: FrozenSet[int]) -> ScoreVerdict:
    if selected == correct:
        return ScoreVerdict(1.0, 1.0, Verdict.FULL)
    return ScoreVerdict(0.0, 1.0, Verdict.NONE)


def _score_weighted_single(
    scheme: WeightedSingle,
    selected: FrozenSet[int],
    maximum: float,
) -> ScoreVerdict:
    (index,) = selected
    raw = scheme.answer_scores[index]

    if raw <= 0:
        verdict = Verdict.NONE
    elif maximum > 0 and math.isclose(raw, maximum):
        verdict = Verdict.FULL
    else:
        verdict = Verdict.PARTIAL
    return ScoreVerdict(raw, maximum, verdict)


def _score_weighted_multi(
    scheme: WeightedMulti,
    selected: FrozenSet[int],
    maximum: float,
) -> ScoreVerdict:
    raw = 0.0
    for index, weight in enumerate(scheme.answer_scores):
        if index in selected:
            raw += weight
        elif weight > 0:
            raw -= weight

    correct = scheme.correct_indices()
    wrong = scheme.wrong_indices()

    if correct and correct <= selected and not (wrong & selected):
        verdict = Verdict.FULL
    elif wrong and wrong <= selected and not (correct & selected):
        # Only wrong answers picked; distinct from a merely low score
        verdict = Verdict.NONE
    else:
        verdict = Verdict.PARTIAL

    logger.debug(f"weighted-multi selected={sorted(selected)} raw={raw:g} verdict={verdict.value}")
    return ScoreVerdict(raw, maximum, verdict)

"""
Module: schemes

Purpose:
    Scoring scheme variants attached to each question. A question carries
    exactly one of four frozen scheme types; scoring code dispatches on the
    concrete type instead of sniffing optional payload fields.

Key Classes:
    - SchemeKind: Enum naming the four schemes (payload spelling)
    - LegacySingle / LegacyMulti: Exact-match schemes with a correct index set
    - WeightedSingle / WeightedMulti: Per-answer weight schemes
    - InvalidQuestionData: Raised when scheme data is inconsistent

Used By:
    - core.models.questions.Question
    - scoring.scorer: score_answer(), max_score()
    - core.utils.serialization: scheme inference from raw records
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, FrozenSet, Union


class InvalidQuestionData(ValueError):
    """Question data is malformed (raised at bank-build time)."""
    pass


class SchemeKind(Enum):
    """
    Names of the scoring schemes, valued by their payload spelling.

    Example:
        >>> SchemeKind("weighted-multi")
        <SchemeKind.WEIGHTED_MULTI: 'weighted-multi'>
    """

    LEGACY_SINGLE = "legacy-single"
    LEGACY_MULTI = "legacy-multi"
    WEIGHTED_SINGLE = "weighted-single"
    WEIGHTED_MULTI = "weighted-multi"


def _check_correct_answers(correct_answers: FrozenSet[int]) -> None:
    if not correct_answers:
        raise InvalidQuestionData("correct_answers must contain at least one index")
    negative = sorted(i for i in correct_answers if i < 0)
    if negative:
        raise InvalidQuestionData(f"correct answer indices must be non-negative: {negative}")


@dataclass(frozen=True)
class LegacySingle:
    """
    Single correct answer, all-or-nothing.

    Attributes:
        correct_answers: Set holding the one correct answer index
    """

    correct_answers: FrozenSet[int]

    kind: ClassVar[SchemeKind] = SchemeKind.LEGACY_SINGLE
    is_multi_select: ClassVar[bool] = False

    def __post_init__(self) -> None:
        _check_correct_answers(self.correct_answers)
        if len(self.correct_answers) != 1:
            raise InvalidQuestionData(
                f"legacy-single expects exactly one correct answer: {sorted(self.correct_answers)}"
            )

    def check_answer_count(self, answer_count: int) -> None:
        out_of_range = sorted(i for i in self.correct_answers if i >= answer_count)
        if out_of_range:
            raise InvalidQuestionData(
                f"correct answer indices {out_of_range} out of range for {answer_count} answers"
            )

    def correct_indices(self) -> FrozenSet[int]:
        return self.correct_answers


@dataclass(frozen=True)
class LegacyMulti:
    """
    Several correct answers, all-or-nothing exact set match.

    Attributes:
        correct_answers: Set of correct answer indices (one or more)
    """

    correct_answers: FrozenSet[int]

    kind: ClassVar[SchemeKind] = SchemeKind.LEGACY_MULTI
    is_multi_select: ClassVar[bool] = True

    def __post_init__(self) -> None:
        _check_correct_answers(self.correct_answers)

    def check_answer_count(self, answer_count: int) -> None:
        out_of_range = sorted(i for i in self.correct_answers if i >= answer_count)
        if out_of_range:
            raise InvalidQuestionData(
                f"correct answer indices {out_of_range} out of range for {answer_count} answers"
            )

    def correct_indices(self) -> FrozenSet[int]:
        return self.correct_answers


@dataclass(frozen=True)
class WeightedSingle:
    """
    One answer expected; each option carries its own credit.

    Weights are not normalised. Full credit means the selected weight equals
    the largest positive weight (compared with math.isclose), whatever its
    value; a bank whose best answer is worth 0.8 still scores FULL on it.

    Attributes:
        answer_scores: One weight per answer option, any sign
    """

    answer_scores: tuple[float, ...]

    kind: ClassVar[SchemeKind] = SchemeKind.WEIGHTED_SINGLE
    is_multi_select: ClassVar[bool] = False

    def check_answer_count(self, answer_count: int) -> None:
        if len(self.answer_scores) != answer_count:
            raise InvalidQuestionData(
                f"answer_scores has {len(self.answer_scores)} entries for {answer_count} answers"
            )

    def correct_indices(self) -> FrozenSet[int]:
        return frozenset(i for i, w in enumerate(self.answer_scores) if w > 0)


@dataclass(frozen=True)
class WeightedMulti:
    """
    Any number of answers; selected options add their weight and omitted
    positive-weight options are subtracted as a penalty.

    Attributes:
        answer_scores: One weight per answer option, any sign
    """

    answer_scores: tuple[float, ...]

    kind: ClassVar[SchemeKind] = SchemeKind.WEIGHTED_MULTI
    is_multi_select: ClassVar[bool] = True

    def check_answer_count(self, answer_count: int) -> None:
        if len(self.answer_scores) != answer_count:
            raise InvalidQuestionData(
                f"answer_scores has {len(self.answer_scores)} entries for {answer_count} answers"
            )

    def correct_indices(self) -> FrozenSet[int]:
        return frozenset(i for i, w in enumerate(self.answer_scores) if w > 0)

    def wrong_indices(self) -> FrozenSet[int]:
        return frozenset(i for i, w in enumerate(self.answer_scores) if w < 0)


ScoringScheme = Union[LegacySingle, LegacyMulti, WeightedSingle, WeightedMulti]

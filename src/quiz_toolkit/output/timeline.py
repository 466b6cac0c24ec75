"""
Module: output.timeline

Purpose:
    Turn a session's answer history into reviewable timeline entries: one
    per answered question, with every answer option marked as correct,
    chosen, both or neither.

Key Functions:
    - build_timeline(): AnswerRecord history -> TimelineEntry tuple

Key Classes:
    - AnswerMark: One answer option's review state
    - TimelineEntry: One answered question

Used By:
    - output.text_report: console timeline
    - output.renderer: PDF timeline
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from quiz_toolkit.core.models import AnswerRecord, Question, Verdict

VERDICT_SUMMARIES = {
    Verdict.FULL: "You answered this correctly!",
    Verdict.PARTIAL: "Partially correct - you missed some correct answers.",
    Verdict.NONE: "This answer was incorrect.",
}


@dataclass(frozen=True)
class AnswerMark:
    """
    Review state of one answer option.

    Attributes:
        index: Answer index (0-based)
        text: Answer text
        is_correct: Option earns credit (legacy correct set, positive weight)
        was_selected: User chose this option
    """

    index: int
    text: str
    is_correct: bool
    was_selected: bool

    @property
    def badges(self) -> tuple[str, ...]:
        """Labels shown beside the answer."""
        if self.is_correct and self.was_selected:
            return ("Correct", "Your Answer")
        if self.is_correct:
            return ("Correct Answer",)
        if self.was_selected:
            return ("Wrong", "Your Answer")
        return ()


@dataclass(frozen=True)
class TimelineEntry:
    """
    One answered question in the review timeline.

    Attributes:
        number: 1-based position in the session
        question: The question
        verdict: Correctness classification
        raw_score: Earned score
        max_score: Achievable score
        marks: Review state per answer option
        marked_unsure: User flagged the answer as a guess
    """

    number: int
    question: Question
    verdict: Verdict
    raw_score: float
    max_score: float
    marks: tuple[AnswerMark, ...]
    marked_unsure: bool = False

    @property
    def summary(self) -> str:
        return VERDICT_SUMMARIES[self.verdict]


def build_timeline(history: Iterable[AnswerRecord]) -> tuple[TimelineEntry, ...]:
    """
    Build timeline entries for an answer history.

    Args:
        history: Answer records in answer order

    Returns:
        One TimelineEntry per record, numbered from 1
    """
    entries = []
    for number, record in enumerate(history, start=1):
        question = record.question
        correct = question.scheme.correct_indices()
        marks = tuple(
            AnswerMark(
                index=i,
                text=text,
                is_correct=i in correct,
                was_selected=i in record.selected_indices,
            )
            for i, text in enumerate(question.answers)
        )
        entries.append(
            TimelineEntry(
                number=number,
                question=question,
                verdict=record.verdict,
                raw_score=record.raw_score,
                max_score=record.max_score,
                marks=marks,
                marked_unsure=record.marked_unsure,
            )
        )
    return tuple(entries)

"""
Module: selection

Purpose:
    Provides SelectedSet - the ordered question list planned for one
    session, with the optional pinned-last question kept at the end.

Key Functions:
    - SelectedSet.question_ids: Ids in session order
    - SelectedSet.topic_counts(): Questions per tagged topic
    - SelectedSet.pinned_question: The pinned-last question, if any

Used By:
    - selection.planner: plan_session() result
    - session.controller: Session question order
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Optional

from .questions import Question


@dataclass(frozen=True)
class SelectedSet:
    """
    Ordered questions for one session (immutable).

    Attributes:
        questions: Session order; a pinned question, if any, is last
        pinned_topic_id: Topic the last question was pinned from, or None

    Invariants:
        - No question id appears twice
        - When pinned_topic_id is set the last question is tagged with it

    Example:
        >>> selected = SelectedSet((q1, q2, q3), pinned_topic_id="capstone")
        >>> selected.pinned_question.id
        'q3'
    """

    questions: tuple[Question, ...]
    pinned_topic_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate selection on construction."""
        ids = [q.id for q in self.questions]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate questions in selection")
        if self.pinned_topic_id is not None:
            if not self.questions or self.pinned_topic_id not in self.questions[-1].topics:
                raise ValueError(
                    f"Last question must belong to pinned topic {self.pinned_topic_id!r}"
                )

    @property
    def question_ids(self) -> tuple[str, ...]:
        return tuple(q.id for q in self.questions)

    @property
    def pinned_question(self) -> Optional[Question]:
        if self.pinned_topic_id is None:
            return None
        return self.questions[-1]

    def topic_counts(self) -> dict[str, int]:
        """Number of selected questions tagged with each topic."""
        counts: Counter[str] = Counter()
        for question in self.questions:
            counts.update(dict.fromkeys(question.topics, 1))
        return dict(counts)

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    def __getitem__(self, index: int) -> Question:
        return self.questions[index]

    def __repr__(self) -> str:
        return (
            f"SelectedSet(questions={len(self.questions)}, "
            f"pinned={self.pinned_topic_id!r})"
        )

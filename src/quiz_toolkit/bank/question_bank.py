"""
Module: bank.question_bank

Purpose:
    Immutable in-memory index of every loaded question, grouped by topic.
    Built once after loading and only read afterwards.

Key Classes:
    - QuestionBank: Topic id -> questions (load order) plus the full list

Dependencies:
    - quiz_toolkit.core.models: Question, InvalidQuestionData

Used By:
    - bank.loader: load_bank()
    - selection.planner: plan_session()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from quiz_toolkit.core.models import InvalidQuestionData, Question

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionBank:
    """
    All questions available to a quiz (immutable).

    A question tagged with several topics appears in each of those topics'
    lists. Topic lists keep load order.

    Attributes:
        questions: Every question, in load order

    Invariants:
        - Question ids are unique

    Example:
        >>> bank = QuestionBank.build([q1, q2])
        >>> [q.id for q in bank.for_topic("basics")]
        ['q1']
    """

    questions: tuple[Question, ...] = ()
    _by_topic: Mapping[str, tuple[Question, ...]] = field(init=False, repr=False, compare=False)
    _by_id: Mapping[str, Question] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate uniqueness and build topic/id indexes."""
        by_id: dict[str, Question] = {}
        by_topic: dict[str, list[Question]] = {}
        for question in self.questions:
            if question.id in by_id:
                raise InvalidQuestionData(f"duplicate question id: {question.id!r}")
            by_id[question.id] = question
            for topic_id in dict.fromkeys(question.topics):
                by_topic.setdefault(topic_id, []).append(question)

        object.__setattr__(self, "_by_id", MappingProxyType(by_id))
        object.__setattr__(
            self,
            "_by_topic",
            MappingProxyType({tid: tuple(qs) for tid, qs in by_topic.items()}),
        )

    @classmethod
    def build(cls, questions: Iterable[Question]) -> QuestionBank:
        bank = cls(questions=tuple(questions))
        logger.debug(f"Built question bank: {len(bank)} questions, {len(bank.topic_ids)} topics")
        return bank

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def topic_ids(self) -> tuple[str, ...]:
        """Topic ids referenced by at least one question, in first-seen order."""
        return tuple(self._by_topic)

    @property
    def is_empty(self) -> bool:
        return not self.questions

    def for_topic(self, topic_id: str) -> tuple[Question, ...]:
        """
        Questions tagged with a topic.

        Args:
            topic_id: Topic identifier

        Returns:
            Questions in load order, empty if the topic has none
        """
        return self._by_topic.get(topic_id, ())

    def get(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def topic_counts(self) -> dict[str, int]:
        """Number of questions per topic id."""
        return {tid: len(qs) for tid, qs in self._by_topic.items()}

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    def __repr__(self) -> str:
        return f"QuestionBank(questions={len(self.questions)}, topics={len(self._by_topic)})"

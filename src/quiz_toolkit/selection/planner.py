"""
Module: selection.planner

Purpose:
    Build the ordered question list for one session from the question bank,
    honouring per-topic minimums, a total minimum, topic diversity and an
    optional pinned-last topic.

Key Functions:
    - plan_session(): Main entry point for planning

Key Classes:
    - SessionPlanner: Orchestrates the planning steps
    - InsufficientData: Raised when no session can be planned

Algorithm:
    1. Per configured topic (pinned topic excluded): shuffle, take up to
       min_questions_per_topic unused questions
    2. Back-fill from the remaining pool until min_total_questions
    3. Reserve one random question from the pinned-last topic
    4. Diversity-reorder the non-pinned questions
    5. Append the pinned question

    Questions tagged with the pinned topic are kept out of steps 1-2 so the
    pinned topic only ever appears last.

Dependencies:
    - random (std): random.Random.shuffle is an unbiased Fisher-Yates shuffle
    - bank.question_bank: QuestionBank
    - selection.diversity: diversity_reorder()

Used By:
    - session.controller: start_session()
    - cli: plan command
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Union

from quiz_toolkit.bank.question_bank import QuestionBank
from quiz_toolkit.core.models import Question, SelectedSet, Topic

from .config import SessionConfig
from .diversity import diversity_reorder

logger = logging.getLogger(__name__)


class InsufficientData(Exception):
    """No questions are available to plan a session."""
    pass


def plan_session(
    bank: QuestionBank,
    topics: Sequence[Union[Topic, str]],
    config: SessionConfig,
    rng: Optional[random.Random] = None,
) -> SelectedSet:
    """
    Plan the ordered question list for one session.

    Args:
        bank: Question bank to draw from
        topics: Configured topics (or topic ids), in configured order
        config: Session planning configuration
        rng: Random source; a fresh unseeded Random when None

    Returns:
        SelectedSet in presentation order

    Raises:
        InsufficientData: If the bank is empty or the plan would be empty

    Invariants:
        - No duplicate question ids
        - A pinned question, when configured and available, is last and is
          the only question tagged with the pinned topic

    Example:
        >>> selected = plan_session(bank, config.topics, SessionConfig(), random.Random(7))
        >>> len(selected)
        10
    """
    planner = SessionPlanner(bank, topics, config, rng or random.Random())
    return planner.run()


@dataclass
class SessionPlanner:
    """
    Session planning orchestrator.

    Attributes:
        bank: Question bank
        topics: Configured topics or topic ids
        config: Planning configuration
        rng: Random source
    """

    bank: QuestionBank
    topics: Sequence[Union[Topic, str]]
    config: SessionConfig
    rng: random.Random

    # Internal state
    _selected: List[Question] = field(init=False, default_factory=list)
    _used_ids: Set[str] = field(init=False, default_factory=set)

    @property
    def topic_ids(self) -> List[str]:
        return [t.id if isinstance(t, Topic) else t for t in self.topics]

    def run(self) -> SelectedSet:
        """
        Execute the planning steps.

        Returns:
            SelectedSet in presentation order
        """
        if self.bank.is_empty:
            raise InsufficientData("Question bank is empty; cannot start a session")

        self._selected = []
        self._used_ids = set()
        pinned_id = self.config.pinned_last_topic_id

        self._take_per_topic(pinned_id)
        self._backfill(pinned_id)
        pinned = self._choose_pinned(pinned_id)

        ordered = diversity_reorder(self._selected)
        if pinned is not None:
            ordered.append(pinned)

        if not ordered:
            raise InsufficientData(
                "No questions selected; check the per-topic and total minimums"
            )

        logger.info(
            f"Planned session with {len(ordered)} questions"
            + (f" (last pinned to {pinned_id!r})" if pinned is not None else "")
        )
        return SelectedSet(tuple(ordered), pinned_topic_id=pinned_id if pinned is not None else None)

    # ─────────────────────────────────────────────────────────────────────────
    # Planning Steps
    # ─────────────────────────────────────────────────────────────────────────

    def _is_candidate(self, question: Question, pinned_id: Optional[str]) -> bool:
        if question.id in self._used_ids:
            return False
        return pinned_id is None or pinned_id not in question.topics

    def _add(self, question: Question) -> None:
        self._selected.append(question)
        self._used_ids.add(question.id)

    def _take_per_topic(self, pinned_id: Optional[str]) -> None:
        """Step 1: up to min_questions_per_topic random questions per topic."""
        quota = self.config.min_questions_per_topic
        if quota == 0:
            return

        for topic_id in self.topic_ids:
            if topic_id == pinned_id:
                continue
            pool = list(self.bank.for_topic(topic_id))
            self.rng.shuffle(pool)

            taken = 0
            for question in pool:
                if taken >= quota:
                    break
                if not self._is_candidate(question, pinned_id):
                    continue
                self._add(question)
                taken += 1

            if taken < quota:
                logger.debug(
                    f"Topic {topic_id!r} supplied {taken}/{quota} questions"
                )

    def _backfill(self, pinned_id: Optional[str]) -> None:
        """Step 2: random fill from the remaining pool up to min_total_questions."""
        target = self.config.min_total_questions
        if len(self._selected) >= target:
            return

        pool = [q for q in self.bank if self._is_candidate(q, pinned_id)]
        self.rng.shuffle(pool)

        while len(self._selected) < target and pool:
            self._add(pool.pop())

        if len(self._selected) < target:
            logger.warning(
                f"Only {len(self._selected)} questions available for a "
                f"{target}-question session; continuing with fewer"
            )

    def _choose_pinned(self, pinned_id: Optional[str]) -> Optional[Question]:
        """Step 3: one random question from the pinned-last topic."""
        if pinned_id is None:
            return None

        pool = [q for q in self.bank.for_topic(pinned_id) if q.id not in self._used_ids]
        if not pool:
            logger.warning(f"Pinned-last topic {pinned_id!r} has no questions; nothing pinned")
            return None

        question = self.rng.choice(pool)
        self._used_ids.add(question.id)
        return question

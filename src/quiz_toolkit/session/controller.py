"""
Module: session.controller

Purpose:
    Session lifecycle: plan a question set, take answers one at a time,
    keep the answer history and per-topic tallies, and produce the report.
    All state lives in an explicit Session value owned by the caller.

Key Functions:
    - start_session(): Plan and create a fresh Session
    - submit_answer(): Score the current question and advance
    - restart_session(): New Session with the same bank and configuration

Key Classes:
    - Session: Mutable state of one quiz run
    - SessionError: Invalid operation on a session

Dependencies:
    - selection.planner: plan_session()
    - scoring: score_answer(), fold_answer(), build_report()

Used By:
    - cli: run command
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from quiz_toolkit.bank.question_bank import QuestionBank
from quiz_toolkit.core.models import (
    AnswerRecord,
    Question,
    SelectedSet,
    SessionReport,
    Topic,
    TopicTally,
)
from quiz_toolkit.scoring import build_report, fold_answer, new_tallies, score_answer
from quiz_toolkit.selection import SessionConfig, plan_session

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Invalid operation for the session's current state."""
    pass


@dataclass
class Session:
    """
    State of one quiz run.

    Created by start_session(); updated only through submit_answer().

    Attributes:
        bank: Question bank the session was planned from
        topics: Configured topics
        config: Planning configuration
        selected: Planned questions in presentation order
        history: Answer records in answer order
        tallies: Topic id -> running totals
        current_index: Index of the next question to answer
    """

    bank: QuestionBank
    topics: tuple[Topic, ...]
    config: SessionConfig
    selected: SelectedSet
    history: List[AnswerRecord] = field(default_factory=list)
    tallies: Dict[str, TopicTally] = field(default_factory=dict)
    current_index: int = 0

    @property
    def is_complete(self) -> bool:
        return self.current_index >= len(self.selected)

    @property
    def current_question(self) -> Optional[Question]:
        """Question awaiting an answer, None once the session is complete."""
        if self.is_complete:
            return None
        return self.selected[self.current_index]

    @property
    def progress(self) -> tuple[int, int]:
        """(answered, total) question counts."""
        return (len(self.history), len(self.selected))

    @property
    def unsure_count(self) -> int:
        return sum(1 for record in self.history if record.marked_unsure)

    def topic(self, topic_id: str) -> Optional[Topic]:
        for topic in self.topics:
            if topic.id == topic_id:
                return topic
        return None

    def report(self) -> SessionReport:
        """Per-topic and overall results for the answers given so far."""
        return build_report(self.tallies)

    def __repr__(self) -> str:
        answered, total = self.progress
        return f"Session(answered={answered}/{total}, complete={self.is_complete})"


def start_session(
    bank: QuestionBank,
    topics: Sequence[Topic],
    config: SessionConfig,
    rng: Optional[random.Random] = None,
) -> Session:
    """
    Plan a question set and create a fresh session.

    Args:
        bank: Question bank
        topics: Configured topics
        config: Planning configuration
        rng: Random source for planning

    Returns:
        Session positioned on the first question

    Raises:
        InsufficientData: If no questions can be planned
    """
    selected = plan_session(bank, topics, config, rng)
    session = Session(
        bank=bank,
        topics=tuple(topics),
        config=config,
        selected=selected,
        tallies=new_tallies(topics),
    )
    logger.info(f"Started session with {len(selected)} questions")
    return session


def submit_answer(
    session: Session,
    selected_indices: Iterable[int],
    *,
    marked_unsure: bool = False,
) -> AnswerRecord:
    """
    Score the current question and move to the next one.

    Args:
        session: Session to update
        selected_indices: Chosen answer indices (0-based); empty means no answer
        marked_unsure: User flagged the answer as a guess

    Returns:
        The AnswerRecord appended to the session history

    Raises:
        SessionError: If the session is already complete
        InvalidSelection: If the indices do not fit the question
    """
    question = session.current_question
    if question is None:
        raise SessionError("Session is complete; no question awaits an answer")

    selected = frozenset(selected_indices)
    score = score_answer(question, selected)
    record = AnswerRecord.from_score(question, selected, score, marked_unsure=marked_unsure)

    session.history.append(record)
    fold_answer(session.tallies, question, record)
    session.current_index += 1

    logger.debug(f"Q{session.current_index} {question.id}: {record.verdict.value} ({record.raw_score:g}/{record.max_score:g})")
    if session.is_complete:
        logger.info(f"Session complete: {session.report().overall.percentage}% overall")
    return record


def restart_session(session: Session, rng: Optional[random.Random] = None) -> Session:
    """
    Discard a session's state and plan a new one with the same inputs.

    Args:
        session: Session to replace
        rng: Random source for planning

    Returns:
        Fresh Session
    """
    logger.info("Restarting session")
    return start_session(session.bank, session.topics, session.config, rng)

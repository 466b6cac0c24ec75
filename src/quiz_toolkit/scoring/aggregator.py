"""
Module: scoring.aggregator

Purpose:
    Accumulate per-topic score totals across a session and derive the
    end-of-session report.

Key Functions:
    - new_tallies(): Zeroed tally per configured topic
    - fold_answer(): Add one answer record to the tallies
    - build_report(): Per-topic and overall summaries

Note:
    A question contributes its full raw and max score to every topic it is
    tagged with; nothing is divided among topics. Overall totals sum the
    topic tallies, so multi-topic questions count once per topic.

Used By:
    - session.controller: Session tallies and report()
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, MutableMapping, Union

from quiz_toolkit.core.models import (
    AnswerRecord,
    Question,
    ScoreSummary,
    SessionReport,
    Topic,
    TopicTally,
    percentage_of,
)

from .feedback import feedback_level

logger = logging.getLogger(__name__)


def new_tallies(topics: Iterable[Union[Topic, str]]) -> Dict[str, TopicTally]:
    """
    Zeroed tallies for the configured topics.

    Args:
        topics: Configured topics or topic ids

    Returns:
        Topic id -> TopicTally, in configured order
    """
    return {
        (t.id if isinstance(t, Topic) else t): TopicTally()
        for t in topics
    }


def fold_answer(
    tallies: MutableMapping[str, TopicTally],
    question: Question,
    record: AnswerRecord,
) -> None:
    """
    Add an answer record to the tallies of every topic the question has.

    Topic ids missing from the tallies (not configured) are skipped.

    Args:
        tallies: Topic id -> TopicTally, updated in place
        question: Answered question
        record: Graded answer

    Example:
        >>> fold_answer(tallies, q_tagged_a_and_b, record_0_7_of_1)
        >>> tallies["a"].earned_score, tallies["b"].earned_score
        (0.7, 0.7)
    """
    for topic_id in dict.fromkeys(question.topics):
        tally = tallies.get(topic_id)
        if tally is None:
            logger.debug(f"Ignoring unconfigured topic {topic_id!r} on question {question.id!r}")
            continue
        tally.add(record.raw_score, record.max_score)


def summarize(earned: float, maximum: float) -> ScoreSummary:
    percentage = percentage_of(earned, maximum)
    return ScoreSummary(
        earned=earned,
        max=maximum,
        percentage=percentage,
        level=feedback_level(percentage),
    )


def build_report(tallies: Mapping[str, TopicTally]) -> SessionReport:
    """
    Build the end-of-session report from the tallies.

    Args:
        tallies: Topic id -> TopicTally

    Returns:
        SessionReport with per-topic and overall summaries
    """
    per_topic = {
        topic_id: summarize(tally.earned_score, tally.max_score)
        for topic_id, tally in tallies.items()
    }
    earned = sum(t.earned_score for t in tallies.values())
    maximum = sum(t.max_score for t in tallies.values())
    return SessionReport(per_topic=per_topic, overall=summarize(earned, maximum))

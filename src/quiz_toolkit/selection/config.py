"""
Module: selection.config

Purpose:
    Configuration dataclass for session planning.
    Immutable configuration with validation on construction.

Key Classes:
    - SessionConfig: Per-topic minimum, total minimum, pinned-last topic

Dependencies:
    - dataclasses (std)

Used By:
    - selection.planner: plan_session()
    - session.controller: start_session()
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class SessionConfig:
    """
    Configuration for planning one session (immutable).

    Minimums are soft: when the bank cannot satisfy them the planner returns
    everything available.

    Attributes:
        min_questions_per_topic: Questions drawn from each non-pinned topic
        min_total_questions: Session length to reach by back-filling
        pinned_last_topic_id: Topic whose single question is always last

    Invariants:
        - min_questions_per_topic >= 0
        - min_total_questions >= 0

    Example:
        >>> config = SessionConfig(min_questions_per_topic=2, min_total_questions=6)
        >>> config.with_pinned_last("capstone").pinned_last_topic_id
        'capstone'
    """

    min_questions_per_topic: int = 5
    min_total_questions: int = 10
    pinned_last_topic_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.min_questions_per_topic < 0:
            raise ValueError(
                f"min_questions_per_topic must be non-negative: {self.min_questions_per_topic}"
            )
        if self.min_total_questions < 0:
            raise ValueError(f"min_total_questions must be non-negative: {self.min_total_questions}")

    @classmethod
    def for_question_count(
        cls,
        count: int,
        *,
        min_questions_per_topic: int = 0,
        pinned_last_topic_id: Optional[str] = None,
    ) -> SessionConfig:
        """
        Config for a session of a user-chosen length.

        Args:
            count: Desired number of questions
            min_questions_per_topic: Per-topic floor (0 = pure random fill)
            pinned_last_topic_id: Optional pinned-last topic

        Returns:
            SessionConfig with min_total_questions = count
        """
        return cls(
            min_questions_per_topic=min_questions_per_topic,
            min_total_questions=count,
            pinned_last_topic_id=pinned_last_topic_id,
        )

    def with_pinned_last(self, topic_id: Optional[str]) -> SessionConfig:
        return replace(self, pinned_last_topic_id=topic_id)

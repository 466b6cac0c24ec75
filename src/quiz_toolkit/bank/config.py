"""
Module: bank.config

Purpose:
    Configuration dataclass for a quiz, as read from config.json.
    Immutable configuration with validation on construction.

Key Classes:
    - QuizConfig: Topics, selection minimums and question file list

Dependencies:
    - dataclasses (std)
    - quiz_toolkit.core.models: Topic

Used By:
    - bank.loader: load_config(), load_bank()
    - cli: session configuration defaults
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from quiz_toolkit.core.models import Topic

DEFAULT_QUESTION_FILES = ("questions.json",)
DEFAULT_MIN_PER_TOPIC = 5
DEFAULT_MIN_TOTAL = 10


@dataclass(frozen=True)
class QuizConfig:
    """
    Quiz configuration (immutable).

    Attributes:
        topics: Configured topics, in display order
        min_questions_per_topic: Questions drawn per topic when planning
        min_total_questions: Minimum session length when planning
        question_files: Question file paths, relative to base_dir
        pinned_last_topic_id: Topic whose question always closes a session
        default_questions: Suggested session length shown to the user
        base_dir: Directory relative question file paths resolve against

    Invariants:
        - topic ids are unique
        - minimums are non-negative
        - pinned_last_topic_id, when set, names a configured topic

    Example:
        >>> config = QuizConfig(topics=(Topic("basics", "Basics"),))
        >>> config.topic_ids
        ('basics',)
    """

    topics: tuple[Topic, ...]
    min_questions_per_topic: int = DEFAULT_MIN_PER_TOPIC
    min_total_questions: int = DEFAULT_MIN_TOTAL
    question_files: tuple[str, ...] = DEFAULT_QUESTION_FILES
    pinned_last_topic_id: Optional[str] = None
    default_questions: Optional[int] = None
    base_dir: Path = field(default_factory=Path)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        ids = [t.id for t in self.topics]
        duplicates = sorted({tid for tid in ids if ids.count(tid) > 1})
        if duplicates:
            raise ValueError(f"duplicate topic ids: {duplicates}")
        if self.min_questions_per_topic < 0:
            raise ValueError(
                f"min_questions_per_topic must be non-negative: {self.min_questions_per_topic}"
            )
        if self.min_total_questions < 0:
            raise ValueError(f"min_total_questions must be non-negative: {self.min_total_questions}")
        if self.pinned_last_topic_id is not None and self.pinned_last_topic_id not in ids:
            raise ValueError(f"pinned last topic is not configured: {self.pinned_last_topic_id!r}")

    @property
    def topic_ids(self) -> tuple[str, ...]:
        return tuple(t.id for t in self.topics)

    def get_topic(self, topic_id: str) -> Optional[Topic]:
        for topic in self.topics:
            if topic.id == topic_id:
                return topic
        return None

    def question_paths(self) -> List[Path]:
        """Question file paths resolved against base_dir."""
        return [self.base_dir / name for name in self.question_files]

    @classmethod
    def from_dict(cls, data: Dict[str, Any], *, base_dir: Optional[Path] = None) -> QuizConfig:
        """
        Build from a config.json payload (camelCase keys).

        Args:
            data: Parsed config.json contents
            base_dir: Directory containing config.json

        Returns:
            QuizConfig instance
        """
        files = data.get("questionFiles") or list(DEFAULT_QUESTION_FILES)
        return cls(
            topics=tuple(Topic.from_dict(t) for t in data.get("topics", [])),
            min_questions_per_topic=data.get("minQuestionsPerTopic", DEFAULT_MIN_PER_TOPIC),
            min_total_questions=data.get("minTotalQuestions", DEFAULT_MIN_TOTAL),
            question_files=tuple(files),
            pinned_last_topic_id=data.get("pinnedLastTopic"),
            default_questions=data.get("defaultQuestions"),
            base_dir=base_dir if base_dir is not None else Path(),
        )

    def to_dict(self) -> dict:
        d: dict = {
            "topics": [t.to_dict() for t in self.topics],
            "minQuestionsPerTopic": self.min_questions_per_topic,
            "minTotalQuestions": self.min_total_questions,
            "questionFiles": list(self.question_files),
        }
        if self.pinned_last_topic_id is not None:
            d["pinnedLastTopic"] = self.pinned_last_topic_id
        if self.default_questions is not None:
            d["defaultQuestions"] = self.default_questions
        return d

"""
Core Models Package

Immutable, validated data models shared by every other subpackage.

All question-side models are frozen dataclasses. The only mutable model is
TopicTally, which a session owns and resets on restart.

| Model | Role |
|-------|------|
| `Topic` | Knowledge area a question is tagged with |
| `Question` | Prompt, answers, topic tags and scoring scheme |
| `LegacySingle` ... `WeightedMulti` | Closed set of scoring schemes |
| `AnswerRecord` | One graded answer in a session history |
| `SessionReport` | Per-topic and overall results |
"""

from .schemes import (
    InvalidQuestionData,
    LegacyMulti,
    LegacySingle,
    SchemeKind,
    ScoringScheme,
    WeightedMulti,
    WeightedSingle,
)
from .topics import Topic
from .questions import Question, DEFAULT_QUESTION_TYPE
from .answers import AnswerRecord, ScoreVerdict, Verdict, round_half_up
from .reports import ScoreSummary, SessionReport, TopicTally, percentage_of
from .selection import SelectedSet

__all__ = [
    "InvalidQuestionData",
    "LegacySingle",
    "LegacyMulti",
    "WeightedSingle",
    "WeightedMulti",
    "SchemeKind",
    "ScoringScheme",
    "Topic",
    "Question",
    "DEFAULT_QUESTION_TYPE",
    "AnswerRecord",
    "ScoreVerdict",
    "Verdict",
    "round_half_up",
    "ScoreSummary",
    "SessionReport",
    "TopicTally",
    "percentage_of",
    "SelectedSet",
]

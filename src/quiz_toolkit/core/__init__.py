"""
Quiz Toolkit Core Package

Shared data models, payload validation and serialization helpers.
Models here are the single source of truth for every other subpackage.

**DESIGN NOTES:**

1. **Closed Scoring Schemes**
   - Each question carries exactly one scheme dataclass
   - Scoring dispatches on the scheme type, never on optional payload keys

2. **Immutable Questions**
   - Questions, topics and answer records are frozen
   - Only per-topic tallies mutate, and they belong to one session
"""

from .models import (
    AnswerRecord,
    InvalidQuestionData,
    Question,
    SessionReport,
    Topic,
    Verdict,
)

__all__ = [
    "AnswerRecord",
    "InvalidQuestionData",
    "Question",
    "SessionReport",
    "Topic",
    "Verdict",
]

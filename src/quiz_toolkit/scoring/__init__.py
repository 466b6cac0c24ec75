"""
Module: scoring

Purpose:
    Per-question scoring across the four scoring schemes and per-topic
    aggregation of session results.

Key Functions:
    - score_answer(): Grade selected answer indices
    - max_score(): Best achievable score for a question
    - fold_answer(): Add a graded answer to per-topic tallies
    - build_report(): Session report from tallies
    - feedback_level() / feedback_message(): Qualitative feedback
"""

from .scorer import InvalidSelection, max_score, score_answer
from .aggregator import build_report, fold_answer, new_tallies, summarize
from .feedback import feedback_level, feedback_message

__all__ = [
    "InvalidSelection",
    "max_score",
    "score_answer",
    "build_report",
    "fold_answer",
    "new_tallies",
    "summarize",
    "feedback_level",
    "feedback_message",
]

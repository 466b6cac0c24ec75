"""
Module: scoring.feedback

Purpose:
    Map percentages to qualitative feedback levels and messages.

Key Functions:
    - feedback_level(): "excellent" / "good" / "average" / "needs-work"
    - feedback_message(): Sentence shown beside a topic result

Thresholds are inclusive lower bounds: >=90, >=70, >=50, else needs-work.
"""

from __future__ import annotations

EXCELLENT = "excellent"
GOOD = "good"
AVERAGE = "average"
NEEDS_WORK = "needs-work"

LEVEL_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, EXCELLENT),
    (70, GOOD),
    (50, AVERAGE),
)


def feedback_level(percentage: int) -> str:
    """
    Feedback level for a percentage.

    Example:
        >>> feedback_level(90)
        'excellent'
        >>> feedback_level(49)
        'needs-work'
    """
    for threshold, level in LEVEL_THRESHOLDS:
        if percentage >= threshold:
            return level
    return NEEDS_WORK


def feedback_message(percentage: int, topic_name: str) -> str:
    """Encouragement line for one topic result."""
    if percentage == 100:
        return f"Perfect! You've mastered {topic_name}!"
    if percentage >= 90:
        return f"Excellent! You have a strong understanding of {topic_name}!"
    if percentage >= 70:
        return f"Good job! You have a solid grasp of {topic_name}."
    if percentage >= 50:
        return f"Not bad! {topic_name} requires more practice."
    if percentage > 0:
        return f"{topic_name} needs more work. Consider reviewing the basics."
    return f"{topic_name} is a whole new world! Time to start learning!"

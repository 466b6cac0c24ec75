"""
Module: reports

Purpose:
    Per-topic running tallies and the read-only reports derived from them
    at the end of a session.

Key Classes:
    - TopicTally: Mutable earned/max accumulator for one topic
    - ScoreSummary: Earned, max, percentage and feedback level
    - SessionReport: Per-topic summaries plus the overall summary

Used By:
    - scoring.aggregator: fold_answer(), build_report()
    - output: text and PDF rendering
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .answers import round_half_up


@dataclass
class TopicTally:
    """
    Running score totals for one topic (mutable).

    Reset to zero when a session starts or restarts.
    """

    earned_score: float = 0.0
    max_score: float = 0.0

    def add(self, raw_score: float, max_score: float) -> None:
        self.earned_score += raw_score
        self.max_score += max_score

    @property
    def percentage(self) -> int:
        return percentage_of(self.earned_score, self.max_score)


def percentage_of(earned: float, maximum: float) -> int:
    """
    Whole-number percentage of earned over maximum.

    Returns 0 when maximum is not positive instead of dividing by zero.

    Example:
        >>> percentage_of(0.7, 1.0)
        70
        >>> percentage_of(3.0, 0.0)
        0
    """
    if maximum <= 0:
        return 0
    return round_half_up(100 * earned / maximum)


@dataclass(frozen=True)
class ScoreSummary:
    """
    Final score figures for one topic or for the whole session.

    Attributes:
        earned: Sum of raw scores
        max: Sum of achievable scores
        percentage: round-half-up(100 * earned / max), 0 when max is 0
        level: Feedback level ("excellent", "good", "average", "needs-work")
    """

    earned: float
    max: float
    percentage: int
    level: str

    @property
    def attempted(self) -> bool:
        """True when at least one question contributed to this summary."""
        return self.max > 0

    def to_dict(self) -> dict:
        return {
            "earned": self.earned,
            "max": self.max,
            "percentage": self.percentage,
            "level": self.level,
        }


@dataclass(frozen=True)
class SessionReport:
    """
    End-of-session report.

    Attributes:
        per_topic: Topic id -> summary, in configured topic order
        overall: Totals summed across all topics

    Note:
        A question tagged with several topics counts once per topic, so the
        overall max can exceed the sum of per-question maxima.
    """

    per_topic: Dict[str, ScoreSummary] = field(default_factory=dict)
    overall: ScoreSummary = field(default_factory=lambda: ScoreSummary(0.0, 0.0, 0, "needs-work"))

    def to_dict(self) -> dict:
        return {
            "per_topic": {tid: s.to_dict() for tid, s in self.per_topic.items()},
            "overall": self.overall.to_dict(),
        }

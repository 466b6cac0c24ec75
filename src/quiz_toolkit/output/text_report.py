"""
Module: output.text_report

Purpose:
    Plain-text rendering of session results for the console: overall score,
    per-topic bars with feedback, and the answer timeline.

Key Functions:
    - render_text_report(): Full results text
    - render_timeline(): Timeline section only
    - score_bar(): Fixed-width text progress bar
"""

from __future__ import annotations

from typing import Iterable, Sequence

from quiz_toolkit.core.models import AnswerRecord, SessionReport, Topic, Verdict
from quiz_toolkit.scoring.feedback import feedback_message

from .timeline import TimelineEntry, build_timeline

BAR_WIDTH = 20
VERDICT_SYMBOLS = {
    Verdict.FULL: "[+]",
    Verdict.PARTIAL: "[~]",
    Verdict.NONE: "[x]",
}


def score_bar(percentage: int, width: int = BAR_WIDTH) -> str:
    """
    Text bar for a percentage, clamped to 0-100.

    Example:
        >>> score_bar(50, width=10)
        '[#####.....]'
    """
    filled = max(0, min(width, percentage * width // 100))
    return "[" + "#" * filled + "." * (width - filled) + "]"


def _fmt(value: float) -> str:
    return f"{value:g}"


def render_text_report(
    report: SessionReport,
    topics: Sequence[Topic],
    history: Iterable[AnswerRecord] = (),
    *,
    include_timeline: bool = True,
) -> str:
    """
    Render results as text.

    Topics without any answered question are left out.

    Args:
        report: Session report
        topics: Configured topics, in display order
        history: Answer records for the timeline
        include_timeline: Append the question timeline

    Returns:
        Multi-line report text
    """
    overall = report.overall
    lines = [
        "Overall Score",
        f"  {overall.percentage}%  {score_bar(overall.percentage)}",
        f"  {_fmt(overall.earned)} out of {_fmt(overall.max)} points",
        "",
        "Topic Scores",
    ]

    for topic in topics:
        summary = report.per_topic.get(topic.id)
        if summary is None or not summary.attempted:
            continue
        lines.append(f"  {topic.label}")
        lines.append(f"    {score_bar(summary.percentage)} {summary.percentage}% ({summary.level})")
        lines.append(f"    {_fmt(summary.earned)}/{_fmt(summary.max)} points")
        lines.append(f"    {feedback_message(summary.percentage, topic.name)}")

    records = list(history)
    if include_timeline and records:
        lines.append("")
        lines.append(render_timeline(build_timeline(records)))

    return "\n".join(lines)


def render_timeline(entries: Sequence[TimelineEntry]) -> str:
    """Render timeline entries, one block per question."""
    lines = ["Question Timeline"]
    lines.append("  " + " ".join(f"{VERDICT_SYMBOLS[e.verdict]}{e.number}" for e in entries))

    for entry in entries:
        question = entry.question
        header = f"Question {entry.number} [{question.type}]"
        if entry.marked_unsure:
            header += " (marked unsure)"
        lines.append("")
        lines.append(header)
        lines.append(f"  {question.text}")
        if question.code:
            lines.extend(f"    {code_line}" for code_line in question.code.splitlines())
        for mark in entry.marks:
            badges = "".join(f" <{b}>" for b in mark.badges)
            lines.append(f"  {mark.index + 1}. {mark.text}{badges}")
        lines.append(f"  {entry.summary} ({_fmt(entry.raw_score)}/{_fmt(entry.max_score)})")

    return "\n".join(lines)

"""
Module: output.renderer

Purpose:
    Render session results to PDF using ReportLab: overall score, one bar
    per attempted topic coloured by feedback level, and the answer timeline.

Key Functions:
    - render_pdf_report(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - output.timeline: Timeline entries

Used By:
    - cli: run --pdf
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from quiz_toolkit.core.models import AnswerRecord, SessionReport, Topic, Verdict
from quiz_toolkit.scoring.feedback import AVERAGE, EXCELLENT, GOOD, feedback_message

from .timeline import TimelineEntry, build_timeline

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH_PT, A4_HEIGHT_PT = A4
MARGIN = 50
LINE_HEIGHT = 14
BAR_HEIGHT = 12
BODY_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"
MONO_FONT = "Courier"
BODY_SIZE = 10
FOOTER_FONT_SIZE = 7

LEVEL_COLOURS = {
    EXCELLENT: (0.16, 0.65, 0.27),
    GOOD: (0.25, 0.55, 0.85),
    AVERAGE: (0.95, 0.65, 0.10),
}
NEEDS_WORK_COLOUR = (0.86, 0.21, 0.27)

VERDICT_COLOURS = {
    Verdict.FULL: LEVEL_COLOURS[EXCELLENT],
    Verdict.PARTIAL: LEVEL_COLOURS[AVERAGE],
    Verdict.NONE: NEEDS_WORK_COLOUR,
}


def _get_footer_text() -> str:
    """Get footer text with current version number."""
    from quiz_toolkit import __version__
    return f"Generated with quiz_toolkit v{__version__}"


class _PageWriter:
    """Top-down line cursor over a ReportLab canvas with automatic page breaks."""

    def __init__(self, c: canvas.Canvas) -> None:
        self.c = c
        self.pages = 1
        self.y = A4_HEIGHT_PT - MARGIN

    @property
    def width(self) -> float:
        return A4_WIDTH_PT - 2 * MARGIN

    def ensure(self, height: float) -> None:
        if self.y - height < MARGIN:
            _draw_footer(self.c)
            self.c.showPage()
            self.pages += 1
            self.y = A4_HEIGHT_PT - MARGIN

    def text(self, value: str, *, font: str = BODY_FONT, size: int = BODY_SIZE, indent: float = 0) -> None:
        for line in simpleSplit(value, font, size, self.width - indent) or [""]:
            self.ensure(LINE_HEIGHT)
            self.c.setFont(font, size)
            self.c.setFillColorRGB(0, 0, 0)
            self.c.drawString(MARGIN + indent, self.y - size, line)
            self.y -= LINE_HEIGHT

    def gap(self, height: float = LINE_HEIGHT / 2) -> None:
        self.y -= height


def render_pdf_report(
    report: SessionReport,
    topics: Sequence[Topic],
    history: Iterable[AnswerRecord],
    output_path: Path,
) -> int:
    """
    Write a results PDF.

    Args:
        report: Session report
        topics: Configured topics, in display order
        history: Answer records for the timeline
        output_path: PDF path to write

    Returns:
        Number of pages written

    Example:
        >>> render_pdf_report(session.report(), config.topics, session.history, Path("results.pdf"))
        2
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    c = canvas.Canvas(str(output_path), pagesize=A4)
    c.setTitle("Quiz Results")
    writer = _PageWriter(c)

    overall = report.overall
    writer.text("Quiz Results", font=BOLD_FONT, size=18)
    writer.gap(LINE_HEIGHT)
    writer.text(f"Overall Score: {overall.percentage}%", font=BOLD_FONT, size=14)
    writer.text(f"{overall.earned:g} out of {overall.max:g} points")
    writer.gap()

    writer.text("Topic Scores", font=BOLD_FONT, size=12)
    for topic in topics:
        summary = report.per_topic.get(topic.id)
        if summary is None or not summary.attempted:
            continue
        writer.text(f"{topic.name}  {summary.earned:g}/{summary.max:g}", font=BOLD_FONT)
        _draw_bar(writer, summary.percentage, LEVEL_COLOURS.get(summary.level, NEEDS_WORK_COLOUR))
        writer.text(feedback_message(summary.percentage, topic.name), indent=10)
        writer.gap()

    entries = build_timeline(history)
    if entries:
        writer.gap(LINE_HEIGHT)
        writer.text("Question Timeline", font=BOLD_FONT, size=12)
        for entry in entries:
            _draw_entry(writer, entry)

    _draw_footer(c)
    c.save()
    logger.info(f"Rendered results PDF with {writer.pages} pages to {output_path}")
    return writer.pages


def _draw_bar(writer: _PageWriter, percentage: int, colour: tuple[float, float, float]) -> None:
    """Draw a horizontal score bar filled to percentage (clamped 0-100)."""
    writer.ensure(BAR_HEIGHT + 4)
    c = writer.c
    top = writer.y - BAR_HEIGHT
    c.setStrokeColorRGB(0.7, 0.7, 0.7)
    c.setFillColorRGB(0.93, 0.93, 0.93)
    c.rect(MARGIN, top, writer.width, BAR_HEIGHT, stroke=1, fill=1)

    fill_width = writer.width * max(0, min(100, percentage)) / 100
    if fill_width > 0:
        c.setFillColorRGB(*colour)
        c.rect(MARGIN, top, fill_width, BAR_HEIGHT, stroke=0, fill=1)

    c.setFillColorRGB(0, 0, 0)
    c.setFont(BOLD_FONT, 8)
    c.drawString(MARGIN + 4, top + 3, f"{percentage}%")
    writer.y -= BAR_HEIGHT + 4


def _draw_entry(writer: _PageWriter, entry: TimelineEntry) -> None:
    question = entry.question
    writer.gap()
    writer.ensure(LINE_HEIGHT * 3)

    c = writer.c
    c.setFillColorRGB(*VERDICT_COLOURS[entry.verdict])
    c.circle(MARGIN + 5, writer.y - 5, 5, stroke=0, fill=1)
    header = f"Question {entry.number} [{question.type}]"
    if entry.marked_unsure:
        header += " (marked unsure)"
    writer.text(header, font=BOLD_FONT, indent=15)
    writer.text(question.text, indent=15)

    if question.code:
        for code_line in question.code.splitlines():
            writer.text(code_line, font=MONO_FONT, size=9, indent=25)

    for mark in entry.marks:
        badges = "".join(f"  [{b}]" for b in mark.badges)
        font = BOLD_FONT if mark.is_correct else BODY_FONT
        writer.text(f"{mark.index + 1}. {mark.text}{badges}", font=font, indent=25)

    writer.text(f"{entry.summary} ({entry.raw_score:g}/{entry.max_score:g})", indent=15)


def _draw_footer(c: canvas.Canvas) -> None:
    c.setFont(BODY_FONT, FOOTER_FONT_SIZE)
    c.setFillColorRGB(0.4, 0.4, 0.4)  # Subtle gray color
    c.drawString(MARGIN, MARGIN / 2, _get_footer_text())

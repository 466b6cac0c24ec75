"""
Module: output

Purpose:
    Result presentation: review timeline, console text and PDF export.

Key Functions:
    - build_timeline(): Answer history -> timeline entries
    - render_text_report(): Console results text
    - render_pdf_report(): Results PDF (ReportLab)
"""

from .timeline import AnswerMark, TimelineEntry, build_timeline
from .text_report import render_text_report, render_timeline, score_bar
from .renderer import render_pdf_report

__all__ = [
    "AnswerMark",
    "TimelineEntry",
    "build_timeline",
    "render_text_report",
    "render_timeline",
    "score_bar",
    "render_pdf_report",
]

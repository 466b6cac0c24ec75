"""
Console front-end for the quiz toolkit.

Commands:
    quiz-toolkit topics CONFIG        List topics and question counts
    quiz-toolkit plan CONFIG [opts]   Print a planned session order
    quiz-toolkit run CONFIG [opts]    Take a quiz in the terminal

Answers are typed as comma-separated option numbers ("1,3"); a trailing
"?" marks the answer as unsure, an empty line submits no answer and "q"
abandons the session.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from quiz_toolkit import __version__
from quiz_toolkit.bank import InvalidQuestionData, LoaderError, QuizConfig, load_bank
from quiz_toolkit.core.models import Question
from quiz_toolkit.output import render_pdf_report, render_text_report
from quiz_toolkit.scoring import InvalidSelection
from quiz_toolkit.selection import InsufficientData, SessionConfig, plan_session
from quiz_toolkit.session import Session, start_session, submit_answer

logger = logging.getLogger("quiz_toolkit.cli")

QUIT_COMMANDS = {"q", "quit", "exit"}


class AnswerParseError(ValueError):
    """Typed answer could not be understood."""
    pass


def parse_answer(raw: str, answer_count: int) -> tuple[frozenset[int], bool]:
    """
    Parse a typed answer into 0-based indices and the unsure flag.

    Args:
        raw: Text like "1,3" or "2?"
        answer_count: Number of answer options

    Returns:
        Tuple of (selected indices, marked_unsure)

    Raises:
        AnswerParseError: If the text is not a list of option numbers in range

    Example:
        >>> parse_answer("1, 3?", 4)
        (frozenset({0, 2}), True)
    """
    text = raw.strip()
    unsure = text.endswith("?")
    if unsure:
        text = text[:-1].strip()
    if not text:
        return frozenset(), unsure

    indices = set()
    for token in text.replace(" ", ",").split(","):
        if not token:
            continue
        if not token.isdecimal():
            raise AnswerParseError(f"Not an option number: {token!r}")
        number = int(token)
        if not 1 <= number <= answer_count:
            raise AnswerParseError(f"Option {number} out of range 1-{answer_count}")
        indices.add(number - 1)
    return frozenset(indices), unsure


def session_config_from_args(args: argparse.Namespace, quiz: QuizConfig) -> SessionConfig:
    """
    Combine command-line overrides with the quiz configuration.

    --questions replaces the configured total. Otherwise the suggested
    defaultQuestions length only raises minTotalQuestions, never lowers it.
    """
    per_topic = args.per_topic if args.per_topic is not None else quiz.min_questions_per_topic
    if args.questions is not None:
        total = args.questions
    else:
        total = max(quiz.min_total_questions, quiz.default_questions or 0)
    pinned = args.pin_last if args.pin_last is not None else quiz.pinned_last_topic_id
    return SessionConfig.for_question_count(
        total,
        min_questions_per_topic=per_topic,
        pinned_last_topic_id=pinned or None,
    )


def _format_question(question: Question, number: int, total: int) -> str:
    lines = [f"Question {number}/{total} [{question.type}]", question.text]
    if question.code:
        lines.extend(f"    {line}" for line in question.code.splitlines())
    for i, answer in enumerate(question.answers, start=1):
        lines.append(f"  {i}. {answer}")
    hint = "Select all that apply" if question.is_multi_select else "Select one"
    lines.append(f"({hint}; add '?' if unsure)")
    return "\n".join(lines)


def run_quiz(
    session: Session,
    *,
    read: Optional[Callable[[str], str]] = None,
    write: Callable[[str], None] = print,
) -> bool:
    """
    Ask every remaining question of a session.

    Args:
        session: Session to drive
        read: Prompt function returning the typed line (input() when None)
        write: Output function

    Returns:
        True if the session was completed, False if abandoned
    """
    read = read or input
    while not session.is_complete:
        question = session.current_question
        answered, total = session.progress
        write("")
        write(_format_question(question, answered + 1, total))

        while True:
            raw = read("> ")
            if raw.strip().lower() in QUIT_COMMANDS:
                logger.info("Session abandoned")
                return False
            try:
                selected, unsure = parse_answer(raw, len(question.answers))
                submit_answer(session, selected, marked_unsure=unsure)
            except (AnswerParseError, InvalidSelection) as e:
                write(f"  {e}")
                continue
            break
    return True


def _cmd_topics(args: argparse.Namespace) -> int:
    quiz, bank = load_bank(args.config)
    counts = bank.topic_counts()
    for topic in quiz.topics:
        marker = "  (always last)" if topic.id == quiz.pinned_last_topic_id else ""
        print(f"{topic.label}: {counts.get(topic.id, 0)} questions{marker}")
    print(f"Total: {len(bank)} questions")
    return 0


def _cmd_plan(args: argparse.Namespace) -> int:
    quiz, bank = load_bank(args.config)
    config = session_config_from_args(args, quiz)
    selected = plan_session(bank, quiz.topics, config, random.Random(args.seed))
    for number, question in enumerate(selected, start=1):
        print(f"{number:3d}. {question.id}  [{', '.join(question.topics)}]")
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    quiz, bank = load_bank(args.config)
    config = session_config_from_args(args, quiz)
    session = start_session(bank, quiz.topics, config, random.Random(args.seed))

    print("Topics:")
    for topic in quiz.topics:
        print(f"  {topic.label}")

    if not run_quiz(session):
        return 0

    report = session.report()
    print("")
    print(render_text_report(report, quiz.topics, session.history))
    if session.unsure_count:
        print(f"\nMarked unsure: {session.unsure_count}")

    if args.pdf:
        render_pdf_report(report, quiz.topics, session.history, args.pdf)
        print(f"\nSaved results to {args.pdf}")
    return 0


def _add_session_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("config", type=Path, help="Path to config.json")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible sessions")
    parser.add_argument("--questions", type=int, default=None, help="Minimum total questions")
    parser.add_argument("--per-topic", type=int, default=None, help="Minimum questions per topic")
    parser.add_argument("--pin-last", default=None, help="Topic id whose question always comes last")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-toolkit",
        description="Topic-balanced quizzes with weighted scoring",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    topics = sub.add_parser("topics", help="List topics and question counts")
    topics.add_argument("config", type=Path, help="Path to config.json")
    topics.set_defaults(handler=_cmd_topics)

    plan = sub.add_parser("plan", help="Print a planned session order")
    _add_session_options(plan)
    plan.set_defaults(handler=_cmd_plan)

    run = sub.add_parser("run", help="Take a quiz in the terminal")
    _add_session_options(run)
    run.add_argument("--pdf", type=Path, default=None, help="Also write results to this PDF")
    run.set_defaults(handler=_cmd_run)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        return args.handler(args)
    except (LoaderError, InvalidQuestionData, InsufficientData, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("", file=sys.stderr)
        return 130


if __name__ == "__main__":
    raise SystemExit(main())

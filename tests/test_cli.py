"""
Tests for the quiz-toolkit command line.
"""

import argparse
import json
import random

import pytest

from quiz_toolkit.bank import QuestionBank, QuizConfig
from quiz_toolkit.cli import (
    AnswerParseError,
    main,
    parse_answer,
    run_quiz,
    session_config_from_args,
)
from quiz_toolkit.core.models import Question, Topic, WeightedSingle
from quiz_toolkit.selection import SessionConfig
from quiz_toolkit.session import start_session


def scripted(lines):
    """Read function that replays lines in order."""
    it = iter(lines)
    return lambda prompt: next(it)


class TestParseAnswer:
    """Tests for parse_answer()."""

    @pytest.mark.parametrize("raw, expected", [
        ("1", (frozenset({0}), False)),
        ("1,3", (frozenset({0, 2}), False)),
        (" 2 3 ", (frozenset({1, 2}), False)),
        ("1, 3?", (frozenset({0, 2}), True)),
        ("", (frozenset(), False)),
        ("?", (frozenset(), True)),
        ("2,2", (frozenset({1}), False)),
    ])
    def test_parse_when_valid_then_zero_based(self, raw, expected):
        """Typed option numbers become 0-based indices."""
        assert parse_answer(raw, 4) == expected

    @pytest.mark.parametrize("raw", ["0", "5", "a", "1;2", "-1", "\u00b2", "\u00bd"])
    def test_parse_when_invalid_then_raises(self, raw):
        """Anything other than in-range ASCII option numbers is rejected."""
        with pytest.raises(AnswerParseError):
            parse_answer(raw, 4)


class TestSessionConfigFromArgs:
    """Command-line overrides over config.json values."""

    @pytest.fixture
    def quiz(self):
        return QuizConfig(
            topics=(Topic("a", "A"), Topic("cap", "Cap")),
            min_questions_per_topic=2,
            min_total_questions=8,
            pinned_last_topic_id="cap",
            default_questions=6,
        )

    def test_args_when_unset_then_config_values(self, quiz):
        """Without flags the config values are used."""
        args = argparse.Namespace(per_topic=None, questions=None, pin_last=None)

        assert session_config_from_args(args, quiz) == SessionConfig(2, 8, "cap")

    def test_args_when_default_questions_larger_then_raises_total(self):
        """A larger suggested length raises the total."""
        quiz = QuizConfig(topics=(Topic("a", "A"),), min_total_questions=4, default_questions=12)
        args = argparse.Namespace(per_topic=None, questions=None, pin_last=None)

        assert session_config_from_args(args, quiz).min_total_questions == 12

    def test_args_when_default_questions_smaller_then_minimum_kept(self):
        """A smaller suggested length never lowers the minimum."""
        quiz = QuizConfig(topics=(Topic("a", "A"),), min_total_questions=10, default_questions=3)
        args = argparse.Namespace(per_topic=None, questions=None, pin_last=None)

        assert session_config_from_args(args, quiz).min_total_questions == 10

    def test_args_when_set_then_override(self, quiz):
        """Flags override the config."""
        args = argparse.Namespace(per_topic=0, questions=3, pin_last="")

        assert session_config_from_args(args, quiz) == SessionConfig(0, 3, None)


class TestRunQuiz:
    """Tests for the interactive loop."""

    @pytest.fixture
    def session(self):
        bank = QuestionBank.build([
            Question("q1", "First?", ("a",), ("x", "y"), WeightedSingle((1.0, 0.0))),
            Question("q2", "Second?", ("a",), ("x", "y"), WeightedSingle((1.0, 0.5))),
        ])
        config = SessionConfig(min_questions_per_topic=0, min_total_questions=2)
        return start_session(bank, (Topic("a", "A"),), config, random.Random(0))

    def test_run_when_bad_input_then_reprompts(self, session):
        """Bad answers are reported and asked again."""
        output = []

        completed = run_quiz(session, read=scripted(["9", "1,2", "1", "1?"]), write=output.append)

        assert completed is True
        assert session.is_complete
        assert session.unsure_count == 1
        assert any("out of range" in line for line in output)

    def test_run_when_non_ascii_digit_then_reprompts(self, session):
        """Superscript digits are asked again, not a crash."""
        output = []

        completed = run_quiz(session, read=scripted(["\u00b2", "1", "2"]), write=output.append)

        assert completed is True
        assert [r.selected_indices for r in session.history] == [frozenset({0}), frozenset({1})]
        assert any("Not an option number" in line for line in output)

    def test_run_when_quit_then_abandoned(self, session):
        """q abandons the session."""
        completed = run_quiz(session, read=scripted(["q"]), write=lambda line: None)

        assert completed is False
        assert session.progress == (0, 2)


class TestMain:
    """End-to-end command tests against the sample quiz."""

    def test_topics_when_sample_then_lists_counts(self, sample_config_path, capsys):
        """topics lists counts and marks the pinned topic."""
        assert main(["topics", str(sample_config_path)]) == 0

        out = capsys.readouterr().out
        assert "Capstone: 2 questions  (always last)" in out
        assert "Total: 12 questions" in out

    def test_plan_when_seeded_then_capstone_last(self, sample_config_path, capsys):
        """plan prints the pinned topic last."""
        assert main(["plan", str(sample_config_path), "--seed", "4"]) == 0

        lines = capsys.readouterr().out.strip().splitlines()
        assert "capstone" in lines[-1]
        assert all("capstone" not in line for line in lines[:-1])

    def test_plan_when_same_seed_then_same_output(self, sample_config_path, capsys):
        """plan is reproducible with a seed."""
        main(["plan", str(sample_config_path), "--seed", "9"])
        first = capsys.readouterr().out
        main(["plan", str(sample_config_path), "--seed", "9"])

        assert capsys.readouterr().out == first

    def test_run_when_answered_then_prints_report_and_pdf(self, sample_config_path, tmp_path, monkeypatch, capsys):
        """run prints results and writes the PDF."""
        monkeypatch.setattr("builtins.input", lambda prompt="": "1")
        pdf = tmp_path / "results.pdf"

        code = main(["run", str(sample_config_path), "--seed", "2", "--pdf", str(pdf)])

        out = capsys.readouterr().out
        assert code == 0
        assert "Overall Score" in out
        assert "Question Timeline" in out
        assert pdf.read_bytes().startswith(b"%PDF")

    def test_run_when_quit_then_no_report(self, sample_config_path, monkeypatch, capsys):
        """Quitting skips the report."""
        monkeypatch.setattr("builtins.input", lambda prompt="": "q")

        assert main(["run", str(sample_config_path), "--seed", "2"]) == 0
        assert "Overall Score" not in capsys.readouterr().out

    def test_main_when_config_missing_then_error_exit(self, tmp_path, capsys):
        """Load errors exit with status 1."""
        assert main(["topics", str(tmp_path / "missing.json")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_main_when_bank_empty_then_error_exit(self, tmp_path, capsys):
        """An empty bank exits with status 1."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"topics": [{"id": "a"}]}), encoding="utf-8")

        assert main(["plan", str(config)]) == 1
        assert "empty" in capsys.readouterr().err

    def test_main_when_pin_last_unknown_then_plans_without_pin(self, sample_config_path, capsys):
        """An unknown pinned topic plans without a pin."""
        assert main(["plan", str(sample_config_path), "--pin-last", "nope", "--seed", "1"]) == 0

"""
Tests for loading configuration and question files from disk.
"""

import json
import logging

import pytest

from quiz_toolkit.bank import (
    InvalidQuestionData,
    LoaderError,
    load_bank,
    load_config,
    load_question_file,
    load_question_files,
)


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def question(qid, *topics, **extra):
    data = {
        "id": qid,
        "question": f"{qid}?",
        "topics": list(topics),
        "answers": ["x", "y"],
        "correctAnswer": 0,
    }
    data.update(extra)
    return data


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load_when_valid_then_base_dir_is_config_dir(self, tmp_path):
        """Question files should resolve relative to the config file."""
        path = write_json(tmp_path / "config.json", {"topics": [{"id": "a", "name": "A"}]})

        config = load_config(path)

        assert config.topic_ids == ("a",)
        assert config.base_dir == tmp_path

    def test_load_when_missing_file_then_raises(self, tmp_path):
        """A missing config file is a loader error."""
        with pytest.raises(LoaderError, match="does not exist"):
            load_config(tmp_path / "nope.json")

    def test_load_when_invalid_json_then_raises(self, tmp_path):
        """Malformed JSON is reported with the file path."""
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(LoaderError, match="Invalid JSON"):
            load_config(path)

    def test_load_when_schema_violation_then_raises(self, tmp_path):
        """Validation failures become loader errors."""
        path = write_json(tmp_path / "config.json", {"topics": [{"id": "a"}, {"id": "a"}]})

        with pytest.raises(LoaderError, match="Invalid configuration"):
            load_config(path)

    def test_load_when_pinned_topic_unknown_then_raises(self, tmp_path):
        """A pinned topic must be one of the configured topics."""
        path = write_json(tmp_path / "config.json", {"topics": [{"id": "a"}], "pinnedLastTopic": "b"})

        with pytest.raises(LoaderError, match="pinned last topic"):
            load_config(path)


class TestLoadQuestions:
    """Tests for question file loading."""

    def test_load_file_when_id_missing_then_uses_file_stem(self, tmp_path):
        """Records without an id get a file-based id."""
        record = question("x", "a")
        del record["id"]
        path = write_json(tmp_path / "extra.json", {"questions": [question("q1", "a"), record]})

        questions = load_question_file(path)

        assert [q.id for q in questions] == ["q1", "extra-2"]

    def test_load_file_when_no_questions_list_then_raises(self, tmp_path):
        """Question files need a top-level questions list."""
        path = write_json(tmp_path / "bad.json", [question("q1", "a")])

        with pytest.raises(LoaderError, match="no 'questions' list"):
            load_question_file(path)

    def test_load_file_when_malformed_record_then_raises(self, tmp_path):
        """Malformed records are not skipped."""
        path = write_json(tmp_path / "bad.json", {"questions": [question("q1")]})

        with pytest.raises(InvalidQuestionData):
            load_question_file(path)

    def test_load_files_when_one_missing_then_skips_with_warning(self, tmp_path, caplog):
        """Unreadable files are skipped with a warning."""
        good = write_json(tmp_path / "good.json", {"questions": [question("q1", "a")]})

        with caplog.at_level(logging.WARNING):
            questions = load_question_files([tmp_path / "missing.json", good])

        assert [q.id for q in questions] == ["q1"]
        assert "Could not load" in caplog.text

    def test_load_files_when_several_then_concatenated_in_order(self, tmp_path):
        """Files are concatenated in the order given."""
        first = write_json(tmp_path / "1.json", {"questions": [question("q1", "a")]})
        second = write_json(tmp_path / "2.json", {"questions": [question("q2", "b"), question("q3", "a")]})

        questions = load_question_files([first, second])

        assert [q.id for q in questions] == ["q1", "q2", "q3"]


class TestLoadBank:
    """Tests for load_bank()."""

    def test_load_bank_when_sample_quiz_then_loads_all_files(self, sample_config_path):
        """The sample quiz should load every configured file."""
        config, bank = load_bank(sample_config_path)

        assert config.pinned_last_topic_id == "capstone"
        assert len(bank) == 12
        assert len(bank.for_topic("capstone")) == 2
        assert "basics-1" in bank

    def test_load_bank_when_no_question_files_exist_then_empty_with_warning(self, tmp_path, caplog):
        """An empty bank loads but logs a warning."""
        path = write_json(tmp_path / "config.json", {"topics": [{"id": "a"}]})

        with caplog.at_level(logging.WARNING):
            _, bank = load_bank(path)

        assert bank.is_empty
        assert "No questions loaded" in caplog.text

    def test_load_bank_when_unconfigured_topic_then_warns(self, tmp_path, caplog):
        """Unconfigured topic tags are reported."""
        # Arrange
        write_json(tmp_path / "questions.json", {"questions": [question("q1", "a", "other")]})
        path = write_json(tmp_path / "config.json", {"topics": [{"id": "a"}]})

        # Act
        with caplog.at_level(logging.WARNING):
            _, bank = load_bank(path)

        # Assert
        assert len(bank) == 1
        assert "unconfigured topics" in caplog.text

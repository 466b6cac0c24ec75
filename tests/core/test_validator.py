"""
Tests for payload validation.

Verifies basic shape checks and strict JSON Schema validation for
question records and quiz configuration.
"""

import pytest

from quiz_toolkit.core.schemas.validator import (
    ValidationError,
    validate_config,
    validate_question,
)


def valid_question_record(**overrides) -> dict:
    record = {
        "id": "q1",
        "question": "Pick one",
        "topics": ["basics"],
        "answers": ["a", "b"],
        "correctAnswer": 0,
    }
    record.update(overrides)
    return record


class TestValidateQuestion:
    """Tests for validate_question()."""

    def test_validate_when_valid_record_then_passes(self):
        """A complete record passes both levels."""
        validate_question(valid_question_record())
        validate_question(valid_question_record(), strict=True)

    def test_validate_when_weighted_record_then_passes_strict(self):
        """Weighted records pass strict validation."""
        record = valid_question_record(answerScores=[0.5, -0.5], multiSelect=True)
        del record["correctAnswer"]

        validate_question(record, strict=True)

    def test_validate_when_not_a_dict_then_raises(self):
        """Records must be objects."""
        with pytest.raises(ValidationError, match="must be an object"):
            validate_question(["question"])

    def test_validate_when_required_missing_then_lists_fields(self):
        """Every missing field is listed."""
        with pytest.raises(ValidationError) as exc_info:
            validate_question({"question": "x"})

        assert "Missing field: topics" in exc_info.value.errors
        assert "Missing field: answers" in exc_info.value.errors

    def test_validate_when_topics_empty_then_raises(self):
        """A record needs at least one topic."""
        with pytest.raises(ValidationError) as exc_info:
            validate_question(valid_question_record(topics=[]))

        assert exc_info.value.path == "topics"

    def test_validate_when_topic_blank_then_reports_position(self):
        """Blank topic ids are reported by position."""
        with pytest.raises(ValidationError) as exc_info:
            validate_question(valid_question_record(topics=["basics", ""]))

        assert exc_info.value.path == "topics[1]"

    def test_validate_when_no_answer_key_then_raises(self):
        """A record needs an answer key."""
        record = valid_question_record()
        del record["correctAnswer"]

        with pytest.raises(ValidationError, match="needs one of"):
            validate_question(record)

    def test_validate_when_correct_answer_is_bool_then_raises(self):
        """Booleans are not answer indices."""
        with pytest.raises(ValidationError, match="correctAnswer"):
            validate_question(valid_question_record(correctAnswer=True))

    def test_validate_when_scores_not_numbers_then_raises(self):
        """Weights must be numbers."""
        with pytest.raises(ValidationError, match="answerScores"):
            validate_question(valid_question_record(answerScores=[1, "x"]))

    def test_validate_strict_when_unknown_scoring_then_raises(self):
        """Strict mode rejects unknown scheme names."""
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_question(valid_question_record(scoring="bonus"), strict=True)


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_validate_when_valid_config_then_passes(self):
        """A complete config passes both levels."""
        data = {
            "topics": [{"id": "a", "name": "A"}, {"id": "b"}],
            "minQuestionsPerTopic": 2,
            "minTotalQuestions": 4,
            "pinnedLastTopic": "b",
        }

        validate_config(data)
        validate_config(data, strict=True)

    def test_validate_when_topics_missing_then_raises(self):
        """A config needs a topics list."""
        with pytest.raises(ValidationError, match="topics"):
            validate_config({})

    def test_validate_when_duplicate_topic_then_raises(self):
        """Duplicate topic ids are reported by path."""
        with pytest.raises(ValidationError, match="Duplicate topic id") as exc_info:
            validate_config({"topics": [{"id": "a"}, {"id": "a"}]})

        assert exc_info.value.path == "topics[1].id"

    @pytest.mark.parametrize("key", ["minQuestionsPerTopic", "minTotalQuestions", "defaultQuestions"])
    def test_validate_when_negative_count_then_raises(self, key):
        """Counts cannot be negative."""
        with pytest.raises(ValidationError, match=key):
            validate_config({"topics": [], key: -1})

    def test_validate_strict_when_question_files_wrong_type_then_raises(self):
        """Strict mode checks questionFiles is a list."""
        with pytest.raises(ValidationError):
            validate_config({"topics": [], "questionFiles": "questions.json"}, strict=True)

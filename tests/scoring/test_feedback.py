"""
Tests for feedback levels and messages.
"""

import pytest

from quiz_toolkit.scoring import feedback_level, feedback_message


class TestFeedback:
    """Threshold boundaries are inclusive lower bounds."""

    @pytest.mark.parametrize("percentage, level", [
        (100, "excellent"),
        (90, "excellent"),
        (89, "good"),
        (70, "good"),
        (69, "average"),
        (50, "average"),
        (49, "needs-work"),
        (0, "needs-work"),
        (-20, "needs-work"),
    ])
    def test_level_when_percentage_then_bucket(self, percentage, level):
        """Percentages map to the right level."""
        assert feedback_level(percentage) == level

    @pytest.mark.parametrize("percentage, start", [
        (100, "Perfect!"),
        (95, "Excellent!"),
        (75, "Good job!"),
        (55, "Not bad!"),
        (10, "Basics needs more work"),
        (0, "Basics is a whole new world"),
        (-10, "Basics is a whole new world"),
    ])
    def test_message_when_percentage_then_matching_sentence(self, percentage, start):
        """Each band has its own sentence."""
        assert feedback_message(percentage, "Basics").startswith(start)

    def test_message_when_perfect_then_names_topic(self):
        """The perfect message names the topic."""
        assert feedback_message(100, "Functions") == "Perfect! You've mastered Functions!"

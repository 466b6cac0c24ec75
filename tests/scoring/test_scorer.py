"""
Tests for per-question scoring across the four schemes.
"""

import pytest

from quiz_toolkit.core.models import (
    LegacyMulti,
    LegacySingle,
    Question,
    Verdict,
    WeightedMulti,
    WeightedSingle,
)
from quiz_toolkit.scoring import InvalidSelection, max_score, score_answer


def make_question(scheme, answer_count=3) -> Question:
    return Question(
        id="q1",
        text="Pick",
        topics=("a",),
        answers=tuple(f"option {i}" for i in range(answer_count)),
        scheme=scheme,
    )


@pytest.fixture
def weighted_multi() -> Question:
    return make_question(WeightedMulti((0.5, 0.5, -1.0)))


class TestLegacyScoring:
    """Exact-match schemes."""

    def test_score_when_legacy_single_correct_then_full(self):
        """The correct answer earns full credit."""
        q = make_question(LegacySingle(frozenset({0})))

        result = score_answer(q, {0})

        assert (result.raw_score, result.max_score, result.verdict) == (1.0, 1.0, Verdict.FULL)

    def test_score_when_legacy_single_wrong_then_none(self):
        """A wrong answer earns nothing."""
        q = make_question(LegacySingle(frozenset({0})))

        result = score_answer(q, {1})

        assert (result.raw_score, result.verdict) == (0.0, Verdict.NONE)

    def test_score_when_legacy_multi_exact_set_then_full(self):
        """The exact correct set earns full credit."""
        q = make_question(LegacyMulti(frozenset({0, 2})))

        assert score_answer(q, [2, 0]).verdict is Verdict.FULL

    @pytest.mark.parametrize("selected", [{0}, {0, 1, 2}, {1}])
    def test_score_when_legacy_multi_not_exact_then_none_without_partial(self, selected):
        """Legacy schemes never give partial credit."""
        q = make_question(LegacyMulti(frozenset({0, 2})))

        result = score_answer(q, selected)

        assert (result.raw_score, result.verdict) == (0.0, Verdict.NONE)


class TestWeightedMultiScoring:
    """Selected weights added, omitted positive weights subtracted."""

    def test_score_when_all_correct_selected_then_full(self, weighted_multi):
        """Selecting every positive weight is full credit."""
        result = score_answer(weighted_multi, {0, 1})

        assert (result.raw_score, result.max_score, result.verdict) == (1.0, 1.0, Verdict.FULL)

    def test_score_when_one_correct_omitted_then_partial_with_penalty(self, weighted_multi):
        """Omitted correct answers are subtracted."""
        result = score_answer(weighted_multi, {0})

        assert result.raw_score == pytest.approx(0.0)
        assert result.verdict is Verdict.PARTIAL

    def test_score_when_only_wrong_selected_then_none_and_negative(self, weighted_multi):
        """Only wrong answers gives a negative score."""
        result = score_answer(weighted_multi, {2})

        assert result.raw_score == pytest.approx(-2.0)
        assert result.verdict is Verdict.NONE

    def test_score_when_correct_and_wrong_selected_then_partial(self, weighted_multi):
        """Mixed selections are partial."""
        result = score_answer(weighted_multi, {0, 1, 2})

        assert result.raw_score == pytest.approx(0.0)
        assert result.verdict is Verdict.PARTIAL

    def test_score_when_zero_weight_selected_then_ignored_for_verdict(self):
        """Zero weights neither help nor hurt."""
        q = make_question(WeightedMulti((0.5, 0.5, 0.0, -1.0)), answer_count=4)

        result = score_answer(q, {0, 1, 2})

        assert result.raw_score == pytest.approx(1.0)
        assert result.verdict is Verdict.FULL

    def test_score_when_only_some_wrong_selected_then_partial(self):
        """Picking some wrong answers is partial, not none."""
        q = make_question(WeightedMulti((1.0, -0.5, -0.5)))

        result = score_answer(q, {1})

        assert result.raw_score == pytest.approx(-1.5)
        assert result.verdict is Verdict.PARTIAL

    def test_max_score_when_weighted_multi_then_sum_of_positive(self, weighted_multi):
        """Max is the sum of positive weights."""
        assert max_score(weighted_multi) == pytest.approx(1.0)


class TestWeightedSingleScoring:
    """One answer, per-answer credit."""

    @pytest.fixture
    def question(self) -> Question:
        return make_question(WeightedSingle((1.0, 0.25, -0.5, 0.0)), answer_count=4)

    def test_score_when_best_answer_then_full(self, question):
        """The highest weight earns full credit."""
        result = score_answer(question, {0})

        assert (result.raw_score, result.max_score, result.verdict) == (1.0, 1.0, Verdict.FULL)

    def test_score_when_best_weight_below_one_then_full(self):
        """Full credit tracks the largest weight, not 1.0."""
        q = make_question(WeightedSingle((0.8, 0.4, 0.0)))

        best = score_answer(q, {0})
        lesser = score_answer(q, {1})

        assert (best.raw_score, best.max_score, best.verdict) == (0.8, 0.8, Verdict.FULL)
        assert lesser.verdict is Verdict.PARTIAL

    def test_score_when_partial_credit_answer_then_partial(self, question):
        """A smaller positive weight is partial."""
        result = score_answer(question, {1})

        assert result.raw_score == pytest.approx(0.25)
        assert result.verdict is Verdict.PARTIAL

    @pytest.mark.parametrize("index, raw", [(2, -0.5), (3, 0.0)])
    def test_score_when_non_positive_answer_then_none(self, question, index, raw):
        """Zero or negative weights earn no credit."""
        result = score_answer(question, {index})

        assert result.raw_score == pytest.approx(raw)
        assert result.verdict is Verdict.NONE

    def test_score_when_two_answers_then_raises(self, question):
        """Single-answer questions reject two answers."""
        with pytest.raises(InvalidSelection, match="accepts one answer"):
            score_answer(question, {0, 1})

    def test_max_score_when_all_weights_negative_then_zero(self):
        """No positive weight means nothing achievable."""
        q = make_question(WeightedSingle((-1.0, -0.5, 0.0)))

        assert max_score(q) == 0.0


class TestSelectionHandling:
    """Edge cases shared by every scheme."""

    @pytest.mark.parametrize("scheme", [
        LegacySingle(frozenset({0})),
        LegacyMulti(frozenset({0, 1})),
        WeightedSingle((1.0, 0.0, 0.0)),
        WeightedMulti((0.5, 0.5, -1.0)),
    ])
    def test_score_when_nothing_selected_then_zero_and_none(self, scheme):
        """An empty answer scores zero for every scheme."""
        q = make_question(scheme)

        result = score_answer(q, set())

        assert result.raw_score == 0.0
        assert result.verdict is Verdict.NONE
        assert result.max_score == max_score(q)

    @pytest.mark.parametrize("selected", [{3}, {-1}, {0, 7}])
    def test_score_when_index_out_of_range_then_raises(self, weighted_multi, selected):
        """Indices must address an answer."""
        with pytest.raises(InvalidSelection, match="out of range"):
            score_answer(weighted_multi, selected)

    def test_percentage_when_partial_then_rounded_half_up(self):
        """Percentages round halves up."""
        q = make_question(WeightedSingle((1.0, 0.625, 0.0)))

        assert score_answer(q, {1}).percentage == 63

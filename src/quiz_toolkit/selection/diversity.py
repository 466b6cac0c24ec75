"""
Module: selection.diversity

Purpose:
    Reorder a question list so the same primary topic rarely appears twice
    in a row.

Key Functions:
    - diversity_reorder(): Greedy reorder by primary topic
    - count_adjacent_repeats(): Number of consecutive same-topic pairs

Algorithm:
    Repeatedly scan the unplaced questions in their current order and take
    the first whose primary topic differs from the last placed question's.
    If every remaining question shares that topic, take the first one.
    O(n^2) worst case, fine for banks of tens to hundreds of questions.

Used By:
    - selection.planner: step 4 of plan_session()
"""

from __future__ import annotations

from typing import List, Sequence

from quiz_toolkit.core.models import Question


def diversity_reorder(questions: Sequence[Question]) -> List[Question]:
    """
    Reorder questions to minimise immediate primary-topic repeats.

    Args:
        questions: Questions in their current order

    Returns:
        New list with the same questions

    Example:
        >>> [q.primary_topic for q in diversity_reorder(qs)]  # a, a, a, b
        ['a', 'b', 'a', 'a']
    """
    remaining = list(questions)
    placed: List[Question] = []

    while remaining:
        pick = 0
        if placed:
            previous = placed[-1].primary_topic
            for i, candidate in enumerate(remaining):
                if candidate.primary_topic != previous:
                    pick = i
                    break
        placed.append(remaining.pop(pick))

    return placed


def count_adjacent_repeats(questions: Sequence[Question]) -> int:
    """Number of neighbouring pairs that share a primary topic."""
    return sum(
        1
        for prev, cur in zip(questions, questions[1:])
        if prev.primary_topic == cur.primary_topic
    )

#!/usr/bin/env python3
"""Tests for the normalized similarity metric."""

import pytest

from seqalign import constants, similarity
from seqalign.aligner import align
from seqalign.alignment import Step
from seqalign.scoring import ScoringModel


def test_concrete_scenario_similarity():
    # sim_align = 1 / 2, sim_significance = 2 / 3
    result = align(["A", "T", "C"], ["A", "C"])
    assert result.similarity == pytest.approx(1 / 3)


def test_self_alignment_similarity_is_one():
    result = align(list("GATTACA"), list("GATTACA"))
    assert result.similarity == pytest.approx(1.0)


def test_no_match_sentinel():
    result = align(["x"], ["y"])
    assert result.similarity == constants.NO_MATCH_SIMILARITY == -1.0


def test_zero_match_score_gives_zero():
    """Correct positions that score 0 leave no basis for sim_align."""
    result = align(["a"], ["a"], similarity_matrix={("a", "a"): 0})
    assert result.score == 0
    assert result.similarity == 0.0


def test_similarity_can_exceed_one():
    # Mismatch b/a is rewarded by the table, so the score outgrows the
    # single exact match: sim_align = 6 / 1, sim_significance = 1 / 2.
    result = align("ab", "aa", similarity_matrix={("a", "b"): 5})
    assert result.score == 6
    assert result.similarity == pytest.approx(3.0)


def test_similarity_can_be_negative():
    scoring = ScoringModel()
    value = similarity.evaluate(["a"], ["a"], [Step.align(0, 0)], -2, scoring)
    assert value == pytest.approx(-2.0)


def test_correct_positions_use_table_scores():
    # dis_correct = 3 + 1; score = 4
    result = align("ab", "ab", similarity_matrix={("a", "a"): 3})
    assert result.score == 4
    assert result.similarity == pytest.approx(1.0)


def test_gaps_count_towards_alignment_length():
    steps = [Step.align(0, 0), Step.insert(1), Step.insert(2), Step.delete(1)]
    value = similarity.evaluate("ab", "abc", steps, 1, ScoringModel())
    # one correct position of four steps, score 1 over dis_correct 1
    assert value == pytest.approx(0.25)


def test_mismatched_aligned_tokens_are_ignored():
    steps = [Step.align(0, 0), Step.align(1, 1)]
    value = similarity.evaluate("ab", "ax", steps, 0, ScoringModel())
    # sim_align = 0 / 1
    assert value == 0.0

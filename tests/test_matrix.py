#!/usr/bin/env python3
"""Tests for the Needleman-Wunsch matrix fill."""

import numpy as np
import pytest

from seqalign.alignment import AlignmentMatrix
from seqalign.errors import InvalidInputError
from seqalign.scoring import ScoringModel


@pytest.fixture
def atc_ac(default_scoring):
    return AlignmentMatrix.fill("ATC", "AC", default_scoring, gap_score=-1)


def test_fill_matches_hand_computed_matrix(atc_ac):
    expected = np.array(
        [
            [0, -1, -2],
            [-1, 1, 0],
            [-2, 0, 0],
            [-3, -1, 1],
        ]
    )
    np.testing.assert_array_equal(atc_ac.to_array(), expected)
    assert atc_ac.shape == (4, 3)
    assert atc_ac.score == 1


def test_boundaries_are_cumulative_gap_costs(default_scoring):
    matrix = AlignmentMatrix.fill(
        "ABCDE", "XYZ", default_scoring, gap_score=-3
    )
    arr = matrix.to_array()
    np.testing.assert_array_equal(arr[0, :], [0, -3, -6, -9])
    np.testing.assert_array_equal(arr[:, 0], [0, -3, -6, -9, -12, -15])


def test_getitem_matches_array(atc_ac):
    arr = atc_ac.to_array()
    for i in range(4):
        for j in range(3):
            assert atc_ac[i, j] == arr[i, j]
    assert isinstance(atc_ac[3, 2], int)


@pytest.mark.parametrize("index", [(4, 0), (0, 3), (-1, 0)])
def test_getitem_out_of_range(atc_ac, index):
    with pytest.raises(IndexError):
        atc_ac[index]


def test_buffer_is_read_only_after_fill(atc_ac):
    arr = atc_ac.to_array()
    with pytest.raises(ValueError):
        arr[0, 0] = 42


def test_buffer_is_flat_and_int64(atc_ac):
    assert atc_ac._data.ndim == 1
    assert atc_ac._data.size == 4 * 3
    assert atc_ac._data.dtype == np.int64


def test_scores_are_kept_for_traceback(atc_ac):
    np.testing.assert_array_equal(
        atc_ac.scores, [[1, -1], [-1, -1], [-1, 1]]
    )


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("", "A"),
        ("A", ""),
        ("", ""),
    ],
)
def test_empty_sequence_raises(default_scoring, a, b):
    with pytest.raises(InvalidInputError, match="empty sequence"):
        AlignmentMatrix.fill(a, b, default_scoring)


def test_direct_construction_rejects_zero_length():
    with pytest.raises(ValueError, match="empty sequence"):
        AlignmentMatrix(0, 5)


@pytest.mark.parametrize(
    ("a", "b", "match", "mismatch", "gap"),
    [
        ("GATTACA", "GCATGCU", 1, -1, -1),
        ("kitten", "sitting", 2, -1, -2),
        ("AAAA", "A", 1, -1, -1),
        ("ACGT", "TGCA", 5, -4, -3),
        ("ACGTACGTTT", "ACGTTT", 1, 0, -1),
    ],
)
def test_score_matches_biopython(oracle_score, a, b, match, mismatch, gap):
    """Optimal score agrees with Biopython's global PairwiseAligner."""
    scoring = ScoringModel(match_score=match, mismatch_score=mismatch)
    matrix = AlignmentMatrix.fill(a, b, scoring, gap_score=gap)
    assert matrix.score == oracle_score(a, b, match, mismatch, gap)


def test_large_scores_accumulate_without_wrapping():
    big = 2**40
    scoring = ScoringModel(match_score=big, mismatch_score=-big)
    matrix = AlignmentMatrix.fill("AAAA", "AAAA", scoring, gap_score=-big)
    assert matrix.score == 4 * big


def test_scores_past_int64_are_rejected():
    big = 2**62
    scoring = ScoringModel(table={("a", "a"): big, ("b", "b"): big})
    with pytest.raises(InvalidInputError, match="int64") as excinfo:
        AlignmentMatrix.fill("ab", "ab", scoring, gap_score=-1)
    assert excinfo.value.context == "matrix row 2"


def test_negative_boundary_past_int64_is_rejected(default_scoring):
    with pytest.raises(InvalidInputError, match="int64"):
        AlignmentMatrix.fill("AAA", "A", default_scoring, gap_score=-(2**62))


@pytest.mark.parametrize("gap_score", [-0.5, "-1", True])
def test_non_integer_gap_score_rejected(default_scoring, gap_score):
    with pytest.raises(InvalidInputError, match="gap_score"):
        AlignmentMatrix.fill("A", "B", default_scoring, gap_score=gap_score)


def test_integral_float_gap_score_is_coerced(default_scoring):
    matrix = AlignmentMatrix.fill("A", "B", default_scoring, gap_score=-2.0)
    assert matrix.gap_score == -2
    assert isinstance(matrix.gap_score, int)


def test_empty_sequence_rejected_before_scoring():
    class FailingScoring(ScoringModel):
        def score_matrix(self, a, b):
            raise AssertionError("scores computed for an empty input")

    with pytest.raises(InvalidInputError, match="empty") as excinfo:
        AlignmentMatrix.fill("", "AC", FailingScoring(), gap_score=-1)
    assert excinfo.value.context == "len(a)=0, len(b)=2"

#!/usr/bin/env python3
"""Needleman-Wunsch dynamic-programming matrix.

The matrix H has shape (n + 1, m + 1) for sequences of lengths n and m and
is stored as a single flat numpy buffer indexed by ``i * (m + 1) + j``.

Recurrence with a linear gap score g:

    H[0][0] = 0
    H[i][0] = i * g
    H[0][j] = j * g
    H[i][j] = max(H[i-1][j-1] + s(a[i-1], b[j-1]),
                  H[i-1][j] + g,
                  H[i][j-1] + g)

so H[i][j] is the best global alignment score of a[:i] and b[:j].
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from seqalign import constants
from seqalign.errors import InvalidInputError
from seqalign.scoring import ScoringModel, as_score

LOGGER = logging.getLogger(__name__)


class AlignmentMatrix:
    """Filled global-alignment score matrix for one pair of sequences.

    Build instances with :meth:`fill`. After the fill the buffer is
    read-only; the traceback reads it together with the pairwise ``scores``
    and ``gap_score`` used to build it.

    Attributes:
        n: Length of sequence A (rows - 1).
        m: Length of sequence B (columns - 1).
        gap_score: Linear cost of one gap position.
        scores: ``n x m`` array of pairwise token scores.
    """

    def __init__(
        self,
        n: int,
        m: int,
        gap_score: int = constants.DEFAULT_GAP_SCORE,
        scores: Optional[np.ndarray] = None,
    ) -> None:
        if n == 0 or m == 0:
            raise InvalidInputError(
                "Cannot align an empty sequence",
                context=f"len(a)={n}, len(b)={m}",
            )
        if scores is not None and scores.shape != (n, m):
            raise ValueError(
                f"scores.shape {scores.shape} must match ({n}, {m})"
            )
        self.n = n
        self.m = m
        self.gap_score = as_score(gap_score, "gap_score")
        self.scores = scores
        self._data = np.zeros((n + 1) * (m + 1), dtype=constants.MATRIX_DTYPE)

    @classmethod
    def fill(
        cls,
        a: Sequence[Any],
        b: Sequence[Any],
        scoring: ScoringModel,
        gap_score: int = constants.DEFAULT_GAP_SCORE,
    ) -> "AlignmentMatrix":
        """Score every prefix pair of ``a`` and ``b``.

        Args:
            a: First sequence of tokens.
            b: Second sequence of tokens.
            scoring: Pairwise token scoring.
            gap_score: Linear gap cost (open cost equals extend cost).

        Returns:
            The filled matrix.

        Raises:
            InvalidInputError: If either sequence is empty, the gap score
                is not an integer, or a prefix score leaves the int64 range.
        """
        matrix = cls(len(a), len(b), gap_score)
        matrix.scores = scoring.score_matrix(a, b)
        matrix._fill()
        return matrix

    def _fill(self) -> None:
        width = self.m + 1
        gap = self.gap_score
        data = self._data

        # Rows are accumulated as Python ints and range-checked on store
        prev = [j * gap for j in range(width)]
        self._store_row(0, prev)
        for i in range(1, self.n + 1):
            row_scores = self.scores[i - 1].tolist()
            cur = [i * gap] + [0] * self.m
            for j in range(1, width):
                cur[j] = max(
                    prev[j - 1] + row_scores[j - 1],
                    prev[j] + gap,
                    cur[j - 1] + gap,
                )
            self._store_row(i, cur)
            prev = cur

        data.flags.writeable = False
        LOGGER.debug(
            f"Filled alignment matrix of shape {self.shape}, "
            f"score={self.score}"
        )

    def _store_row(self, i: int, row: List[int]) -> None:
        width = self.m + 1
        try:
            values = np.asarray(row, dtype=constants.MATRIX_DTYPE)
            self._data[i * width : (i + 1) * width] = values
        except OverflowError:
            raise InvalidInputError(
                "Alignment score exceeds int64 range",
                context=f"matrix row {i}",
            ) from None

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.n + 1, self.m + 1)

    @property
    def score(self) -> int:
        """Optimal global alignment score, ``H[n][m]``."""
        return int(self._data[-1])

    def __getitem__(self, index: Tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i <= self.n and 0 <= j <= self.m):
            raise IndexError(
                f"Matrix index ({i}, {j}) out of range for shape {self.shape}"
            )
        return int(self._data[i * (self.m + 1) + j])

    def to_array(self) -> np.ndarray:
        """Return a 2-D view of the buffer."""
        return self._data.reshape(self.shape)

    def __repr__(self) -> str:
        return f"AlignmentMatrix(shape={self.shape}, score={self.score})"

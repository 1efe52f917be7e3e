#!/usr/bin/env python3
"""Traceback of a filled Needleman-Wunsch matrix.

Walks from the bottom-right cell (n, m) back to the origin, emitting one
step per move. Where several moves reproduce the cell value, the diagonal
(ALIGN) move is taken first, then DELETE, then INSERT, so the reported
path is deterministic among equally optimal alignments.
"""

import logging
from typing import List, Tuple

from seqalign.alignment.matrix import AlignmentMatrix
from seqalign.alignment.steps import Step

LOGGER = logging.getLogger(__name__)


def traceback(matrix: AlignmentMatrix) -> Tuple[Tuple[Step, ...], int]:
    """Reconstruct one optimal alignment path from a filled matrix.

    Args:
        matrix: Matrix returned by :meth:`AlignmentMatrix.fill`.

    Returns:
        Tuple of (steps, score). Steps read from the start of both
        sequences to their ends; score is ``H[n][m]``.
    """
    H = matrix.to_array().tolist()
    scores = matrix.scores.tolist()
    gap = matrix.gap_score

    i, j = matrix.n, matrix.m
    steps: List[Step] = []
    while i > 0 and j > 0:
        current = H[i][j]
        if current == H[i - 1][j - 1] + scores[i - 1][j - 1]:
            steps.append(Step.align(i - 1, j - 1))
            i -= 1
            j -= 1
        elif current == H[i - 1][j] + gap:
            steps.append(Step.delete(i - 1))
            i -= 1
        else:
            steps.append(Step.insert(j - 1))
            j -= 1

    # Boundary: only one sequence has tokens left
    while i > 0:
        steps.append(Step.delete(i - 1))
        i -= 1
    while j > 0:
        steps.append(Step.insert(j - 1))
        j -= 1

    steps.reverse()
    LOGGER.debug(
        f"Traceback produced {len(steps)} steps for matrix of shape "
        f"{matrix.shape}"
    )
    return tuple(steps), matrix.score

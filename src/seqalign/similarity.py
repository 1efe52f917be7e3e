#!/usr/bin/env python3
"""Normalized similarity derived from a global alignment.

The metric combines two ratios over the ALIGN steps whose tokens are
literally equal ("correct" positions):

- sim_align: alignment score divided by the summed scores of the correct
  positions (how dense the score is on true matches)
- sim_significance: number of correct positions divided by the alignment
  length, gaps included (how much of the alignment they cover)

The result is ``sim_align * sim_significance``. It is a ratio rather than
a probability: it can exceed 1.0 or be negative. When no aligned position
is an exact match the sentinel ``-1.0`` is returned.
"""

import logging
from typing import Any, Sequence

from seqalign import constants
from seqalign.alignment.steps import Step, StepKind
from seqalign.scoring import ScoringModel

LOGGER = logging.getLogger(__name__)


def evaluate(
    a: Sequence[Any],
    b: Sequence[Any],
    steps: Sequence[Step],
    alignment_score: int,
    scoring: ScoringModel,
) -> float:
    """Compute the normalized similarity of an alignment.

    Args:
        a: First aligned sequence.
        b: Second aligned sequence.
        steps: Alignment steps produced by the traceback.
        alignment_score: Optimal alignment score for ``a`` and ``b``.
        scoring: The scoring model used for the alignment.

    Returns:
        The similarity, or ``-1.0`` if no aligned tokens are equal.
    """
    num_correct = 0
    dis_correct = 0
    for step in steps:
        if step.kind != StepKind.ALIGN:
            continue
        x, y = a[step.x], b[step.y]
        if x == y:
            num_correct += 1
            dis_correct += scoring.compare(x, y)

    if num_correct == 0:
        LOGGER.debug("No exactly matching aligned positions")
        return constants.NO_MATCH_SIMILARITY

    sim_align = (
        0.0 if dis_correct == 0 else float(alignment_score) / float(dis_correct)
    )
    sim_significance = float(num_correct) / float(len(steps))
    return sim_align * sim_significance

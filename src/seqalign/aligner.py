#!/usr/bin/env python3
"""Global pairwise alignment of token sequences.

This module provides the public alignment entry points:

- align: Align two sequences and return an AlignmentResult
- align_set: Align every unordered pair of a sequence collection
- BatchAligner: Reusable all-pairs aligner bound to one configuration

Each pair runs the same pipeline: score matrix fill, traceback, and
(optionally) the similarity metric. Pairs share only the read-only
scoring model, so a batch can be spread over worker threads.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from itertools import combinations
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from seqalign import constants, similarity
from seqalign.alignment import AlignmentMatrix, AlignmentResult, traceback
from seqalign.config import BatchConfig, ScoringConfig
from seqalign.errors import InvalidInputError
from seqalign.scoring import ScoringModel

LOGGER = logging.getLogger(__name__)

# Key of one comparison within a batch: (i, j) with i < j
PairKey = Tuple[int, int]


def align_pair(
    a: Sequence[Any],
    b: Sequence[Any],
    scoring: ScoringModel,
    gap_score: int = constants.DEFAULT_GAP_SCORE,
    compute_similarity: bool = True,
) -> AlignmentResult:
    """Align two sequences under an already built scoring model.

    Raises:
        InvalidInputError: If either sequence is empty.
    """
    matrix = AlignmentMatrix.fill(a, b, scoring, gap_score)
    steps, score = traceback(matrix)
    sim = (
        similarity.evaluate(a, b, steps, score, scoring)
        if compute_similarity
        else None
    )
    return AlignmentResult(steps=steps, score=score, similarity=sim)


def _scoring_model(
    match_score: int,
    mismatch_score: int,
    similarity_matrix: Optional[Union[Mapping[Any, int], ScoringModel]],
) -> ScoringModel:
    if isinstance(similarity_matrix, ScoringModel):
        return similarity_matrix
    return ScoringModel(
        match_score=match_score,
        mismatch_score=mismatch_score,
        table=similarity_matrix or {},
    )


def align(
    a: Sequence[Any],
    b: Sequence[Any],
    match_score: int = constants.DEFAULT_MATCH_SCORE,
    mismatch_score: int = constants.DEFAULT_MISMATCH_SCORE,
    gap_score: int = constants.DEFAULT_GAP_SCORE,
    similarity_matrix: Optional[Union[Mapping[Any, int], ScoringModel]] = None,
    compute_similarity: bool = True,
) -> AlignmentResult:
    """Find the optimal global alignment of two sequences.

    Args:
        a: First sequence of tokens.
        b: Second sequence of tokens.
        match_score: Score for equal tokens not covered by the table.
        mismatch_score: Score for unequal tokens not covered by the table.
        gap_score: Linear cost of each gap position.
        similarity_matrix: Optional ``(x, y) -> score`` overrides, or a
            ScoringModel (in which case match/mismatch are ignored).
        compute_similarity: Whether to attach the similarity metric.

    Returns:
        AlignmentResult with steps, score and similarity.

    Raises:
        InvalidInputError: If ``a`` or ``b`` is empty.

    Example:
        >>> result = align(["A", "T", "C"], ["A", "C"])
        >>> result.score
        1
    """
    scoring = _scoring_model(match_score, mismatch_score, similarity_matrix)
    return align_pair(a, b, scoring, gap_score, compute_similarity)


class BatchAligner:
    """Align every unordered pair of a sequence collection.

    The scoring model is built once and shared read-only by all pairs.

    Attributes:
        config: Batch options (scoring, similarity flag, worker count).
        scoring: The ScoringModel built from ``config.scoring``.
    """

    def __init__(
        self,
        config: Optional[BatchConfig] = None,
        scoring: Optional[ScoringModel] = None,
    ) -> None:
        self.config = config or BatchConfig()
        self.scoring = scoring or self.config.scoring.build_scoring_model()

    def align_pair(self, a: Sequence[Any], b: Sequence[Any]) -> AlignmentResult:
        return align_pair(
            a,
            b,
            self.scoring,
            self.config.scoring.gap_score,
            self.config.compute_similarity,
        )

    @staticmethod
    def check_sequences(seqs: Sequence[Sequence[Any]]) -> None:
        """Raise for the first pair, in pair order, with an empty sequence."""
        for i, j in combinations(range(len(seqs)), 2):
            if len(seqs[i]) == 0 or len(seqs[j]) == 0:
                empty = i if len(seqs[i]) == 0 else j
                raise InvalidInputError(
                    f"Cannot align an empty sequence (sequence {empty})",
                    context=f"pair ({i}, {j})",
                )

    def __call__(
        self, seqs: Sequence[Sequence[Any]]
    ) -> Dict[PairKey, AlignmentResult]:
        """Align all pairs ``(i, j)``, ``i < j``, of ``seqs``.

        Returns:
            Mapping from pair key to result, with ``k * (k - 1) / 2`` entries.

        Raises:
            InvalidInputError: If any sequence taking part in a pair is
                empty. No partial results are returned.
        """
        pairs = list(combinations(range(len(seqs)), 2))
        self.check_sequences(seqs)
        num_workers = self.config.num_workers
        LOGGER.info(
            f"Aligning {len(pairs)} pairs from {len(seqs)} sequences "
            f"(workers={num_workers or 'sequential'})"
        )

        results: Dict[PairKey, AlignmentResult] = {}
        if num_workers <= 1 or len(pairs) <= 1:
            for i, j in pairs:
                try:
                    results[(i, j)] = self.align_pair(seqs[i], seqs[j])
                except InvalidInputError as e:
                    LOGGER.error(f"Alignment of pair ({i}, {j}) failed: {e}")
                    raise e.with_context(f"pair ({i}, {j})") from e
        else:
            with ThreadPoolExecutor(max_workers=num_workers) as executor:
                futures = {
                    executor.submit(self.align_pair, seqs[i], seqs[j]): (i, j)
                    for i, j in pairs
                }
                for future in as_completed(futures):
                    pair = futures[future]
                    try:
                        results[pair] = future.result()
                    except InvalidInputError as e:
                        for pending in futures:
                            pending.cancel()
                        LOGGER.error(f"Alignment of pair {pair} failed: {e}")
                        raise e.with_context(f"pair {pair}") from e

        LOGGER.info(f"Finished aligning {len(results)} pairs")
        return results


def align_set(
    seqs: Sequence[Sequence[Any]],
    match_score: int = constants.DEFAULT_MATCH_SCORE,
    mismatch_score: int = constants.DEFAULT_MISMATCH_SCORE,
    gap_score: int = constants.DEFAULT_GAP_SCORE,
    similarity_matrix: Optional[Union[Mapping[Any, int], ScoringModel]] = None,
    compute_similarity: bool = True,
    num_workers: int = 0,
) -> Dict[PairKey, AlignmentResult]:
    """Align every unordered pair of a collection of sequences.

    Args:
        seqs: Ordered collection of token sequences.
        match_score: Score for equal tokens not covered by the table.
        mismatch_score: Score for unequal tokens not covered by the table.
        gap_score: Linear cost of each gap position.
        similarity_matrix: Optional ``(x, y) -> score`` overrides, or a
            ScoringModel.
        compute_similarity: Whether to attach the similarity metric.
        num_workers: Worker threads (0 or 1 runs sequentially).

    Returns:
        Mapping from ``(i, j)``, ``i < j``, to the pair's AlignmentResult.

    Raises:
        InvalidInputError: If any sequence is empty; the whole batch fails.
    """
    config = BatchConfig(
        scoring=ScoringConfig(
            match_score=match_score,
            mismatch_score=mismatch_score,
            gap_score=gap_score,
        ),
        compute_similarity=compute_similarity,
        num_workers=num_workers,
    )
    scoring = _scoring_model(match_score, mismatch_score, similarity_matrix)
    return BatchAligner(config, scoring=scoring)(seqs)

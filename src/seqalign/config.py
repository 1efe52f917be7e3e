#!/usr/bin/env python3
"""Configuration dataclasses for seqalign.

This module provides configuration dataclasses that bundle the scoring
parameters and batch options, so the same settings can be passed from the
CLI or from Python code into the aligner.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from seqalign import constants
from seqalign.errors import InvalidInputError
from seqalign.scoring import ScoringModel, as_score


@dataclass(frozen=True)
class ScoringConfig:
    """Scoring parameters for a global alignment.

    Gaps are linear: a gap of length k costs ``k * gap_score``. ``gap_open``
    and ``gap_extend`` may be given for callers that think in affine terms,
    but they must both equal ``gap_score``.

    Attributes:
        match_score: Score for equal tokens not covered by a table.
        mismatch_score: Score for unequal tokens not covered by a table.
        gap_score: Cost of each gap position.
        similarity_matrix: Optional explicit ``(x, y) -> score`` overrides.
        substitution_matrix: Optional Biopython substitution matrix name.
        gap_open: Optional gap opening cost (must equal gap_score).
        gap_extend: Optional gap extension cost (must equal gap_score).
    """

    match_score: int = constants.DEFAULT_MATCH_SCORE
    mismatch_score: int = constants.DEFAULT_MISMATCH_SCORE
    gap_score: int = constants.DEFAULT_GAP_SCORE
    similarity_matrix: Optional[Mapping[Any, int]] = None
    substitution_matrix: Optional[str] = None
    gap_open: Optional[int] = None
    gap_extend: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("match_score", "mismatch_score", "gap_score"):
            object.__setattr__(self, name, as_score(getattr(self, name), name))
        for name in ("gap_open", "gap_extend"):
            value = getattr(self, name)
            if value is not None and value != self.gap_score:
                raise InvalidInputError(
                    f"{name} ({value}) must equal gap_score "
                    f"({self.gap_score}); only linear gap costs are supported"
                )
        if (
            self.similarity_matrix is not None
            and self.substitution_matrix is not None
        ):
            raise InvalidInputError(
                "similarity_matrix and substitution_matrix are mutually "
                "exclusive"
            )

    def build_scoring_model(self) -> ScoringModel:
        """Create the ScoringModel described by this configuration."""
        if self.substitution_matrix is not None:
            return ScoringModel.from_substitution_matrix(
                self.substitution_matrix,
                match_score=self.match_score,
                mismatch_score=self.mismatch_score,
            )
        return ScoringModel(
            match_score=self.match_score,
            mismatch_score=self.mismatch_score,
            table=self.similarity_matrix or {},
        )


@dataclass(frozen=True)
class BatchConfig:
    """Options for aligning every pair of a sequence collection.

    Attributes:
        scoring: Scoring parameters shared by every pair.
        compute_similarity: Whether to attach the similarity metric.
        num_workers: Worker threads for pair alignment (0 = sequential).

    Example:
        config = BatchConfig(
            scoring=ScoringConfig(gap_score=-2),
            num_workers=4,
        )
    """

    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    compute_similarity: bool = True
    num_workers: int = 0

    def __post_init__(self) -> None:
        if self.num_workers < 0:
            raise InvalidInputError(
                f"num_workers must be non-negative, got {self.num_workers}"
            )

    @classmethod
    def from_cli_args(
        cls,
        match_score: int = constants.DEFAULT_MATCH_SCORE,
        mismatch_score: int = constants.DEFAULT_MISMATCH_SCORE,
        gap_score: int = constants.DEFAULT_GAP_SCORE,
        similarity_matrix: Optional[Mapping[Any, int]] = None,
        substitution_matrix: Optional[str] = None,
        compute_similarity: bool = True,
        num_workers: int = 0,
    ) -> "BatchConfig":
        """Create a BatchConfig from CLI arguments."""
        return cls(
            scoring=ScoringConfig(
                match_score=match_score,
                mismatch_score=mismatch_score,
                gap_score=gap_score,
                similarity_matrix=similarity_matrix,
                substitution_matrix=substitution_matrix,
            ),
            compute_similarity=compute_similarity,
            num_workers=num_workers,
        )

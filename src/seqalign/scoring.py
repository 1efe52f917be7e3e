#!/usr/bin/env python3
"""Pairwise token scoring for sequence alignment.

This module provides the ScoringModel, which turns a pair of tokens into
an integer compatibility score. Two rules are combined:

1. An optional score table of explicit pairwise overrides. A pair is looked
   up in declared order ``(x, y)`` and then reversed ``(y, x)``.
2. The identity rule: ``match_score`` when the tokens are equal, otherwise
   ``mismatch_score``.

Tables can be supplied directly as a mapping, loaded from a named
Biopython substitution matrix (BLOSUM62, PAM250, ...) or read from a file
with :func:`seqalign.io.read_score_table`.
"""

import logging
import numbers
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional, Sequence, Tuple

import numpy as np
from Bio.Align import substitution_matrices

from seqalign import constants
from seqalign.errors import InvalidInputError

LOGGER = logging.getLogger(__name__)

# Normalized score table: (token repr, token repr) -> integer score
ScoreTable = Mapping[Tuple[str, str], int]


def as_score(value: Any, label: str) -> int:
    """Coerce a score to ``int``, rejecting non-integral values."""
    if isinstance(value, bool):
        raise InvalidInputError(
            f"Score for {label} must be an integer, got bool"
        )
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise InvalidInputError(
        f"Score for {label} must be an integer, got {value!r}"
    )


def normalize_table(table: Optional[Mapping[Any, Any]]) -> ScoreTable:
    """Return a read-only copy of ``table`` keyed by string pairs.

    Args:
        table: Mapping from ``(x, y)`` token pairs to integer scores, or None.

    Returns:
        An immutable mapping from ``(str(x), str(y))`` to ``int``.

    Raises:
        InvalidInputError: If a key is not a pair or a score is not integral.
    """
    normalized = {}
    for key, value in (table or {}).items():
        if not isinstance(key, tuple) or len(key) != 2:
            raise InvalidInputError(
                f"Score table keys must be (token, token) pairs, got {key!r}"
            )
        x, y = key
        normalized[(str(x), str(y))] = as_score(value, f"pair {key!r}")
    return MappingProxyType(normalized)


@dataclass(frozen=True)
class ScoringModel:
    """Integer scoring of token pairs with an optional override table.

    Attributes:
        match_score: Score for equal tokens absent from the table.
        mismatch_score: Score for unequal tokens absent from the table.
        table: Read-only pairwise overrides keyed by string representation.
    """

    match_score: int = constants.DEFAULT_MATCH_SCORE
    mismatch_score: int = constants.DEFAULT_MISMATCH_SCORE
    table: ScoreTable = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "table", normalize_table(self.table))
        object.__setattr__(
            self, "match_score", as_score(self.match_score, "match_score")
        )
        object.__setattr__(
            self,
            "mismatch_score",
            as_score(self.mismatch_score, "mismatch_score"),
        )
        LOGGER.debug(
            f"Initialized ScoringModel (match={self.match_score}, "
            f"mismatch={self.mismatch_score}, table_size={len(self.table)})"
        )

    def compare(self, x: Hashable, y: Hashable) -> int:
        """Return the integer compatibility score of tokens ``x`` and ``y``."""
        if self.table:
            key_x, key_y = str(x), str(y)
            score = self.table.get((key_x, key_y))
            if score is None:
                score = self.table.get((key_y, key_x))
            if score is not None:
                return score
        return self.match_score if x == y else self.mismatch_score

    __call__ = compare

    def score_matrix(self, a: Sequence[Any], b: Sequence[Any]) -> np.ndarray:
        """Return the ``len(a) x len(b)`` matrix of pairwise scores.

        Tokens are compared once per pair; the fill and traceback both read
        from this array instead of calling :meth:`compare` again.
        """
        out = np.empty((len(a), len(b)), dtype=constants.MATRIX_DTYPE)
        for i, x in enumerate(a):
            for j, y in enumerate(b):
                try:
                    out[i, j] = self.compare(x, y)
                except OverflowError:
                    raise InvalidInputError(
                        "Pairwise score exceeds int64 range",
                        context=f"tokens {x!r}, {y!r}",
                    ) from None
        return out

    @classmethod
    def from_substitution_matrix(
        cls,
        name: str,
        match_score: int = constants.DEFAULT_MATCH_SCORE,
        mismatch_score: int = constants.DEFAULT_MISMATCH_SCORE,
    ) -> "ScoringModel":
        """Build a model whose table is a named Biopython substitution matrix.

        Tokens outside the matrix alphabet fall back to the identity rule.

        Args:
            name: Matrix name understood by
                ``Bio.Align.substitution_matrices.load`` (e.g. "BLOSUM62").
            match_score: Fallback score for equal tokens.
            mismatch_score: Fallback score for unequal tokens.

        Raises:
            InvalidInputError: If the name is unknown or the matrix is not
                integer valued.
        """
        available = substitution_matrices.load()
        if name.upper() not in available:
            raise InvalidInputError(
                f"Unknown substitution matrix '{name}'",
                context=f"available: {', '.join(sorted(available))}",
            )
        matrix = substitution_matrices.load(name.upper())
        table = {}
        for x in matrix.alphabet:
            for y in matrix.alphabet:
                table[(x, y)] = matrix[x, y]
        LOGGER.info(
            f"Loaded substitution matrix {name.upper()} "
            f"({len(matrix.alphabet)} symbols)"
        )
        return cls(
            match_score=match_score, mismatch_score=mismatch_score, table=table
        )

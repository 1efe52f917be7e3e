#!/usr/bin/env python3

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from seqalign import constants
from seqalign.alignment.steps import Step, StepKind

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlignmentResult:
    """Optimal global alignment of one sequence pair.

    Attributes:
        steps: Ordered alignment steps from the start of both sequences.
        score: Integer alignment score, ``H[n][m]``.
        similarity: Normalized similarity, or None when not requested.
    """

    steps: Tuple[Step, ...]
    score: int
    similarity: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))
        LOGGER.debug(
            f"Created AlignmentResult with {len(self.steps)} steps, "
            f"score={self.score}, similarity={self.similarity}"
        )

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def step_codes(self) -> List[int]:
        """Steps as integer tags (0 = align, 1 = delete, 2 = insert)."""
        return [step.code for step in self.steps]

    def _count(self, kind: StepKind) -> int:
        return sum(1 for step in self.steps if step.kind == kind)

    @property
    def n_aligned(self) -> int:
        return self._count(StepKind.ALIGN)

    @property
    def n_deleted(self) -> int:
        return self._count(StepKind.DELETE)

    @property
    def n_inserted(self) -> int:
        return self._count(StepKind.INSERT)

    def aligned_pairs(
        self,
        a: Sequence[Any],
        b: Sequence[Any],
        gap: Any = constants.GAP_MARKER,
    ) -> List[Tuple[Any, Any]]:
        """Materialize the alignment as token pairs, with ``gap`` for gaps.

        Args:
            a: The first sequence passed to the aligner.
            b: The second sequence passed to the aligner.
            gap: Marker placed opposite a token consumed from one side only.

        Returns:
            One ``(a_token_or_gap, b_token_or_gap)`` pair per step.
        """
        pairs = []
        for step in self.steps:
            left = a[step.x] if step.x is not None else gap
            right = b[step.y] if step.y is not None else gap
            pairs.append((left, right))
        return pairs

    def aligned_strings(
        self,
        a: Sequence[Any],
        b: Sequence[Any],
        gap: str = constants.GAP_MARKER,
        sep: str = "",
    ) -> Tuple[str, str]:
        """Return the two gapped rows of the alignment as strings."""
        pairs = self.aligned_pairs(a, b, gap=gap)
        if sep:
            # Pad each column so multi-character tokens stay lined up
            widths = [max(len(str(x)), len(str(y))) for x, y in pairs]
            top = sep.join(str(x).ljust(w) for (x, _), w in zip(pairs, widths))
            bottom = sep.join(
                str(y).ljust(w) for (_, y), w in zip(pairs, widths)
            )
            return top.rstrip(), bottom.rstrip()
        return (
            "".join(str(x) for x, _ in pairs),
            "".join(str(y) for _, y in pairs),
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready record of the result."""
        return {
            "steps": self.step_codes,
            "score": int(self.score),
            "similarity": self.similarity,
        }

from pathlib import Path

from seqalign.aligner import BatchAligner, align, align_set
from seqalign.alignment import AlignmentResult, Step, StepKind
from seqalign.errors import InvalidInputError
from seqalign.scoring import ScoringModel

# Load README as module docstring for pdoc homepage
_readme = Path(__file__).resolve().parent.parent.parent / "README.md"
if _readme.exists():
    __doc__ = _readme.read_text(encoding="utf-8")
else:
    __doc__ = """Needleman-Wunsch global alignment of token sequences."""

__all__ = [
    "align",
    "align_set",
    "BatchAligner",
    "AlignmentResult",
    "Step",
    "StepKind",
    "ScoringModel",
    "InvalidInputError",
]

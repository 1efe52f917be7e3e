#!/usr/bin/env python3
"""Alignment engine for seqalign.

This package provides the Needleman-Wunsch core including:
- AlignmentMatrix: Dynamic-programming fill over a flat score buffer
- traceback: Reconstruction of one optimal path
- Step / StepKind: Alignment step representation
- AlignmentResult: Immutable per-pair result record
"""

from seqalign.alignment.matrix import AlignmentMatrix
from seqalign.alignment.result import AlignmentResult
from seqalign.alignment.steps import Step, StepKind
from seqalign.alignment.traceback import traceback

__all__ = [
    # Core
    "AlignmentMatrix",
    "traceback",
    # Records
    "AlignmentResult",
    "Step",
    "StepKind",
]

"""Shared test fixtures and utilities for seqalign tests."""

from typing import Callable, Sequence

import pytest
from Bio import Align

from seqalign.alignment import Step, StepKind
from seqalign.scoring import ScoringModel


def bio_global_score(
    a: str, b: str, match: int = 1, mismatch: int = -1, gap: int = -1
) -> int:
    """Optimal global score from Biopython's PairwiseAligner."""
    aligner = Align.PairwiseAligner()
    aligner.mode = "global"
    aligner.match_score = match
    aligner.mismatch_score = mismatch
    aligner.gap_score = gap
    return int(round(aligner.score(a, b)))


def check_step_coverage(steps: Sequence[Step], n: int, m: int) -> None:
    """Assert every position of both sequences is consumed once, in order."""
    xs = [s.x for s in steps if s.kind in (StepKind.ALIGN, StepKind.DELETE)]
    ys = [s.y for s in steps if s.kind in (StepKind.ALIGN, StepKind.INSERT)]
    assert xs == list(range(n))
    assert ys == list(range(m))


@pytest.fixture
def oracle_score() -> Callable[..., int]:
    return bio_global_score


@pytest.fixture
def assert_coverage() -> Callable[[Sequence[Step], int, int], None]:
    return check_step_coverage


@pytest.fixture
def default_scoring() -> ScoringModel:
    return ScoringModel()


@pytest.fixture
def fasta_file(tmp_path):
    """Small FASTA file with three DNA records."""
    path = tmp_path / "seqs.fasta"
    path.write_text(">s0\nGATTACA\n>s1\nGCATGCU\n>s2\nGATTTACA\n")
    return path

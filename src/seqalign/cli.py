#!/usr/bin/env python3
"""Command-line interface for seqalign.

This module provides the ``seqalign`` entry point with two commands:

1. ``align``: globally align two sequences given on the command line
2. ``align-set``: align every pair of sequences read from a file

Usage:
    seqalign align ATC AC
    seqalign align --tokenize words "the cat sat" "the hat sat"
    seqalign align-set sequences.fasta --matrix BLOSUM62 -j 4
"""

import json
import logging
from typing import Callable, Optional

import click

from seqalign import constants, io, util
from seqalign.aligner import BatchAligner
from seqalign.config import BatchConfig
from seqalign.errors import InvalidInputError

LOGGER = logging.getLogger(__name__)

_SCORING_OPTIONS = [
    click.option(
        "-v",
        "--verbose",
        is_flag=True,
        help="Enable verbose logging.",
    ),
    click.option(
        "--match",
        "match_score",
        type=int,
        default=constants.DEFAULT_MATCH_SCORE,
        show_default=True,
        help="Score for equal tokens not covered by a score table.",
    ),
    click.option(
        "--mismatch",
        "mismatch_score",
        type=int,
        default=constants.DEFAULT_MISMATCH_SCORE,
        show_default=True,
        help="Score for unequal tokens not covered by a score table.",
    ),
    click.option(
        "--gap",
        "gap_score",
        type=int,
        default=constants.DEFAULT_GAP_SCORE,
        show_default=True,
        help="Linear cost of each gap position.",
    ),
    click.option(
        "--matrix",
        "substitution_matrix",
        default=None,
        help=(
            "Named substitution matrix used as the score table "
            "(e.g. BLOSUM62, PAM250)."
        ),
    ),
    click.option(
        "--matrix-file",
        "matrix_file",
        default=None,
        type=click.Path(exists=True, dir_okay=False, readable=True),
        help=(
            "File of 'token_a token_b score' lines used as the score table. "
            "Mutually exclusive with --matrix."
        ),
    ),
    click.option(
        "--tokenize",
        "tokenize_mode",
        type=click.Choice(list(constants.TOKENIZE_MODES)),
        default="chars",
        show_default=True,
        help=(
            "How sequences are split into tokens: single characters, "
            "whitespace separated words, or comma separated items."
        ),
    ),
    click.option(
        "--similarity/--no-similarity",
        "compute_similarity",
        default=True,
        show_default=True,
        help="Compute the normalized similarity for each alignment.",
    ),
    click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Print results as JSON.",
    ),
]


def scoring_options(func: Callable) -> Callable:
    """Attach the options shared by every command."""
    for option in reversed(_SCORING_OPTIONS):
        func = option(func)
    return func


def build_config(
    match_score: int,
    mismatch_score: int,
    gap_score: int,
    substitution_matrix: Optional[str],
    matrix_file: Optional[str],
    compute_similarity: bool,
    num_workers: int = 0,
) -> BatchConfig:
    """Translate CLI option values into a BatchConfig."""
    if substitution_matrix and matrix_file:
        raise click.UsageError(
            "--matrix and --matrix-file are mutually exclusive."
        )
    similarity_matrix = None
    if matrix_file:
        similarity_matrix = io.read_score_table(matrix_file)
    return BatchConfig.from_cli_args(
        match_score=match_score,
        mismatch_score=mismatch_score,
        gap_score=gap_score,
        similarity_matrix=similarity_matrix,
        substitution_matrix=substitution_matrix,
        compute_similarity=compute_similarity,
        num_workers=num_workers,
    )


def _format_similarity(value: Optional[float]) -> str:
    return "NA" if value is None else f"{value:.6f}"


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Optimal global (Needleman-Wunsch) alignment of token sequences "
        "with a normalized similarity score."
    ),
)
def main() -> None:
    """Entry point for the seqalign command group."""


@main.command(
    "align",
    help="Align two sequences given on the command line.",
)
@click.argument("seq_a")
@click.argument("seq_b")
@scoring_options
def align_command(
    seq_a: str,
    seq_b: str,
    verbose: bool,
    match_score: int,
    mismatch_score: int,
    gap_score: int,
    substitution_matrix: Optional[str],
    matrix_file: Optional[str],
    tokenize_mode: str,
    compute_similarity: bool,
    as_json: bool,
) -> None:
    """Align SEQ_A against SEQ_B and print the alignment."""
    util.configure_logging(verbose)
    try:
        config = build_config(
            match_score,
            mismatch_score,
            gap_score,
            substitution_matrix,
            matrix_file,
            compute_similarity,
        )
        a = io.tokenize(seq_a, tokenize_mode)
        b = io.tokenize(seq_b, tokenize_mode)
        LOGGER.info(f"Aligning sequences of length {len(a)} and {len(b)}")
        result = BatchAligner(config).align_pair(a, b)
    except InvalidInputError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(result.to_dict()))
        return

    sep = "" if tokenize_mode == "chars" else " "
    top, bottom = result.aligned_strings(a, b, sep=sep)
    click.echo(f"score\t{result.score}")
    click.echo(f"similarity\t{_format_similarity(result.similarity)}")
    click.echo(top)
    click.echo(bottom)


@main.command(
    "align-set",
    help=(
        "Align every pair of sequences read from INPUT_FILE and print one "
        "tab-separated row per pair."
    ),
)
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, readable=True),
)
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice(list(constants.SEQUENCE_FORMATS)),
    default="fasta",
    show_default=True,
    help="Input format: FASTA, or one sequence per line.",
)
@click.option(
    "-j",
    "--jobs",
    "num_jobs",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Worker threads used to align pairs (0 runs sequentially).",
)
@scoring_options
def align_set_command(
    input_file: str,
    fmt: str,
    num_jobs: int,
    verbose: bool,
    match_score: int,
    mismatch_score: int,
    gap_score: int,
    substitution_matrix: Optional[str],
    matrix_file: Optional[str],
    tokenize_mode: str,
    compute_similarity: bool,
    as_json: bool,
) -> None:
    """Align all pairs of sequences in INPUT_FILE."""
    util.configure_logging(verbose)
    try:
        config = build_config(
            match_score,
            mismatch_score,
            gap_score,
            substitution_matrix,
            matrix_file,
            compute_similarity,
            num_workers=num_jobs,
        )
        names, seqs = io.read_sequences(input_file, fmt, tokenize_mode)
        results = BatchAligner(config)(seqs)
    except InvalidInputError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        records = []
        for (i, j), result in sorted(results.items()):
            record = {"i": i, "j": j, "name_i": names[i], "name_j": names[j]}
            record.update(result.to_dict())
            records.append(record)
        click.echo(json.dumps(records))
        return

    click.echo("i\tj\tname_i\tname_j\tscore\tsimilarity")
    for (i, j), result in sorted(results.items()):
        click.echo(
            f"{i}\t{j}\t{names[i]}\t{names[j]}\t{result.score}\t"
            f"{_format_similarity(result.similarity)}"
        )


if __name__ == "__main__":
    main()

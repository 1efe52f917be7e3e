#!/usr/bin/env python3
"""Reading sequences and score tables from files.

Sequences are read either from FASTA (via Biopython) or from plain text
with one sequence per line, and split into tokens by one of the modes in
``constants.TOKENIZE_MODES``.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

from Bio import SeqIO

from seqalign import constants
from seqalign.errors import InvalidInputError

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]


def tokenize(text: str, mode: str = "chars") -> List[str]:
    """Split ``text`` into tokens.

    Args:
        text: Raw sequence text.
        mode: "chars" (one token per character), "words" (whitespace
            separated) or "csv" (comma separated, items stripped).

    Returns:
        List of string tokens.
    """
    if mode == "chars":
        return list(text)
    if mode == "words":
        return text.split()
    if mode == "csv":
        return [item.strip() for item in text.split(",") if item.strip()]
    raise InvalidInputError(
        f"Unknown tokenize mode '{mode}'",
        context=f"expected one of {', '.join(constants.TOKENIZE_MODES)}",
    )


def read_sequences(
    path: PathLike, fmt: str = "fasta", tokenize_mode: str = "chars"
) -> Tuple[List[str], List[List[str]]]:
    """Read named token sequences from a file.

    Args:
        path: Input file.
        fmt: "fasta" or "lines" (one sequence per line; blank lines and
            lines starting with ``#`` are skipped).
        tokenize_mode: How each sequence is split into tokens.

    Returns:
        Tuple of (names, token lists) in file order.
    """
    names: List[str] = []
    seqs: List[List[str]] = []
    if fmt == "fasta":
        for record in SeqIO.parse(str(path), "fasta"):
            names.append(record.id)
            seqs.append(tokenize(str(record.seq), tokenize_mode))
    elif fmt == "lines":
        with open(path) as f:
            for line in f:
                line = line.rstrip("\n")
                if not line.strip() or line.startswith("#"):
                    continue
                names.append(f"seq{len(names)}")
                seqs.append(tokenize(line, tokenize_mode))
    else:
        raise InvalidInputError(
            f"Unknown sequence format '{fmt}'",
            context=f"expected one of {', '.join(constants.SEQUENCE_FORMATS)}",
        )
    LOGGER.info(f"Read {len(seqs)} sequences from {path}")
    return names, seqs


def read_score_table(path: PathLike) -> Dict[Tuple[str, str], int]:
    """Read a pairwise score table.

    Each non-empty line holds ``token_a token_b score`` separated by tabs,
    commas or whitespace. Lines starting with ``#`` are comments.

    Raises:
        InvalidInputError: On a line without three fields or with a
            non-integer score.
    """
    table: Dict[Tuple[str, str], int] = {}
    with open(path, newline="") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "\t" in line or "," in line:
                delimiter = "\t" if "\t" in line else ","
                row = next(csv.reader([line], delimiter=delimiter))
                parts = [p.strip() for p in row]
            else:
                parts = line.split()
            if len(parts) != 3:
                raise InvalidInputError(
                    f"Line {line_num}: expected 'token_a token_b score', "
                    f"got '{line}'",
                    context=str(path),
                )
            try:
                score = int(parts[2])
            except ValueError:
                raise InvalidInputError(
                    f"Line {line_num}: score '{parts[2]}' is not an integer",
                    context=str(path),
                ) from None
            table[(parts[0], parts[1])] = score
    LOGGER.info(f"Read {len(table)} score table entries from {path}")
    return table

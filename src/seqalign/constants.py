#!/usr/bin/env python3
"""Constants and default values for seqalign.

This module defines constants used throughout the seqalign package including:
- Default scoring parameters for the identity rule and linear gaps
- Integer tags used as the wire form of alignment steps
- Display and tokenization settings
"""

# Default scoring parameters
DEFAULT_MATCH_SCORE = 1
DEFAULT_MISMATCH_SCORE = -1
DEFAULT_GAP_SCORE = -1

# Returned by the similarity metric when no aligned position is an exact match
NO_MATCH_SIMILARITY = -1.0

# Marker used when materializing gapped alignments
GAP_MARKER = "-"

# Integer tags for Align / Delete / Insert steps
STEP_ALIGN_CODE = 0
STEP_DELETE_CODE = 1
STEP_INSERT_CODE = 2

# Dtype of the dynamic-programming buffer
MATRIX_DTYPE = "int64"

# Supported tokenization modes for text input
TOKENIZE_MODES = ("chars", "words", "csv")

# Supported sequence file formats
SEQUENCE_FORMATS = ("fasta", "lines")

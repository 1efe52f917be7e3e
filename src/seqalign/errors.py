#!/usr/bin/env python3
"""Exceptions raised by seqalign.

The engine is pure and deterministic, so there is a single recoverable
failure kind: input that the alignment recurrences cannot handle.
"""

from typing import Optional


class InvalidInputError(ValueError):
    """Raised when an alignment input or scoring option is invalid.

    Subclasses ``ValueError`` so callers that catch value errors keep
    working unchanged.

    Args:
        message: Description of what was wrong with the input.
        context: Optional extra detail (e.g. which pair in a batch failed).

    Examples:
        >>> raise InvalidInputError(
        ...     "Sequence a is empty", context="pair (0, 2)"
        ... )
    """

    def __init__(self, message: str, context: Optional[str] = None) -> None:
        self.message = message
        self.context = context
        super().__init__(self.formatted())

    def formatted(self) -> str:
        """Return the message with any context appended."""
        if self.context:
            return f"{self.message} ({self.context})"
        return self.message

    def with_context(self, context: str) -> "InvalidInputError":
        """Return a copy of this error with ``context`` appended."""
        if self.context:
            context = f"{self.context}; {context}"
        return InvalidInputError(self.message, context=context)

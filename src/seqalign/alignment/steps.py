#!/usr/bin/env python3
"""Alignment step representation.

A global alignment is an ordered list of steps. Each step consumes one
token from sequence A, one from sequence B, or one from each:

- ALIGN (x, y): a[x] is paired with b[y]
- DELETE (x): a[x] is paired with a gap in B
- INSERT (y): b[y] is paired with a gap in A
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, Tuple

from seqalign import constants


class StepKind(IntEnum):
    """Tag of an alignment step; the integer value is its wire code."""

    ALIGN = constants.STEP_ALIGN_CODE
    DELETE = constants.STEP_DELETE_CODE
    INSERT = constants.STEP_INSERT_CODE


@dataclass(frozen=True)
class Step:
    """A single alignment column.

    ``x`` is the position in sequence A (None for INSERT) and ``y`` the
    position in sequence B (None for DELETE). Use the :meth:`align`,
    :meth:`delete` and :meth:`insert` constructors rather than building
    steps by hand.
    """

    kind: StepKind
    x: Optional[int] = None
    y: Optional[int] = None

    def __post_init__(self) -> None:
        needs_x = self.kind in (StepKind.ALIGN, StepKind.DELETE)
        needs_y = self.kind in (StepKind.ALIGN, StepKind.INSERT)
        if needs_x != (self.x is not None) or needs_y != (self.y is not None):
            raise ValueError(
                f"Invalid positions for {self.kind.name} step: "
                f"x={self.x}, y={self.y}"
            )

    @classmethod
    def align(cls, x: int, y: int) -> "Step":
        return cls(StepKind.ALIGN, x, y)

    @classmethod
    def delete(cls, x: int) -> "Step":
        return cls(StepKind.DELETE, x, None)

    @classmethod
    def insert(cls, y: int) -> "Step":
        return cls(StepKind.INSERT, None, y)

    @property
    def code(self) -> int:
        """Integer tag: 0 for ALIGN, 1 for DELETE, 2 for INSERT."""
        return int(self.kind)

    def to_tuple(self) -> Tuple[int, Optional[int], Optional[int]]:
        """Convert to a ``(code, x, y)`` tuple."""
        return (self.code, self.x, self.y)

    def __iter__(self) -> Iterator:
        """Allow unpacking like a ``(kind, x, y)`` tuple."""
        yield self.kind
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        if self.kind == StepKind.ALIGN:
            return f"Align({self.x}, {self.y})"
        if self.kind == StepKind.DELETE:
            return f"Delete({self.x})"
        return f"Insert({self.y})"

"""Error types raised by the board topology."""

from __future__ import annotations


class InvariantViolation(ValueError):
    """A road or settlement was built from tiles that are not properly adjacent.

    Raised only for programming errors in the topology builder; a board
    build that hits one is aborted as a whole.
    """

"""Scan step and outcome types produced by the encoder.

Each step pairs a span of the source text with either the MacRoman code
it encodes to or the single scalar value that could not be encoded.

Uses NamedTuples so steps unpack like plain tuples:

    for offset, length, outcome in encode(text):
        match outcome:
            case Mapped(code=code):
                ...
            case Unmappable(char=char):
                ...

Thread Safety:
All types are immutable and safe to share across threads.

"""

from __future__ import annotations

from typing import NamedTuple


class Mapped(NamedTuple):
    """The span encodes to a single MacRoman byte code."""

    code: int

    @property
    def ok(self) -> bool:
        """Always True; mirrors ``Unmappable.ok``."""
        return True

    def __repr__(self) -> str:
        return f"Mapped(0x{self.code:02X})"


class Unmappable(NamedTuple):
    """The span is one scalar value with no MacRoman encoding.

    Not an exception: callers decide whether to substitute, skip, or
    report it.
    """

    char: str

    @property
    def ok(self) -> bool:
        """Always False; mirrors ``Mapped.ok``."""
        return False

    @property
    def codepoint(self) -> int:
        """The scalar value as an integer."""
        return ord(self.char)

    def __repr__(self) -> str:
        return f"Unmappable(U+{ord(self.char):04X})"


# PEP 695 type alias for a single step's result
type ScanOutcome = Mapped | Unmappable


class ScanStep(NamedTuple):
    """One unit of encoder output.

    Attributes:
        offset: Index in the source text where the span starts
        length: Number of scalar values the span covers (1 or more)
        outcome: Mapped code or Unmappable scalar value

    """

    offset: int
    length: int
    outcome: ScanOutcome

    @property
    def end(self) -> int:
        """Index just past the span."""
        return self.offset + self.length


__all__ = ["Mapped", "ScanOutcome", "ScanStep", "Unmappable"]

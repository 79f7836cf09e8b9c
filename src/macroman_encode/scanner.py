"""Longest-match scanner from Unicode text to MacRoman codes.

Each step takes the longest table entry that is a prefix of the remaining
text. When nothing matches, the first scalar value is reported as
Unmappable and scanning resumes right after it.

Guarantees:
- Every step consumes at least one scalar value, so scanning terminates
  in at most len(text) steps.
- Steps cover the source exactly once, in order, with no gaps.
- No table lookup happens until the caller asks for the next step.

Thread Safety:
Encoder instances are single-use and single-threaded. Create one per
source string. The mapping table they read is immutable and shared.

"""

from __future__ import annotations

from collections.abc import Iterator

from macroman_encode.profiling import EncodeAccumulator, get_encode_accumulator
from macroman_encode.steps import Mapped, ScanStep, Unmappable
from macroman_encode.table import longest_prefix


class MacRomanEncoder:
    """One-shot iterator of ScanSteps over a source text.

    Usage:
            >>> for step in MacRomanEncoder("cafe\u0301"):
            ...     print(step)
        ScanStep(offset=0, length=1, outcome=Mapped(0x63))
        ScanStep(offset=1, length=1, outcome=Mapped(0x61))
        ScanStep(offset=2, length=1, outcome=Mapped(0x66))
        ScanStep(offset=3, length=2, outcome=Mapped(0x8E))

    Once exhausted it stays exhausted; create a new encoder to rescan.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_accumulator",
    )

    def __init__(self, source: str) -> None:
        """Initialize encoder with source text.

        Args:
            source: Unicode text to encode
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._accumulator: EncodeAccumulator | None = get_encode_accumulator()
        if self._accumulator is not None:
            self._accumulator.record_encode()

    @property
    def position(self) -> int:
        """Index of the first unconsumed scalar value."""
        return self._pos

    @property
    def remaining(self) -> str:
        """The unconsumed suffix of the source."""
        return self._source[self._pos :]

    def __iter__(self) -> Iterator[ScanStep]:
        return self

    def __next__(self) -> ScanStep:
        pos = self._pos
        if pos >= self._source_len:
            raise StopIteration

        entry = longest_prefix(self._source, pos)
        if entry is not None:
            sequence, code = entry
            step = ScanStep(pos, len(sequence), Mapped(code))
        else:
            step = ScanStep(pos, 1, Unmappable(self._source[pos]))

        self._pos = pos + step.length
        if self._accumulator is not None:
            self._accumulator.record_step(step.length, entry is not None)
        return step


def encode(source: str) -> Iterator[ScanStep]:
    """Encode Unicode text into a lazy stream of MacRoman scan steps.

    Args:
        source: Unicode text to encode

    Returns:
        One-shot iterator of ScanStep(offset, length, outcome). Offsets and
        lengths index into ``source``.

    Example:
        >>> [step.outcome for step in encode("ça")]
        [Mapped(0x8D), Mapped(0x61)]
        >>> list(encode("\U0001F600"))
        [ScanStep(offset=0, length=1, outcome=Unmappable(U+1F600))]
    """
    return MacRomanEncoder(source)


__all__ = ["MacRomanEncoder", "encode"]

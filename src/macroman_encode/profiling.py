"""EncodeAccumulator: opt-in profiling for MacRoman encoding.

This module provides accumulated metrics during encoding:
- Total profiling time
- Steps produced, split into mapped and unmappable
- Scalar values consumed

Zero overhead when disabled (get_encode_accumulator() returns None).

Example:
    from macroman_encode import encode_bytes
    from macroman_encode.profiling import profiled_encode

    with profiled_encode() as metrics:
        encode_bytes("café", errors="replace")

    print(metrics.summary())
    # {"total_ms": 0.1, "encode_calls": 1, "steps": 4, "mapped": 4, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class EncodeAccumulator:
    """Accumulated metrics during encoding.

    An encoder picks up the active accumulator when it is created and
    records every step it yields, so partially consumed scans are counted
    up to the point the caller stopped.

    Attributes:
        start_time: Profiling start timestamp.
        encode_calls: Number of encoders created.
        steps: Steps yielded.
        mapped: Steps with a Mapped outcome.
        unmappable: Steps with an Unmappable outcome.
        scalar_values: Scalar values consumed across all steps.

    """

    start_time: float = field(default_factory=perf_counter)
    encode_calls: int = 0
    steps: int = 0
    mapped: int = 0
    unmappable: int = 0
    scalar_values: int = 0

    def record_encode(self) -> None:
        """Record the creation of an encoder."""
        self.encode_calls += 1

    def record_step(self, length: int, mapped: bool) -> None:
        """Record one yielded step.

        Args:
            length: Scalar values the step consumed.
            mapped: Whether the step's outcome was Mapped.

        """
        self.steps += 1
        self.scalar_values += length
        if mapped:
            self.mapped += 1
        else:
            self.unmappable += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of encode metrics.

        Returns:
            Dict with total_ms, encode_calls, steps, mapped, unmappable,
            scalar_values.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "encode_calls": self.encode_calls,
            "steps": self.steps,
            "mapped": self.mapped,
            "unmappable": self.unmappable,
            "scalar_values": self.scalar_values,
        }


_accumulator: ContextVar[EncodeAccumulator | None] = ContextVar(
    "encode_accumulator",
    default=None,
)


def get_encode_accumulator() -> EncodeAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_encode() -> Iterator[EncodeAccumulator]:
    """Context manager for profiled encoding.

    Creates an EncodeAccumulator and makes it available via
    get_encode_accumulator() for the duration of the with block.

    Yields:
        EncodeAccumulator that will be populated by encoders created
        inside the block.

    """
    acc = EncodeAccumulator()
    token: Token[EncodeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = ["EncodeAccumulator", "get_encode_accumulator", "profiled_encode"]

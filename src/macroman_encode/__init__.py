"""
macroman_encode: Unicode to MacRoman with longest-match composition

Converts Unicode text into MacRoman byte codes, one step at a time, for
programs that draw text with classic Macintosh bitmap fonts and need to
know which glyph each span of text selects.

Both precomposed and decomposed spellings are understood: "é" (U+00E9)
and "e" followed by COMBINING ACUTE ACCENT (U+0065 U+0301) both encode to
0x8E, the latter as a single step covering two scalar values.

Quick Start:
    >>> from macroman_encode import encode, Mapped
    >>> [step.outcome for step in encode("Ça va")]
    [Mapped(0x82), Mapped(0x61), Mapped(0x20), Mapped(0x76), Mapped(0x61)]

    >>> # Characters MacRoman lacks are reported inline, never raised
    >>> list(encode("\U0001F600!"))
    [ScanStep(offset=0, length=1, outcome=Unmappable(U+1F600)),
     ScanStep(offset=1, length=1, outcome=Mapped(0x21))]

    >>> # Or collect bytes with a substitution policy
    >>> from macroman_encode import encode_bytes
    >>> encode_bytes("30 € \U0001F600", errors="replace")
    b'30 \\xdb ?'

Installation:
    pip install macroman-encode          # Zero runtime dependencies
"""

from macroman_encode.config import (
    EncodeConfig,
    encode_config_context,
    get_encode_config,
    reset_encode_config,
    set_encode_config,
)
from macroman_encode.convert import can_encode, encode_bytes, find_unmappable
from macroman_encode.errors import (
    ConfigError,
    MacRomanError,
    TableError,
    UnmappableCharacterError,
)
from macroman_encode.profiling import (
    EncodeAccumulator,
    get_encode_accumulator,
    profiled_encode,
)
from macroman_encode.scanner import MacRomanEncoder, encode
from macroman_encode.steps import Mapped, ScanOutcome, ScanStep, Unmappable
from macroman_encode.table import (
    KNOWN_SEQUENCES,
    MAX_SEQUENCE_LENGTH,
    check_table,
    longest_prefix,
    lookup,
)

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "encode",
    "MacRomanEncoder",
    # Steps
    "Mapped",
    "ScanOutcome",
    "ScanStep",
    "Unmappable",
    # Mapping table
    "KNOWN_SEQUENCES",
    "MAX_SEQUENCE_LENGTH",
    "check_table",
    "longest_prefix",
    "lookup",
    # Byte helpers
    "can_encode",
    "encode_bytes",
    "find_unmappable",
    # Configuration (ContextVar-based)
    "EncodeConfig",
    "get_encode_config",
    "set_encode_config",
    "reset_encode_config",
    "encode_config_context",
    # Profiling
    "EncodeAccumulator",
    "get_encode_accumulator",
    "profiled_encode",
    # Errors
    "MacRomanError",
    "UnmappableCharacterError",
    "TableError",
    "ConfigError",
]

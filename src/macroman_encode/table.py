"""MacRoman mapping table and longest-prefix lookup.

KNOWN_SEQUENCES maps Unicode sequences of one or two scalar values to
MacRoman byte codes. Every accented letter MacRoman can represent appears
twice: once precomposed (U+00E9) and once as base letter plus combining
mark (U+0065 U+0301), so input never needs normalizing first.

Some codes have more than one source:
- 0xDB: U+00A4 CURRENCY SIGN (pre-8.5 fonts) and U+20AC EURO SIGN
- 0xBD: U+03A9 GREEK CAPITAL LETTER OMEGA and U+2126 OHM SIGN
- 0xF0: U+F8FF, the private-use code point Apple uses for its logo

Lookup:
The tuple is sorted by source. Python compares str by code point, which
orders the same way as the UTF-8 bytes. Bisecting for the remaining text
lands just after the longest entry that can be a prefix of it, so the
sorted tuple doubles as a prefix tree. check_table() re-verifies the
ordering at import; reordering the literal below breaks longest-match
silently otherwise.

Thread Safety:
All module state is immutable. Safe to share across threads.

"""

from __future__ import annotations

import unicodedata
from bisect import bisect_right
from collections.abc import Sequence

from macroman_encode.errors import TableError

# PEP 695 type alias for (source sequence, byte code)
type MappingEntry = tuple[str, int]

KNOWN_SEQUENCES: tuple[MappingEntry, ...] = (
    ("\u0000", 0x00),
    ("\u0001", 0x01),
    ("\u0002", 0x02),
    ("\u0003", 0x03),
    ("\u0004", 0x04),
    ("\u0005", 0x05),
    ("\u0006", 0x06),
    ("\u0007", 0x07),
    ("\u0008", 0x08),
    ("\u0009", 0x09),
    ("\u000A", 0x0A),
    ("\u000B", 0x0B),
    ("\u000C", 0x0C),
    ("\u000D", 0x0D),
    ("\u000E", 0x0E),
    ("\u000F", 0x0F),
    ("\u0010", 0x10),
    ("\u0011", 0x11),
    ("\u0012", 0x12),
    ("\u0013", 0x13),
    ("\u0014", 0x14),
    ("\u0015", 0x15),
    ("\u0016", 0x16),
    ("\u0017", 0x17),
    ("\u0018", 0x18),
    ("\u0019", 0x19),
    ("\u001A", 0x1A),
    ("\u001B", 0x1B),
    ("\u001C", 0x1C),
    ("\u001D", 0x1D),
    ("\u001E", 0x1E),
    ("\u001F", 0x1F),
    ("\u0020", 0x20),
    ("\u0021", 0x21),
    ("\u0022", 0x22),
    ("\u0023", 0x23),
    ("\u0024", 0x24),
    ("\u0025", 0x25),
    ("\u0026", 0x26),
    ("\u0027", 0x27),
    ("\u0028", 0x28),
    ("\u0029", 0x29),
    ("\u002A", 0x2A),
    ("\u002B", 0x2B),
    ("\u002C", 0x2C),
    ("\u002D", 0x2D),
    ("\u002E", 0x2E),
    ("\u002F", 0x2F),
    ("\u0030", 0x30),
    ("\u0031", 0x31),
    ("\u0032", 0x32),
    ("\u0033", 0x33),
    ("\u0034", 0x34),
    ("\u0035", 0x35),
    ("\u0036", 0x36),
    ("\u0037", 0x37),
    ("\u0038", 0x38),
    ("\u0039", 0x39),
    ("\u003A", 0x3A),
    ("\u003B", 0x3B),
    ("\u003C", 0x3C),
    ("\u003D", 0x3D),
    ("\u003E", 0x3E),
    ("\u003F", 0x3F),
    ("\u0040", 0x40),
    ("\u0041", 0x41),
    ("\u0041\u0300", 0xCB),
    ("\u0041\u0301", 0xE7),
    ("\u0041\u0302", 0xE5),
    ("\u0041\u0303", 0xCC),
    ("\u0041\u0308", 0x80),
    ("\u0041\u030A", 0x81),
    ("\u0042", 0x42),
    ("\u0043", 0x43),
    ("\u0043\u0327", 0x82),
    ("\u0044", 0x44),
    ("\u0045", 0x45),
    ("\u0045\u0300", 0xE9),
    ("\u0045\u0301", 0x83),
    ("\u0045\u0302", 0xE6),
    ("\u0045\u0308", 0xE8),
    ("\u0046", 0x46),
    ("\u0047", 0x47),
    ("\u0048", 0x48),
    ("\u0049", 0x49),
    ("\u0049\u0300", 0xED),
    ("\u0049\u0301", 0xEA),
    ("\u0049\u0302", 0xEB),
    ("\u0049\u0308", 0xEC),
    ("\u004A", 0x4A),
    ("\u004B", 0x4B),
    ("\u004C", 0x4C),
    ("\u004D", 0x4D),
    ("\u004E", 0x4E),
    ("\u004E\u0303", 0x84),
    ("\u004F", 0x4F),
    ("\u004F\u0300", 0xF1),
    ("\u004F\u0301", 0xEE),
    ("\u004F\u0302", 0xEF),
    ("\u004F\u0303", 0xCD),
    ("\u004F\u0308", 0x85),
    ("\u0050", 0x50),
    ("\u0051", 0x51),
    ("\u0052", 0x52),
    ("\u0053", 0x53),
    ("\u0054", 0x54),
    ("\u0055", 0x55),
    ("\u0055\u0300", 0xF4),
    ("\u0055\u0301", 0xF2),
    ("\u0055\u0302", 0xF3),
    ("\u0055\u0308", 0x86),
    ("\u0056", 0x56),
    ("\u0057", 0x57),
    ("\u0058", 0x58),
    ("\u0059", 0x59),
    ("\u0059\u0308", 0xD9),
    ("\u005A", 0x5A),
    ("\u005B", 0x5B),
    ("\u005C", 0x5C),
    ("\u005D", 0x5D),
    ("\u005E", 0x5E),
    ("\u005F", 0x5F),
    ("\u0060", 0x60),
    ("\u0061", 0x61),
    ("\u0061\u0300", 0x88),
    ("\u0061\u0301", 0x87),
    ("\u0061\u0302", 0x89),
    ("\u0061\u0303", 0x8B),
    ("\u0061\u0308", 0x8A),
    ("\u0061\u030A", 0x8C),
    ("\u0062", 0x62),
    ("\u0063", 0x63),
    ("\u0063\u0327", 0x8D),
    ("\u0064", 0x64),
    ("\u0065", 0x65),
    ("\u0065\u0300", 0x8F),
    ("\u0065\u0301", 0x8E),
    ("\u0065\u0302", 0x90),
    ("\u0065\u0308", 0x91),
    ("\u0066", 0x66),
    ("\u0067", 0x67),
    ("\u0068", 0x68),
    ("\u0069", 0x69),
    ("\u0069\u0300", 0x93),
    ("\u0069\u0301", 0x92),
    ("\u0069\u0302", 0x94),
    ("\u0069\u0308", 0x95),
    ("\u006A", 0x6A),
    ("\u006B", 0x6B),
    ("\u006C", 0x6C),
    ("\u006D", 0x6D),
    ("\u006E", 0x6E),
    ("\u006E\u0303", 0x96),
    ("\u006F", 0x6F),
    ("\u006F\u0300", 0x98),
    ("\u006F\u0301", 0x97),
    ("\u006F\u0302", 0x99),
    ("\u006F\u0303", 0x9B),
    ("\u006F\u0308", 0x9A),
    ("\u0070", 0x70),
    ("\u0071", 0x71),
    ("\u0072", 0x72),
    ("\u0073", 0x73),
    ("\u0074", 0x74),
    ("\u0075", 0x75),
    ("\u0075\u0300", 0x9D),
    ("\u0075\u0301", 0x9C),
    ("\u0075\u0302", 0x9E),
    ("\u0075\u0308", 0x9F),
    ("\u0076", 0x76),
    ("\u0077", 0x77),
    ("\u0078", 0x78),
    ("\u0079", 0x79),
    ("\u0079\u0308", 0xD8),
    ("\u007A", 0x7A),
    ("\u007B", 0x7B),
    ("\u007C", 0x7C),
    ("\u007D", 0x7D),
    ("\u007E", 0x7E),
    ("\u007F", 0x7F),
    ("\u00A0", 0xCA),
    ("\u00A1", 0xC1),
    ("\u00A2", 0xA2),
    ("\u00A3", 0xA3),
    ("\u00A4", 0xDB),
    ("\u00A5", 0xB4),
    ("\u00A7", 0xA4),
    ("\u00A8", 0xAC),
    ("\u00A9", 0xA9),
    ("\u00AA", 0xBB),
    ("\u00AB", 0xC7),
    ("\u00AC", 0xC2),
    ("\u00AE", 0xA8),
    ("\u00AF", 0xF8),
    ("\u00B0", 0xA1),
    ("\u00B1", 0xB1),
    ("\u00B4", 0xAB),
    ("\u00B5", 0xB5),
    ("\u00B6", 0xA6),
    ("\u00B7", 0xE1),
    ("\u00B8", 0xFC),
    ("\u00BA", 0xBC),
    ("\u00BB", 0xC8),
    ("\u00BF", 0xC0),
    ("\u00C0", 0xCB),
    ("\u00C1", 0xE7),
    ("\u00C2", 0xE5),
    ("\u00C3", 0xCC),
    ("\u00C4", 0x80),
    ("\u00C5", 0x81),
    ("\u00C6", 0xAE),
    ("\u00C7", 0x82),
    ("\u00C8", 0xE9),
    ("\u00C9", 0x83),
    ("\u00CA", 0xE6),
    ("\u00CB", 0xE8),
    ("\u00CC", 0xED),
    ("\u00CD", 0xEA),
    ("\u00CE", 0xEB),
    ("\u00CF", 0xEC),
    ("\u00D1", 0x84),
    ("\u00D2", 0xF1),
    ("\u00D3", 0xEE),
    ("\u00D4", 0xEF),
    ("\u00D5", 0xCD),
    ("\u00D6", 0x85),
    ("\u00D8", 0xAF),
    ("\u00D9", 0xF4),
    ("\u00DA", 0xF2),
    ("\u00DB", 0xF3),
    ("\u00DC", 0x86),
    ("\u00DF", 0xA7),
    ("\u00E0", 0x88),
    ("\u00E1", 0x87),
    ("\u00E2", 0x89),
    ("\u00E3", 0x8B),
    ("\u00E4", 0x8A),
    ("\u00E5", 0x8C),
    ("\u00E6", 0xBE),
    ("\u00E7", 0x8D),
    ("\u00E8", 0x8F),
    ("\u00E9", 0x8E),
    ("\u00EA", 0x90),
    ("\u00EB", 0x91),
    ("\u00EC", 0x93),
    ("\u00ED", 0x92),
    ("\u00EE", 0x94),
    ("\u00EF", 0x95),
    ("\u00F1", 0x96),
    ("\u00F2", 0x98),
    ("\u00F3", 0x97),
    ("\u00F4", 0x99),
    ("\u00F5", 0x9B),
    ("\u00F6", 0x9A),
    ("\u00F7", 0xD6),
    ("\u00F8", 0xBF),
    ("\u00F9", 0x9D),
    ("\u00FA", 0x9C),
    ("\u00FB", 0x9E),
    ("\u00FC", 0x9F),
    ("\u00FF", 0xD8),
    ("\u0131", 0xF5),
    ("\u0152", 0xCE),
    ("\u0153", 0xCF),
    ("\u0178", 0xD9),
    ("\u0192", 0xC4),
    ("\u02C6", 0xF6),
    ("\u02C7", 0xFF),
    ("\u02D8", 0xF9),
    ("\u02D9", 0xFA),
    ("\u02DA", 0xFB),
    ("\u02DB", 0xFE),
    ("\u02DC", 0xF7),
    ("\u02DD", 0xFD),
    ("\u03A9", 0xBD),
    ("\u03C0", 0xB9),
    ("\u2013", 0xD0),
    ("\u2014", 0xD1),
    ("\u2018", 0xD4),
    ("\u2019", 0xD5),
    ("\u201A", 0xE2),
    ("\u201C", 0xD2),
    ("\u201D", 0xD3),
    ("\u201E", 0xE3),
    ("\u2020", 0xA0),
    ("\u2021", 0xE0),
    ("\u2022", 0xA5),
    ("\u2026", 0xC9),
    ("\u2030", 0xE4),
    ("\u2039", 0xDC),
    ("\u203A", 0xDD),
    ("\u2044", 0xDA),
    ("\u20AC", 0xDB),
    ("\u2122", 0xAA),
    ("\u2126", 0xBD),
    ("\u2202", 0xB6),
    ("\u2206", 0xC6),
    ("\u220F", 0xB8),
    ("\u2211", 0xB7),
    ("\u221A", 0xC3),
    ("\u221E", 0xB0),
    ("\u222B", 0xBA),
    ("\u2248", 0xC5),
    ("\u2260", 0xAD),
    ("\u2264", 0xB2),
    ("\u2265", 0xB3),
    ("\u25CA", 0xD7),
    ("\uF8FF", 0xF0),
    ("\uFB01", 0xDE),
    ("\uFB02", 0xDF),
)


def check_table(entries: Sequence[MappingEntry]) -> int:
    """Verify the invariants longest-prefix lookup depends on.

    Checks that sources are non-empty and strictly increasing (sorted and
    unique), that codes fit in a byte, and that every multi-codepoint
    source is a base letter with its own entry followed by combining marks.

    Args:
        entries: Table to check, in lookup order

    Returns:
        Length of the longest source sequence

    Raises:
        TableError: On the first entry that breaks an invariant
    """
    singles = {source for source, _ in entries if len(source) == 1}
    longest = 0
    previous: str | None = None

    for index, (source, code) in enumerate(entries):
        if not source:
            raise TableError("empty source sequence", index)
        if not 0 <= code <= 0xFF:
            raise TableError(f"code {code} does not fit in a byte", index)
        if previous is not None and source <= previous:
            if source == previous:
                raise TableError(f"duplicate source {source!r}", index)
            raise TableError(f"{source!r} sorts before {previous!r}", index)
        if len(source) > 1:
            if source[0] not in singles:
                raise TableError(f"base {source[0]!r} of {source!r} has no entry", index)
            for mark in source[1:]:
                if not unicodedata.combining(mark):
                    raise TableError(
                        f"U+{ord(mark):04X} in {source!r} is not a combining mark", index
                    )
        previous = source
        longest = max(longest, len(source))

    return longest


MAX_SEQUENCE_LENGTH: int = check_table(KNOWN_SEQUENCES)

_SOURCES: tuple[str, ...] = tuple(source for source, _ in KNOWN_SEQUENCES)


def longest_prefix(text: str, pos: int = 0) -> MappingEntry | None:
    """Find the longest table entry that is a prefix of text[pos:].

    Bisects for the window of the next MAX_SEQUENCE_LENGTH scalar values.
    The entry at or just below the insertion point is the only candidate
    of that length or shorter; if it is not a literal prefix, no entry of
    the full window length is, so the window shrinks by one and the
    search repeats.

    Args:
        text: Source text
        pos: Index to match at

    Returns:
        The matching (source, code) entry, or None
    """
    end = min(pos + MAX_SEQUENCE_LENGTH, len(text))
    while end > pos:
        index = bisect_right(_SOURCES, text[pos:end]) - 1
        if index >= 0 and text.startswith(_SOURCES[index], pos):
            return KNOWN_SEQUENCES[index]
        end -= 1
    return None


def lookup(sequence: str) -> int | None:
    """Return the code for an exact source sequence, or None."""
    index = bisect_right(_SOURCES, sequence) - 1
    if index >= 0 and _SOURCES[index] == sequence:
        return KNOWN_SEQUENCES[index][1]
    return None


__all__ = [
    "KNOWN_SEQUENCES",
    "MAX_SEQUENCE_LENGTH",
    "MappingEntry",
    "check_table",
    "longest_prefix",
    "lookup",
]

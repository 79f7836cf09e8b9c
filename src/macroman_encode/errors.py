"""Exception classes for macroman_encode.

The scanner itself never raises for unencodable content: an unmappable
scalar value is reported inline as ``Unmappable`` in the step stream.
These exceptions cover the strict byte-conversion helpers, a broken
mapping table, and bad configuration.
"""

from __future__ import annotations


class MacRomanError(Exception):
    """Base exception for all macroman_encode errors.

    Subclass this for specific error categories.
    """

    pass


class UnmappableCharacterError(MacRomanError):
    """A scalar value with no MacRoman encoding was met in strict mode.

    Raised by ``encode_bytes`` (and friends) when the error policy is
    ``"strict"``. Never raised by ``encode`` itself.
    """

    def __init__(
        self,
        char: str,
        offset: int,
        source_file: str | None = None,
    ) -> None:
        """Initialize unmappable character error.

        Args:
            char: The offending scalar value (a one-character string)
            offset: Index of the character in the source text
            source_file: Path to source file (optional)
        """
        self.char = char
        self.offset = offset
        self.source_file = source_file

        location = f"{source_file}:{offset}" if source_file else f"offset {offset}"
        super().__init__(
            f"{location}: U+{ord(char):04X} {char!r} has no MacRoman encoding"
        )

    @property
    def codepoint(self) -> int:
        """The offending scalar value as an integer."""
        return ord(self.char)


class TableError(MacRomanError):
    """The mapping table violates one of its ordering invariants.

    A reordered or duplicated entry silently breaks longest-match lookup,
    so the table is checked at import and this is raised on the first
    bad entry.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        """Initialize table error.

        Args:
            message: Description of the violated invariant
            index: Position of the offending entry (optional)
        """
        self.index = index
        location = f"entry {index}: " if index is not None else ""
        super().__init__(f"{location}{message}")


class ConfigError(MacRomanError):
    """Invalid encode configuration value."""

    pass

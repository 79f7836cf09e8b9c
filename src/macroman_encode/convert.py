"""Byte-level helpers built on the step stream.

encode() leaves unmappable scalar values to the caller. These helpers
apply a policy for the common cases: collect the codes into ``bytes``,
list what cannot be encoded, or check whether anything would be lost.

The policy comes from the active EncodeConfig unless overridden per call.

Thread Safety:
All functions are pure apart from reading the thread-local config.

"""

from __future__ import annotations

import dataclasses

from macroman_encode.config import EncodeConfig, ErrorPolicy, get_encode_config
from macroman_encode.errors import UnmappableCharacterError
from macroman_encode.scanner import encode
from macroman_encode.steps import Mapped
from macroman_encode.utils.logger import get_logger

logger = get_logger(__name__)


def _resolve_config(errors: ErrorPolicy | None, replacement: int | None) -> EncodeConfig:
    config = get_encode_config()
    overrides: dict[str, object] = {}
    if errors is not None:
        overrides["errors"] = errors
    if replacement is not None:
        overrides["replacement"] = replacement
    if overrides:
        # replace() re-runs validation in __post_init__
        config = dataclasses.replace(config, **overrides)
    return config


def encode_bytes(
    source: str,
    *,
    errors: ErrorPolicy | None = None,
    replacement: int | None = None,
    source_file: str | None = None,
) -> bytes:
    """Encode text to MacRoman bytes.

    Args:
        source: Unicode text to encode
        errors: "strict", "replace" or "ignore" (default: active config)
        replacement: Byte code used by "replace" (default: active config)
        source_file: Optional source file path for error messages

    Returns:
        The MacRoman byte string

    Raises:
        UnmappableCharacterError: Under "strict", at the first scalar value
            with no MacRoman code
        ConfigError: If errors or replacement is invalid

    Example:
        >>> encode_bytes("Déjà vu")
        b'D\\x8ej\\x88 vu'
        >>> encode_bytes("I \\u2764 NY", errors="replace")
        b'I ? NY'
    """
    config = _resolve_config(errors, replacement)
    out = bytearray()

    for offset, _length, outcome in encode(source):
        if isinstance(outcome, Mapped):
            out.append(outcome.code)
            continue
        if config.errors == "strict":
            raise UnmappableCharacterError(outcome.char, offset, source_file)
        logger.debug(
            "%s U+%04X at %s%d",
            "Replacing" if config.errors == "replace" else "Dropping",
            outcome.codepoint,
            f"{source_file}:" if source_file else "offset ",
            offset,
        )
        if config.errors == "replace":
            out.append(config.replacement)

    return bytes(out)


def find_unmappable(source: str) -> list[tuple[int, str]]:
    """List every scalar value that has no MacRoman code.

    Useful for warning users about characters that will be replaced.

    Args:
        source: Text to check

    Returns:
        (offset, char) pairs in source order, duplicates included
    """
    return [
        (step.offset, step.outcome.char)
        for step in encode(source)
        if not isinstance(step.outcome, Mapped)
    ]


def can_encode(source: str) -> bool:
    """Check whether every scalar value in source has a MacRoman code."""
    return all(isinstance(step.outcome, Mapped) for step in encode(source))


__all__ = ["can_encode", "encode_bytes", "find_unmappable"]

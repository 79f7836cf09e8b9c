"""ContextVar-based encode configuration for macroman_encode.

Controls how the byte-conversion helpers (encode_bytes and friends)
treat scalar values that have no MacRoman code. The scanner itself is
policy-free: it always reports Unmappable steps inline.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from macroman_encode.config import EncodeConfig, encode_config_context

    with encode_config_context(EncodeConfig(errors="replace")):
        data = encode_bytes("naïve ☃")  # b"na\x95ve ?"

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Literal

from macroman_encode.errors import ConfigError

# PEP 695 type alias for unmappable-character policies
type ErrorPolicy = Literal["strict", "replace", "ignore"]

ERROR_POLICIES: frozenset[str] = frozenset({"strict", "replace", "ignore"})


@dataclass(frozen=True, slots=True)
class EncodeConfig:
    """Immutable encode configuration.

    Attributes:
        errors: What to do with an unmappable scalar value: "strict" raises
            UnmappableCharacterError, "replace" emits ``replacement``,
            "ignore" drops it.
        replacement: Byte code emitted under "replace" (default "?").

    """

    errors: ErrorPolicy = "strict"
    replacement: int = 0x3F

    def __post_init__(self) -> None:
        if self.errors not in ERROR_POLICIES:
            raise ConfigError(
                f"errors must be one of {sorted(ERROR_POLICIES)}, got {self.errors!r}"
            )
        if isinstance(self.replacement, bool) or not isinstance(self.replacement, int):
            raise ConfigError(f"replacement must be an int, got {self.replacement!r}")
        if not 0 <= self.replacement <= 0xFF:
            raise ConfigError(f"replacement must fit in a byte, got {self.replacement}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "EncodeConfig":
        """Create EncodeConfig from dictionary.

        Only includes keys that are valid EncodeConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> EncodeConfig.from_dict({"errors": "ignore", "font": "Chicago"})
            EncodeConfig(errors='ignore', replacement=63)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: EncodeConfig = EncodeConfig()

_encode_config: ContextVar[EncodeConfig] = ContextVar(
    "encode_config",
    default=_DEFAULT_CONFIG,
)


def get_encode_config() -> EncodeConfig:
    """Get current encode configuration (thread-local)."""
    return _encode_config.get()


def set_encode_config(config: EncodeConfig) -> None:
    """Set encode configuration for current context.

    Args:
        config: EncodeConfig instance to use for this context.

    """
    _encode_config.set(config)


def reset_encode_config() -> None:
    """Reset to default configuration."""
    _encode_config.set(_DEFAULT_CONFIG)


@contextmanager
def encode_config_context(config: EncodeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Args:
        config: EncodeConfig to use within the context.

    """
    previous = _encode_config.get()
    _encode_config.set(config)
    try:
        yield
    finally:
        _encode_config.set(previous)


__all__ = [
    "ERROR_POLICIES",
    "EncodeConfig",
    "ErrorPolicy",
    "encode_config_context",
    "get_encode_config",
    "reset_encode_config",
    "set_encode_config",
]

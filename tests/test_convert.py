"""Tests for the byte-level helpers: encode_bytes, find_unmappable, can_encode."""

import logging

import pytest

from macroman_encode import (
    ConfigError,
    EncodeConfig,
    UnmappableCharacterError,
    can_encode,
    encode_bytes,
    encode_config_context,
    find_unmappable,
)

ACUTE = "\N{COMBINING ACUTE ACCENT}"
THORN = "\N{LATIN SMALL LETTER THORN}"
ETH = "\N{LATIN SMALL LETTER ETH}"
SNOWMAN = "\N{SNOWMAN}"


class TestEncodeBytes:
    def test_plain_text(self) -> None:
        assert encode_bytes("D\xe9j\xe0 vu") == b"D\x8ej\x88 vu"

    def test_decomposed_text(self) -> None:
        assert encode_bytes("De" + ACUTE + "ja\N{COMBINING GRAVE ACCENT} vu") == b"D\x8ej\x88 vu"

    def test_empty(self) -> None:
        assert encode_bytes("") == b""

    def test_strict_is_default(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            encode_bytes("ab" + THORN + "c")
        assert exc_info.value.char == THORN
        assert exc_info.value.offset == 2

    def test_strict_reports_first_unmappable(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            encode_bytes(ETH + THORN, errors="strict")
        assert exc_info.value.char == ETH

    def test_strict_offset_accounts_for_pairs(self) -> None:
        with pytest.raises(UnmappableCharacterError) as exc_info:
            encode_bytes("e" + ACUTE + SNOWMAN)
        assert exc_info.value.offset == 2

    def test_strict_with_source_file(self) -> None:
        with pytest.raises(UnmappableCharacterError, match=r"^notes\.txt:0: U\+2603"):
            encode_bytes(SNOWMAN, source_file="notes.txt")

    def test_replace(self) -> None:
        assert encode_bytes("I " + SNOWMAN + " NY", errors="replace") == b"I ? NY"

    def test_replace_each_scalar_value(self) -> None:
        assert encode_bytes(THORN + ETH, errors="replace") == b"??"

    def test_custom_replacement(self) -> None:
        source = f"Ek get eti{ETH} gler \xe1n {THORN}ess a{ETH} ver{ETH}a s\xe1r."
        result = encode_bytes(source, errors="replace", replacement=ord("@"))
        assert result == b"Ek get eti@ gler \x87n @ess a@ ver@a s\x87r."

    def test_ignore(self) -> None:
        assert encode_bytes("a" + SNOWMAN + "b", errors="ignore") == b"ab"

    def test_invalid_policy(self) -> None:
        with pytest.raises(ConfigError):
            encode_bytes("a", errors="bogus")  # type: ignore[arg-type]

    def test_invalid_replacement(self) -> None:
        with pytest.raises(ConfigError):
            encode_bytes("a", errors="replace", replacement=300)


class TestEncodeBytesConfig:
    """encode_bytes() falls back to the active EncodeConfig."""

    def test_config_policy(self) -> None:
        with encode_config_context(EncodeConfig(errors="ignore")):
            assert encode_bytes(SNOWMAN + "x") == b"x"

    def test_config_replacement(self) -> None:
        with encode_config_context(EncodeConfig(errors="replace", replacement=0x2A)):
            assert encode_bytes(SNOWMAN) == b"*"

    def test_argument_overrides_config(self) -> None:
        with encode_config_context(EncodeConfig(errors="ignore")):
            assert encode_bytes(SNOWMAN, errors="replace") == b"?"
            with pytest.raises(UnmappableCharacterError):
                encode_bytes(SNOWMAN, errors="strict")

    def test_replacement_override_keeps_config_policy(self) -> None:
        with encode_config_context(EncodeConfig(errors="replace")):
            assert encode_bytes(SNOWMAN, replacement=0x21) == b"!"


class TestLogging:
    def test_replacement_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="macroman_encode")
        encode_bytes("\U0001f600", errors="replace")
        assert "Replacing U+1F600 at offset 0" in caplog.text

    def test_dropping_logged_with_source_file(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="macroman_encode")
        encode_bytes("ab" + SNOWMAN, errors="ignore", source_file="menu.txt")
        assert "Dropping U+2603 at menu.txt:2" in caplog.text

    def test_logger_name(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="macroman_encode")
        encode_bytes(SNOWMAN, errors="replace")
        assert caplog.records[0].name == "macroman_encode.convert"


class TestFindUnmappable:
    def test_lists_offsets_and_chars(self) -> None:
        source = f"a{THORN}b{SNOWMAN}{THORN}"
        assert find_unmappable(source) == [(1, THORN), (3, SNOWMAN), (4, THORN)]

    def test_nothing_unmappable(self) -> None:
        assert find_unmappable("caf\xe9") == []

    def test_orphan_mark_is_unmappable(self) -> None:
        assert find_unmappable("z" + ACUTE) == [(1, ACUTE)]


class TestCanEncode:
    def test_true(self) -> None:
        assert can_encode("Cr\xe8me br\xfbl\xe9e \N{EURO SIGN}5")
        assert can_encode("")

    def test_false(self) -> None:
        assert not can_encode("s" + THORN)
